import json

import pytest

GOOD_POST = """---
layout: post
title: {title}
date: {date}
---
Hello *{title}*.
"""


@pytest.fixture
def write_post(tmp_path):
    content_dir = tmp_path / "content"
    content_dir.mkdir(exist_ok=True)

    def _write(name, title="Example", date="2020-08-01", text=None):
        path = content_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text if text is not None else GOOD_POST.format(title=title, date=date))
        return path

    return _write


@pytest.fixture
def blog_config(tmp_path):
    templates_dir = tmp_path / "templates"
    templates_dir.mkdir()
    (templates_dir / "post.html").write_text(
        "<h1>{{ post.title }}</h1><time>{{ post.date }}</time>{{ content | safe }}"
    )
    return {
        "name": "Test Blog",
        "content_dir": str(tmp_path / "content"),
        "output_dir": str(tmp_path / "docs"),
        "templates_dir": str(templates_dir),
    }


@pytest.fixture
def config_file(tmp_path, blog_config):
    path = tmp_path / "config.json"
    path.write_text(json.dumps([blog_config]))
    return path
