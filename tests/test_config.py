"""Tests for blog configuration loading."""

import json

import pytest

from frontpost.config import BlogSelector
from frontpost.parser import DEFAULT_DATE_FORMATS


class TestBlogSelector:
    def test_applies_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps([{"name": "Notes"}]))

        config = BlogSelector(str(path)).get_blog_config("Notes")

        assert config["content_dir"] == "content"
        assert config["output_dir"] == "docs"
        assert config["date_formats"] == list(DEFAULT_DATE_FORMATS)
        assert config["strict"] is False

    def test_lists_and_selects_case_insensitive(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps([{"name": "Tech Notes"}, {"name": "Travel"}]))
        selector = BlogSelector(str(path))

        assert selector.list_blogs() == ["Tech Notes", "Travel"]
        assert selector.get_blog_config("tech notes")["name"] == "Tech Notes"
        assert len(selector.get_blog_config()) == 2

    def test_unknown_blog(self, config_file):
        with pytest.raises(ValueError):
            BlogSelector(str(config_file)).get_blog_config("nope")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            BlogSelector(str(tmp_path / "missing.json"))

    def test_entry_without_name(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps([{"content_dir": "content"}]))

        with pytest.raises(ValueError):
            BlogSelector(str(path))

    def test_config_path_from_env(self, config_file, monkeypatch):
        monkeypatch.setenv("FRONTPOST_CONFIG", str(config_file))

        assert BlogSelector().list_blogs() == ["Test Blog"]

    def test_strict_from_env(self, config_file, monkeypatch):
        monkeypatch.setenv("FRONTPOST_STRICT", "1")

        assert BlogSelector(str(config_file)).get_blog_config("Test Blog")["strict"] is True
