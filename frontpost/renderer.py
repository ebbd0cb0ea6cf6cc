import os
from pathlib import Path

import markdown
from jinja2 import Environment, FileSystemLoader, select_autoescape

from frontpost.logger import logger

DEFAULT_EXTENSIONS = ('extra', 'codehilite', 'toc')


class MarkdownRenderer:
    """Convierte el body de un Post a HTML."""

    def __init__(self, extensions=DEFAULT_EXTENSIONS):
        self.md = markdown.Markdown(extensions=list(extensions))

    def render(self, body):
        html = self.md.convert(body)
        # El estado de toc/footnotes no debe filtrarse al siguiente documento
        self.md.reset()
        return html


class PostRenderer:
    """Renderiza cada Post con la plantilla de su layout (`<layout>.html`)."""

    def __init__(self, config, env=None, markup=None):
        self.config = config
        self.env = env or Environment(
            loader=FileSystemLoader(config['templates_dir']),
            autoescape=select_autoescape(['html']),
        )
        self.markup = markup or MarkdownRenderer(config.get('markdown_extensions', DEFAULT_EXTENSIONS))
        self.output_dir = config['output_dir']

    def render(self, post):
        """HTML completo de la página; TemplateNotFound si el layout no existe."""
        template = self.env.get_template(f"{post.layout}.html")
        return template.render(
            config=self.config,
            post=post,
            content=self.markup.render(post.body),
        )

    def output_path(self, source_path, post):
        name = f"{Path(source_path).stem}.html"
        if self.config.get('dated_paths'):
            return os.path.join(self.output_dir, post.date.strftime('%Y/%m'), name)
        return os.path.join(self.output_dir, name)

    def write(self, source_path, post):
        html = self.render(post)
        target = self.output_path(source_path, post)
        os.makedirs(os.path.dirname(target), exist_ok=True)
        with open(target, "w", encoding="utf-8") as f:
            f.write(html)
        logger.info(f"Renderizado {source_path} -> {target}")
        return target

    def write_all(self, posts):
        """Escribe todas las páginas; `posts` son pares (ruta, Post)."""
        return [self.write(path, post) for path, post in posts]
