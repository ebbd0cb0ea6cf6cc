import json
import os

from frontpost.parser import DEFAULT_DATE_FORMATS
from frontpost.renderer import DEFAULT_EXTENSIONS

DEFAULTS = {
    'content_dir': 'content',
    'output_dir': 'docs',
    'templates_dir': 'templates',
    'date_formats': list(DEFAULT_DATE_FORMATS),
    'markdown_extensions': list(DEFAULT_EXTENSIONS),
    'dated_paths': False,
    'strict': False,
}


def _env_flag(name):
    return os.getenv(name, '').strip().lower() in ('1', 'true', 'yes', 'on')


class BlogSelector:
    """Gestiona la selección y carga de configuraciones de blogs"""

    def __init__(self, config_file=None):
        self.config_file = config_file or os.getenv('FRONTPOST_CONFIG', 'config.json')
        self.blogs = [self._with_defaults(blog) for blog in self._load_config()]

    def _load_config(self):
        """Carga el archivo de configuración JSON"""
        if not os.path.exists(self.config_file):
            raise FileNotFoundError(f"No se encontró {self.config_file}")

        with open(self.config_file, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, list):
            raise ValueError(f"{self.config_file} debe contener una lista de blogs")
        return data

    def _with_defaults(self, blog):
        if not isinstance(blog, dict) or not blog.get('name'):
            raise ValueError(f"Entrada de blog sin 'name' en {self.config_file}: {blog!r}")
        config = dict(DEFAULTS, **blog)
        if _env_flag('FRONTPOST_STRICT'):
            config['strict'] = True
        return config

    def list_blogs(self):
        """Lista todos los blogs disponibles"""
        return [blog['name'] for blog in self.blogs]

    def get_blog_config(self, blog_name=None):
        """Obtiene la configuración de un blog específico o todos"""
        if blog_name:
            for blog in self.blogs:
                if blog['name'].lower() == blog_name.lower():
                    return blog
            raise ValueError(f"Blog '{blog_name}' no encontrado en {self.config_file}")
        return self.blogs
