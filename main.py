import argparse
import sys

from frontpost.config import BlogSelector
from frontpost.errors import ContentError
from frontpost.loader import load_posts
from frontpost.logger import logger
from frontpost.parser import ContentParser
from frontpost.reader import ContentReader
from frontpost.renderer import PostRenderer


class BlogEngine:
    """Une lector, parser y renderer para un blog de config.json"""

    def __init__(self, config):
        self.config = config
        self.name = config['name']
        self.reader = ContentReader(config['content_dir'])
        self.parser = ContentParser(config['date_formats'])

    def check(self):
        """Parsea todo el contenido y devuelve la lista de errores encontrados"""
        errors = []
        for path in self.reader.list_files():
            try:
                self.parser.parse(self.reader.read(path), path)
            except ContentError as e:
                logger.error(f"❌ {e}")
                errors.append(e)
        if not errors:
            logger.info(f"✅ [{self.name}] Todo el contenido es válido")
        return errors

    def render(self):
        """Carga los posts (según la política strict) y escribe el HTML"""
        posts = load_posts(self.reader, self.parser, strict=self.config['strict'])
        if not posts:
            logger.warning(f"⚠️ [{self.name}] No se encontraron posts para renderizar.")
            return []
        written = PostRenderer(self.config).write_all(posts)
        logger.info(f"✅ [{self.name}] {len(written)} posts renderizados en {self.config['output_dir']}")
        return written


def build_arg_parser():
    parser = argparse.ArgumentParser(
        description="Valida y renderiza posts con front matter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Ejemplos de uso:
  # Listar blogs disponibles
  python main.py --list

  # Validar el contenido de un blog
  python main.py --blog "Tech Notes" --check

  # Renderizar todos los blogs
  python main.py --render
        """
    )
    parser.add_argument('--config', '-c', type=str, default=None,
                        help='Ruta al archivo de configuración (por defecto config.json)')
    parser.add_argument('--blog', '-b', type=str,
                        help='Nombre del blog específico a procesar')

    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument('--list', '-l', action='store_true',
                        help='Listar todos los blogs disponibles')
    action.add_argument('--check', action='store_true',
                        help='Validar los archivos de contenido')
    action.add_argument('--render', '-r', action='store_true',
                        help='Renderizar los posts a HTML')
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    try:
        blog_selector = BlogSelector(args.config)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"❌ {e}")
        return 1

    if args.list:
        print("Blogs disponibles:")
        for i, blog_name in enumerate(blog_selector.list_blogs(), 1):
            print(f"  {i}. {blog_name}")
        return 0

    try:
        if args.blog:
            blog_configs = [blog_selector.get_blog_config(args.blog)]
        else:
            blog_configs = blog_selector.get_blog_config()
    except ValueError as e:
        logger.error(f"❌ {e}")
        return 1

    failed = False
    for blog_config in blog_configs:
        engine = BlogEngine(blog_config)
        try:
            if args.check:
                failed = bool(engine.check()) or failed
            else:
                engine.render()
        except (ContentError, OSError) as e:
            logger.error(f"❌ Error procesando {blog_config['name']}: {e}")
            failed = True

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
