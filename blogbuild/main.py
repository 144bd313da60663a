import argparse
import locale
import logging

from blogbuild.config import load_config
from blogbuild.generator import SiteGenerator
from blogbuild.logger import setup_logger

logger = logging.getLogger(__name__)


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog='blogbuild',
        description="Convierte posts markdown con frontmatter en HTML estático y un índice JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Ejemplos de uso:
  # Build del directorio actual (posts/ -> dist/)
  blogbuild

  # Build de otro proyecto con su config.json
  blogbuild --root ~/blog --config ~/blog/config.json
        """
    )
    parser.add_argument('--root', '-r', type=str, default=None,
                        help='Raíz del proyecto (por defecto, el directorio actual)')
    parser.add_argument('--config', '-c', type=str, default=None,
                        help='Archivo JSON de configuración (por defecto, <root>/config.json si existe)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Muestra también los mensajes de depuración')
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    setup_logger(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = load_config(args.config, root=args.root)
    except (OSError, ValueError) as e:
        logger.error(str(e))
        return 1

    if config.log_path:
        setup_logger(config.log_path, level=logging.DEBUG if args.verbose else logging.INFO)

    if config.locale:
        try:
            locale.setlocale(locale.LC_TIME, config.locale)
        except locale.Error as e:
            logger.error(f"❌ Locale '{config.locale}' no disponible: {e}")
            return 1

    try:
        SiteGenerator(config).build()
    except OSError as e:
        logger.error(f"❌ Build abortado: {e}")
        return 1
    return 0
