import logging
from pathlib import Path

PACKAGE_TEMPLATES_DIR = Path(__file__).parent / 'templates'


class Config:
    HOST = '0.0.0.0'
    PORT = 3000
    # Relative to the working directory at start-up.
    TEMPLATES_DIR = 'templates'
    LOG_LEVEL = 'INFO'
    DEBUG = False


def resolve_templates_dir(value):
    path = Path(value)
    if not path.is_absolute():
        path = Path.cwd() / path
    return path


def configure_logging(level='INFO'):
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )
