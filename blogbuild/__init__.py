"""Generador estático: posts markdown con frontmatter -> HTML + índice JSON."""

from blogbuild.config import BuildConfig, load_config
from blogbuild.generator import SiteGenerator, sort_records
from blogbuild.models import PostRecord

__all__ = ['BuildConfig', 'load_config', 'SiteGenerator', 'sort_records', 'PostRecord']
__version__ = '0.1.0'
