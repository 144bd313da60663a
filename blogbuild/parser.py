import logging

import frontmatter
import yaml
from markdown_it import MarkdownIt

logger = logging.getLogger(__name__)

# CommonMark más tablas y tachado, como GFM
MARKDOWN_RULES = ['table', 'strikethrough']


def parse_front_matter(raw):
    """
    Separa el frontmatter YAML del cuerpo markdown.

    Un frontmatter mal formado no detiene el build: se devuelven metadatos
    vacíos y el texto completo como cuerpo.
    """
    try:
        post = frontmatter.loads(raw)
    except (yaml.YAMLError, TypeError, ValueError) as e:
        logger.warning(f"⚠️ Frontmatter inválido, se ignora: {e}")
        return {}, raw
    return dict(post.metadata), post.content


class ContentParser:
    def __init__(self):
        self.md = MarkdownIt('commonmark', {'html': True}).enable(MARKDOWN_RULES)

    def parse_front_matter(self, raw):
        return parse_front_matter(raw)

    def render_markdown(self, body):
        """Convierte el cuerpo markdown en un fragmento HTML."""
        return self.md.render(body).strip()

    def parse(self, raw):
        metadata, body = self.parse_front_matter(raw)
        return metadata, self.render_markdown(body)
