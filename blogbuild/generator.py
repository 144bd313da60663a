import json
import logging
import os
import shutil

from jinja2 import Environment, PackageLoader

from blogbuild.dates import format_date, parse_date, sort_key
from blogbuild.models import PostRecord
from blogbuild.parser import ContentParser

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = '.md'
INDEX_FILE = 'index.json'


def sort_records(records):
    """Ordena por fecha descendente. sorted() es estable, también con reverse=True."""
    return sorted(records, key=lambda r: sort_key(r.date), reverse=True)


class SiteGenerator:
    def __init__(self, config, parser=None):
        self.config = config
        self.parser = parser or ContentParser()
        # Sin autoescape: el título se inserta tal cual, igual que el HTML del post
        self.env = Environment(loader=PackageLoader('blogbuild', 'templates'), autoescape=False)
        self.template = self.env.get_template('post.html')

    def build(self):
        """Ejecuta el pipeline completo y devuelve los registros ya ordenados."""
        self.prepare_output()

        records = []
        seen = set()
        for filename in self.load_posts():
            record = self.render_post(filename)
            if record.slug in seen:
                logger.warning(f"⚠️ Slug duplicado '{record.slug}': se sobrescribe {record.slug}.html")
            seen.add(record.slug)
            records.append(record)

        posts = self.write_index(records)
        logger.info(f"✅ Build complete! ({len(posts)} posts)")
        return posts

    def prepare_output(self):
        """Crea dist/ y dist/posts/ y copia los assets estáticos."""
        posts_dir = self.config.posts_output_path
        os.makedirs(posts_dir, exist_ok=True)

        for src, dst in self.config.static_paths():
            shutil.copyfile(src, dst)
            logger.debug(f"Copiado {src} -> {dst}")

    def load_posts(self):
        """Nombres de los .md del directorio de origen, ordenados por nombre."""
        source_dir = self.config.source_path
        files = sorted(name for name in os.listdir(source_dir) if name.endswith(MARKDOWN_SUFFIX))
        logger.info(f"📂 {len(files)} posts encontrados en {source_dir}")
        return files

    def render_page(self, metadata, html_content):
        title = metadata.get('title')
        return self.template.render(
            title='' if title is None else title,
            date=format_date(metadata.get('date'), self.config.date_format),
            content=html_content,
        )

    def render_post(self, filename):
        """Renderiza un post a dist/posts/<slug>.html y devuelve su PostRecord."""
        slug = filename[:-len(MARKDOWN_SUFFIX)]

        with open(self.config.source_path / filename, 'r', encoding='utf-8') as f:
            raw = f.read()

        metadata, html_content = self.parser.parse(raw)

        if metadata.get('title') is None:
            logger.warning(f"⚠️ {filename}: falta 'title'")
        if parse_date(metadata.get('date')) is None:
            logger.warning(f"⚠️ {filename}: 'date' ausente o inválida ({metadata.get('date')!r})")

        with open(self.config.posts_output_path / f"{slug}.html", 'w', encoding='utf-8') as f:
            f.write(self.render_page(metadata, html_content))

        return PostRecord(title=metadata.get('title'), date=metadata.get('date'), slug=slug)

    def write_index(self, records):
        """Escribe dist/posts/index.json con los registros de más reciente a más antiguo."""
        posts = sort_records(records)
        with open(self.config.posts_output_path / INDEX_FILE, 'w', encoding='utf-8') as f:
            json.dump([p.to_dict() for p in posts], f, indent=2, ensure_ascii=False, default=str)
        return posts
