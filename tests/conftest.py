"""Fixtures compartidas: un proyecto de blog desechable en tmp_path."""

import pytest

from blogbuild.config import BuildConfig


def make_post(title=None, date=None, body='# Hi\n'):
    lines = ['---']
    if title is not None:
        lines.append(f'title: "{title}"')
    if date is not None:
        lines.append(f'date: "{date}"')
    lines.append('---')
    return '\n'.join(lines) + '\n' + body


@pytest.fixture
def site(tmp_path):
    """Raíz de proyecto con assets estáticos y un directorio posts/ vacío."""
    (tmp_path / 'styles.css').write_text('body { color: #222; }\n', encoding='utf-8')
    (tmp_path / 'index.html').write_text('<!DOCTYPE html><title>Blog</title>\n', encoding='utf-8')
    (tmp_path / 'posts').mkdir()
    return tmp_path


@pytest.fixture
def write_post(site):
    def _write(filename, content=None, **kwargs):
        path = site / 'posts' / filename
        path.write_text(content if content is not None else make_post(**kwargs), encoding='utf-8')
        return path
    return _write


@pytest.fixture
def config(site):
    # Formato fijo para que la salida no dependa del locale
    return BuildConfig(root=site, date_format='%Y-%m-%d')
