import json
from pathlib import Path

import pytest

from blogbuild.config import BuildConfig, load_config


def test_defaults_without_config_file(tmp_path):
    config = load_config(root=tmp_path)
    assert config.source_path == tmp_path / 'posts'
    assert config.output_path == tmp_path / 'dist'
    assert config.posts_output_path == tmp_path / 'dist' / 'posts'
    assert config.static_paths() == [
        (tmp_path / 'styles.css', tmp_path / 'dist' / 'styles.css'),
        (tmp_path / 'index.html', tmp_path / 'dist' / 'index.html'),
    ]
    assert config.log_path is None


def test_reads_config_json_from_root(tmp_path):
    (tmp_path / 'config.json').write_text(json.dumps({
        'source_dir': 'content',
        'output_dir': '/srv/www',
        'date_format': '%d/%m/%Y',
        'log_file': 'build.log',
    }), encoding='utf-8')

    config = load_config(root=tmp_path)

    assert config.source_path == tmp_path / 'content'
    assert config.output_path == Path('/srv/www')
    assert config.date_format == '%d/%m/%Y'
    assert config.log_path == tmp_path / 'build.log'


def test_explicit_missing_config_is_fatal(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / 'nope.json', root=tmp_path)


def test_unknown_keys_are_rejected(tmp_path):
    path = tmp_path / 'config.json'
    path.write_text(json.dumps({'outptu_dir': 'x'}), encoding='utf-8')
    with pytest.raises(ValueError, match='outptu_dir'):
        load_config(path, root=tmp_path)


def test_static_files_are_copied_flat():
    config = BuildConfig(root='/site', static_files=['assets/styles.css'])
    assert config.static_paths() == [(Path('/site/assets/styles.css'), Path('/site/dist/styles.css'))]


def test_static_files_must_be_a_list(tmp_path):
    path = tmp_path / 'config.json'
    path.write_text(json.dumps({'static_files': 'styles.css'}), encoding='utf-8')
    with pytest.raises(ValueError, match='static_files'):
        load_config(path, root=tmp_path)


@pytest.mark.parametrize('data', [
    {'output_dir': 3},
    {'date_format': None},
    {'locale': ['es_ES']},
    {'static_files': ['styles.css', 1]},
])
def test_wrong_value_types_are_rejected(tmp_path, data):
    path = tmp_path / 'config.json'
    path.write_text(json.dumps(data), encoding='utf-8')
    with pytest.raises(ValueError):
        load_config(path, root=tmp_path)


def test_null_optional_values_are_accepted(tmp_path):
    path = tmp_path / 'config.json'
    path.write_text(json.dumps({'locale': None, 'log_file': None}), encoding='utf-8')
    assert load_config(path, root=tmp_path).locale is None
