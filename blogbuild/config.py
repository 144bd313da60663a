import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path

CONFIG_FILE = 'config.json'


def _default_static_files():
    return ['styles.css', 'index.html']


@dataclass
class BuildConfig:
    """Configuración de una ejecución del build.

    Las rutas relativas se resuelven contra ``root``. Sin config.json los
    valores por defecto reproducen el layout clásico: posts/ -> dist/.
    """
    root: Path = field(default_factory=Path.cwd)
    source_dir: str = 'posts'
    output_dir: str = 'dist'
    static_files: list = field(default_factory=_default_static_files)
    date_format: str = '%x'
    locale: str = None
    log_file: str = None

    def __post_init__(self):
        self.root = Path(self.root)

    def _resolve(self, value):
        path = Path(value)
        return path if path.is_absolute() else self.root / path

    @property
    def source_path(self) -> Path:
        return self._resolve(self.source_dir)

    @property
    def output_path(self) -> Path:
        return self._resolve(self.output_dir)

    @property
    def posts_output_path(self) -> Path:
        return self.output_path / 'posts'

    @property
    def log_path(self):
        return self._resolve(self.log_file) if self.log_file else None

    def static_paths(self):
        """Pares (origen, destino) de los assets estáticos."""
        return [(self._resolve(name), self.output_path / Path(name).name)
                for name in self.static_files]


def load_config(path=None, root=None) -> BuildConfig:
    """
    Carga la configuración desde un JSON.

    Si no se indica ``path`` se busca config.json en ``root`` y, si no
    existe, se usan los valores por defecto. Un archivo pedido
    explícitamente que no existe es un error fatal.
    """
    root = Path(root) if root else Path.cwd()

    if path is None:
        path = root / CONFIG_FILE
        if not path.exists():
            return BuildConfig(root=root)
    elif not os.path.exists(path):
        raise FileNotFoundError(f"❌ No se encontró {path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"❌ {path} debe contener un objeto JSON")

    known = {f.name for f in fields(BuildConfig)} - {'root'}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"❌ Claves desconocidas en {path}: {', '.join(unknown)}")

    _check_types(data, path)
    return BuildConfig(root=root, **data)


def _check_types(data, path):
    static_files = data.get('static_files', [])
    if not isinstance(static_files, list) or not all(isinstance(name, str) for name in static_files):
        raise ValueError(f"❌ 'static_files' en {path} debe ser una lista de rutas")

    for key in ('source_dir', 'output_dir', 'date_format'):
        if key in data and not isinstance(data[key], str):
            raise ValueError(f"❌ '{key}' en {path} debe ser un string")

    for key in ('locale', 'log_file'):
        if data.get(key) is not None and not isinstance(data[key], str):
            raise ValueError(f"❌ '{key}' en {path} debe ser un string o null")
