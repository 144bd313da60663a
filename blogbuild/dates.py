"""Parseo y formateo de las fechas del frontmatter."""

from datetime import date, datetime, timezone

from dateutil import parser as date_parser

# Los campos que falten en la fecha se completan con 1 de enero, no con hoy
PARSE_DEFAULT = datetime(2000, 1, 1)


def parse_date(value):
    """
    Convierte el valor 'date' del frontmatter en un datetime con zona.

    Acepta datetime, date (lo que devuelve YAML para fechas sin comillas),
    strings ISO u otros formatos que entienda dateutil, y milisegundos
    desde epoch. Los valores sin zona se toman como UTC. Devuelve None si
    no se puede interpretar.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            parsed = date_parser.isoparse(text)
        except (ValueError, OverflowError, TypeError):
            try:
                parsed = date_parser.parse(text, default=PARSE_DEFAULT)
            except (ValueError, OverflowError, TypeError):
                return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_date(value, fmt='%x'):
    """Fecha corta para la cabecera del post; '' si no es una fecha válida."""
    parsed = parse_date(value)
    if parsed is None:
        return ''
    # Se formatea con los campos propios del valor, sin convertir de zona
    return parsed.strftime(fmt)


def sort_key(value):
    """Clave para ordenar de más reciente a más antiguo (reverse=True).

    Los posts sin fecha válida quedan al final.
    """
    parsed = parse_date(value)
    if parsed is None:
        return (False, 0.0)
    return (True, parsed.timestamp())
