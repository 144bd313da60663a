from dataclasses import dataclass
from datetime import date


@dataclass
class PostRecord:
    """Metadatos mínimos de un post para el índice JSON."""
    title: object
    date: object
    slug: str

    def to_dict(self):
        value = self.date
        if isinstance(value, date):
            value = value.isoformat()
        return {
            'title': self.title,
            'date': value,
            'slug': self.slug,
        }
