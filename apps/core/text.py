"""Text helpers for derived content fields."""

import math

from django.utils.text import slugify

WORDS_PER_MINUTE = 200


def calculate_read_time(content: str) -> int:
    """Minutes needed to read ``content`` at 200 words per minute."""
    words = len(content.split())
    return math.ceil(words / WORDS_PER_MINUTE) if words else 0


def unique_slug(title: str, *, queryset, max_length: int = 220) -> str:
    """
    Slugify ``title`` and append a numeric suffix until it is unused in ``queryset``.
    """
    base = slugify(title)[:max_length].strip('-') or 'article'
    slug = base
    suffix = 2
    while queryset.filter(slug=slug).exists():
        tail = f'-{suffix}'
        slug = f'{base[:max_length - len(tail)]}{tail}'
        suffix += 1
    return slug
