"""Turns arbitrary text into lowercase ASCII slugs."""

from limace.core.slugifier import DEFAULT_SEPARATOR, Slugifier, SlugWriter, StringLike

__version__ = '0.1.0'

__all__ = ['DEFAULT_SEPARATOR', 'Slugifier', 'SlugWriter', 'slugify', '__version__']


def slugify(text: StringLike, separator: str = DEFAULT_SEPARATOR) -> str:
    """Shortcut for ``Slugifier(separator).slugify(text)``."""
    return Slugifier(separator).slugify(text)
