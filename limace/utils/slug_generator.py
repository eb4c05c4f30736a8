from typing import Optional

from limace.core.config_manager import ConfigManager
from limace.core.slugifier import Slugifier, StringLike

def generate_slug(text: StringLike, separator: Optional[str] = None) -> str:
    """
    Generates a URL-friendly slug from a given string.

    Args:
        text: The input string (e.g., a page title).
        separator: Character joining the words of the slug. When omitted,
            the separator configured through ConfigManager is used.

    Returns:
        A clean, lowercase slug.
    """
    if separator is None:
        slugifier = ConfigManager().build_slugifier()
    else:
        slugifier = Slugifier(separator)
    return slugifier.slugify(text)
