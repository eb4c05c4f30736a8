from typing import Optional

from unidecode import unidecode, UnidecodeError


def transliterate_char(char: str) -> Optional[str]:
    """
    Maps a single character to its closest ASCII approximation.

    Args:
        char: A string of exactly one character.

    Returns:
        The ASCII replacement, which may be several characters long or empty,
        or None when the transliteration table has no entry for the character.
    """
    codepoint = ord(char)
    if codepoint < 0x80:
        return char
    # Lone surrogates are not scalar values; unidecode would warn about them.
    if 0xD800 <= codepoint <= 0xDFFF:
        return None
    try:
        return unidecode(char, errors='strict')
    except UnidecodeError:
        return None


def transliterate(text: str) -> str:
    """Transliterates a whole string, dropping characters without a mapping."""
    return ''.join(transliterate_char(char) or '' for char in text)
