from typing import List, Union

from limace.core.transliteration import transliterate_char

DEFAULT_SEPARATOR = '-'

StringLike = Union[str, bytes, bytearray, memoryview]


def _as_text(value: StringLike) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode('utf-8', errors='replace')
    raise TypeError(f"Input must be a string or bytes-like object, not {type(value).__name__}.")


def _check_separator(value: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Separator must be a string, not {type(value).__name__}.")
    if len(value) != 1:
        raise ValueError(f"Separator must be exactly one character, got {value!r}.")
    return value


class Slugifier:
    """
    Converts arbitrary strings into URL-friendly slugs.

    A slug is made of lowercase ASCII letters and digits joined by a single
    separator character (``-`` by default). Non-ASCII characters are
    transliterated first, so ``"Crème brûlée!"`` becomes ``"creme-brulee"``.

    The separator is not checked: an alphanumeric separator, or one that some
    input transliterates to, produces slugs whose structure cannot be told
    apart from their content. Avoiding that is up to the caller.

    Example:
        >>> Slugifier().slugify("Hello, World!")
        'hello-world'
        >>> Slugifier().with_separator('_').slugify("Hello, World!")
        'hello_world'
    """

    __slots__ = ('_separator',)

    def __init__(self, separator: str = DEFAULT_SEPARATOR):
        self._separator = _check_separator(separator)

    @classmethod
    def default(cls) -> 'Slugifier':
        """Returns a Slugifier using ``-`` as the separator."""
        return cls()

    @property
    def separator(self) -> str:
        return self._separator

    def set_separator(self, value: str) -> None:
        """Replaces the separator in place."""
        self._separator = _check_separator(value)

    def with_separator(self, value: str) -> 'Slugifier':
        """Returns a copy of this Slugifier using the given separator."""
        clone = self.__copy__()
        clone.set_separator(value)
        return clone

    def slugify(self, value: StringLike) -> str:
        """
        Converts the input into a slug.

        Rules:
            - Unicode characters are transliterated to ASCII.
            - Uppercase ASCII letters are lowercased.
            - Every other non-alphanumeric character, and every character
              without a transliteration, becomes the separator.
            - Runs of separators collapse into one; none is kept at either end.

        Never fails for string input; empty or fully non-alphanumeric input
        yields an empty string.
        """
        text = _as_text(value)
        writer = SlugWriter(self)
        writer.push_str(text)
        return writer.into_inner()

    def __copy__(self) -> 'Slugifier':
        return type(self)(self._separator)

    def __eq__(self, other):
        if not isinstance(other, Slugifier):
            return NotImplemented
        return self._separator == other._separator

    # Mutable through set_separator, so not usable as a dict key.
    __hash__ = None

    def __repr__(self):
        return f"Slugifier(separator={self._separator!r})"


class SlugWriter:
    """Accumulates the slug for a single input string."""

    def __init__(self, options: Slugifier):
        self.options = options
        self.buffer: List[str] = []
        # Starts set so the output never begins with a separator.
        self.previous_separator = True

    def push_separator(self) -> None:
        if not self.previous_separator:
            self.buffer.append(self.options.separator)
            self.previous_separator = True

    def push_char(self, char: str) -> None:
        if 'a' <= char <= 'z' or '0' <= char <= '9':
            self.previous_separator = False
            self.buffer.append(char)
        elif 'A' <= char <= 'Z':
            self.previous_separator = False
            # Fixed offset; str.lower() is Unicode aware and not needed here.
            self.buffer.append(chr(ord(char) - ord('A') + ord('a')))
        else:
            self.push_separator()

    def push_str(self, text: str) -> None:
        for char in text:
            replacement = transliterate_char(char)
            if replacement:
                for ascii_char in replacement:
                    self.push_char(ascii_char)
            else:
                self.push_separator()

    def into_inner(self) -> str:
        if self.buffer and self.buffer[-1] == self.options.separator:
            self.buffer.pop()
        return ''.join(self.buffer)
