"""Character cursor for lexers and tokenizers.

Implements a mutable, forward-only cursor over already-decoded text with
non-consuming lookahead and UTF-8 byte-offset tracking.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Traversal state is a plain int index (peeking copies an int, not text)
    - Lookahead never returns None: EOF_CHAR is returned instead
    - Consumption returns None at end-of-input (explicit, callers must branch)
    - byte_pos is tracked incrementally, never recomputed by re-scanning
    - Source is borrowed: the cursor keeps a reference, never a copy

Byte Positions:
    Python str indexes by code point. Lexers that hand offsets to tools
    speaking UTF-8 (editors, LSP clients, byte-oriented formats) need byte
    offsets instead, so the cursor reports both:

    - byte_pos: UTF-8 bytes consumed so far
    - char_pos: characters consumed so far (use it to slice source)

Example:
    >>> source = "123 foobar竜<!>"
    >>> cursor = Cursor(source)
    >>> cursor.skip_while(str.isdigit)
    >>> cursor.byte_pos
    3
    >>> cursor.bump()
    ' '
    >>> start = cursor.char_pos
    >>> cursor.skip_while(lambda c: c.isascii() and c.isalpha())
    >>> source[start : cursor.char_pos]
    'foobar'
    >>> cursor.byte_pos
    10
    >>> cursor.as_str()
    '竜<!>'
"""

import logging
from collections.abc import Callable
from typing import TypeAlias

from simplecursor.constants import (
    EOF_CHAR,
    UTF8_ONE_BYTE_MAX,
    UTF8_THREE_BYTE_MAX,
    UTF8_TWO_BYTE_MAX,
)

__all__ = ["CharPredicate", "Cursor", "utf8_len"]

logger = logging.getLogger(__name__)

CharPredicate: TypeAlias = Callable[[str], bool]


def _code_point_width(code: int) -> int:
    if code <= UTF8_ONE_BYTE_MAX:
        return 1
    if code <= UTF8_TWO_BYTE_MAX:
        return 2
    if code <= UTF8_THREE_BYTE_MAX:
        return 3
    return 4


def utf8_len(char: str) -> int:
    """Get the UTF-8 encoded width of a single character.

    Computed from the code point, without encoding (no allocation).

    Args:
        char: Exactly one character

    Returns:
        Number of UTF-8 bytes (1-4)

    Raises:
        ValueError: If char is not exactly one character long

    Note:
        Lone surrogates (U+D800..U+DFFF) count as 3 bytes, matching
        the "surrogatepass" error handler.

    Example:
        >>> utf8_len("a")
        1
        >>> utf8_len("\\u00e9")
        2
        >>> utf8_len("竜")
        3
        >>> utf8_len("\\U0001F600")
        4
    """
    if len(char) != 1:
        msg = f"utf8_len() expects a single character, got {len(char)} characters"
        raise ValueError(msg)
    return _code_point_width(ord(char))


class Cursor:
    """Forward-only character cursor with lookahead.

    Key Design Decisions:
        1. Mutable - bump() and skip_while() advance in place
        2. Slots - Cursors are created once per lexed source, kept small
        3. Lookahead returns EOF_CHAR, consumption returns None
        4. Two positions - byte_pos (UTF-8) and char_pos (str index)

    Example:
        >>> cursor = Cursor("ab")
        >>> cursor.peek(), cursor.peek_second()
        ('a', 'b')
        >>> cursor.bump()
        'a'
        >>> cursor.peek_second() == EOF_CHAR
        True
        >>> cursor.bump()
        'b'
        >>> cursor.is_eof
        True
        >>> cursor.bump() is None
        True

    Thread Safety:
        Not safe for concurrent mutation of one instance. Independent
        cursors may share the same source string.
    """

    __slots__ = ("_byte_pos", "_index", "_length", "_source")

    def __init__(self, source: str) -> None:
        """Create a cursor positioned at the start of source.

        Args:
            source: Decoded source text (borrowed, never copied)

        Raises:
            TypeError: If source is not a str (decode bytes first)
        """
        if not isinstance(source, str):
            msg = f"Cursor source must be str, got {type(source).__name__}"
            raise TypeError(msg)
        self._source = source
        self._length = len(source)
        self._index = 0
        self._byte_pos = 0
        logger.debug("Cursor created over %d characters", self._length)

    def __repr__(self) -> str:
        return (
            f"Cursor(char_pos={self._index}, byte_pos={self._byte_pos}, "
            f"remaining={self._length - self._index})"
        )

    @property
    def source(self) -> str:
        """The text this cursor reads from."""
        return self._source

    @property
    def byte_pos(self) -> int:
        """UTF-8 byte offset of the next unconsumed character.

        Returns:
            Number of UTF-8 bytes consumed from the start of source

        Note:
            Tracked as characters are consumed, so reading it is O(1).
            Equal to len(source[:char_pos].encode("utf-8")) at all times.
        """
        return self._byte_pos

    @property
    def char_pos(self) -> int:
        """Index of the next unconsumed character in source.

        Use this, not byte_pos, to slice the Python string:
        `source[start:cursor.char_pos]`.
        """
        return self._index

    @property
    def is_eof(self) -> bool:
        """Check if all characters have been consumed.

        Returns:
            True if no characters remain

        Note:
            Equivalent to `cursor.peek() == EOF_CHAR`.
        """
        return self._index >= self._length

    def peek(self) -> str:
        """Get the next character without consuming it.

        Returns:
            Next character, or EOF_CHAR at end-of-input
        """
        index = self._index
        if index < self._length:
            return self._source[index]
        return EOF_CHAR

    def peek_second(self) -> str:
        """Get the character after the next one without consuming anything.

        Returns:
            Character two positions ahead, or EOF_CHAR if fewer than
            two characters remain

        Example:
            >>> Cursor("=>").peek_second()
            '>'
            >>> Cursor("=").peek_second() == EOF_CHAR
            True
        """
        index = self._index + 1
        if index < self._length:
            return self._source[index]
        return EOF_CHAR

    def peek_two(self) -> tuple[str, str]:
        """Get the next two characters without consuming them.

        Returns:
            (peek(), peek_second()) pair; missing characters are EOF_CHAR
        """
        return (self.peek(), self.peek_second())

    def bump(self) -> str | None:
        """Consume and return the next character.

        Returns:
            The consumed character, or None at end-of-input (position
            is left unchanged in that case)
        """
        index = self._index
        if index >= self._length:
            return None
        char = self._source[index]
        self._index = index + 1
        self._byte_pos += _code_point_width(ord(char))
        return char

    def bump_two(self) -> tuple[str | None, str | None]:
        """Consume up to two characters.

        Returns:
            Pair of consumed characters; None for each one that was
            past end-of-input. Same as calling bump() twice.

        Example:
            >>> cursor = Cursor("abc")
            >>> cursor.bump_two()
            ('a', 'b')
            >>> cursor.bump_two()
            ('c', None)
            >>> cursor.byte_pos
            3
        """
        first = self.bump()
        second = self.bump()
        return (first, second)

    def skip_while(self, predicate: CharPredicate) -> None:
        """Consume characters while predicate holds for the next one.

        The first character for which predicate returns False is NOT
        consumed (unlike itertools.takewhile, which swallows it). The
        predicate is never called at end-of-input, so a predicate that
        accepts everything stops cleanly at the end of source.

        Args:
            predicate: Called with each candidate character

        Note:
            Position is committed even if predicate raises part-way, so
            the cursor always matches a manual peek()/bump() loop.

        Example:
            >>> cursor = Cursor("aaaab")
            >>> cursor.skip_while(lambda c: c == "a")
            >>> cursor.byte_pos, cursor.peek()
            (4, 'b')
        """
        source = self._source
        length = self._length
        index = self._index
        skipped_bytes = 0
        try:
            while index < length:
                char = source[index]
                if not predicate(char):
                    break
                skipped_bytes += _code_point_width(ord(char))
                index += 1
        finally:
            # Batch the position update for the whole run
            self._index = index
            self._byte_pos += skipped_bytes

    def as_str(self) -> str:
        """Get the remaining, unconsumed text.

        Returns:
            source[char_pos:] (a new string; avoid in hot loops)
        """
        return self._source[self._index :]
