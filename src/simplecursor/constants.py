"""Shared constants for simplecursor.

Constants are grouped by domain:
- Sentinels: Out-of-band lookahead results
- Encoding: Byte-width boundaries used for position tracking

Python 3.13+. Zero external dependencies.
"""

from typing import Final

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Sentinels
    "EOF_CHAR",
    # Encoding
    "SOURCE_ENCODING",
    "UTF8_ONE_BYTE_MAX",
    "UTF8_TWO_BYTE_MAX",
    "UTF8_THREE_BYTE_MAX",
]

# ============================================================================
# SENTINELS
# ============================================================================
#
# Lookahead (peek, peek_second, peek_two) returns EOF_CHAR instead of None
# when input is exhausted. Lexer hot loops can then write
#
#     if cursor.peek().isdigit(): ...
#
# without a None check on every call site.
#
# The sentinel is the empty string. Every character read out of a str has
# length 1, so "" can never come from real input, not even from text that
# contains U+0000 or non-characters such as U+FFFF.
#
# Caveat for callers: `EOF_CHAR in "abc"` is True (the empty string is a
# substring of every string). Compare with == or use str predicates such as
# isdigit()/isalpha(), which are all False for "".
#
# ============================================================================

# Lookahead result at end-of-input.
EOF_CHAR: Final[str] = ""

# ============================================================================
# ENCODING
# ============================================================================

# Byte positions are reported in UTF-8 code units.
SOURCE_ENCODING: Final[str] = "utf-8"

# Highest code point encoded in 1, 2 and 3 UTF-8 bytes respectively.
# Anything above UTF8_THREE_BYTE_MAX takes 4 bytes.
UTF8_ONE_BYTE_MAX: Final[int] = 0x7F
UTF8_TWO_BYTE_MAX: Final[int] = 0x7FF
UTF8_THREE_BYTE_MAX: Final[int] = 0xFFFF
