"""simplecursor - character cursor for lexers and tokenizers.

The lowest-level primitive beneath a hand-written lexer: sequential access to
the characters of a decoded string with one- and two-character lookahead,
predicate skipping, and UTF-8 byte-offset tracking. No tokenization itself.

Public API:
    Cursor - Forward-only character cursor (peek, bump, skip_while, byte_pos)
    EOF_CHAR - Lookahead sentinel returned at end-of-input
    utf8_len - UTF-8 width of a single character

Example:
    >>> from simplecursor import Cursor
    >>> cursor = Cursor("let x")
    >>> cursor.skip_while(str.isalpha)
    >>> cursor.byte_pos
    3
"""

from .constants import EOF_CHAR
from .cursor import CharPredicate, Cursor, utf8_len

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("simplecursor")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "EOF_CHAR",
    "CharPredicate",
    "Cursor",
    "__version__",
    "utf8_len",
]
