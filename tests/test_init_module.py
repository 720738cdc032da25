"""Tests for the simplecursor package __init__.py module.

Covers:
- __all__ integrity: every exported name is accessible
- Fallback version when package metadata is unavailable
"""

from __future__ import annotations

import importlib
from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

import simplecursor
from simplecursor import constants
from simplecursor.cursor import Cursor


class TestPublicApi:
    """Public names resolve to their defining modules."""

    def test_all_names_accessible(self) -> None:
        """Every name in __all__ is an attribute of the package."""
        for name in simplecursor.__all__:
            assert hasattr(simplecursor, name), name

    def test_reexports_are_identical(self) -> None:
        """Re-exports are the same objects as the module definitions."""
        assert simplecursor.Cursor is Cursor
        assert simplecursor.EOF_CHAR is constants.EOF_CHAR

    def test_eof_char_is_not_a_character(self) -> None:
        """The sentinel has no length, so no str character can equal it."""
        assert len(simplecursor.EOF_CHAR) == 0


class TestVersion:
    """__version__ comes from package metadata."""

    def test_version_is_string(self) -> None:
        """__version__ is always a non-empty string."""
        assert isinstance(simplecursor.__version__, str)
        assert simplecursor.__version__

    def test_version_fallback_when_not_installed(self) -> None:
        """Missing metadata falls back to the development placeholder."""
        with patch(
            "importlib.metadata.version", side_effect=PackageNotFoundError("simplecursor")
        ):
            reloaded = importlib.reload(simplecursor)
            assert reloaded.__version__ == "0.0.0+dev"

        importlib.reload(simplecursor)
