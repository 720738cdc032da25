"""Quickstart example for simplecursor.

Builds a tiny throwaway lexer on top of Cursor to show the intended calling
pattern: peek to classify, skip_while to consume a run, and byte_pos/char_pos
to record token spans.

Python 3.13+.
"""

from __future__ import annotations

from simplecursor import EOF_CHAR, Cursor


def scan(source: str) -> list[tuple[str, str, int, int]]:
    """Split source into (kind, text, byte_start, byte_end) tuples."""
    cursor = Cursor(source)
    tokens: list[tuple[str, str, int, int]] = []

    while not cursor.is_eof:
        char_start = cursor.char_pos
        byte_start = cursor.byte_pos
        char = cursor.peek()

        if char.isdigit():
            kind = "number"
            cursor.skip_while(str.isdigit)
        elif char.isalpha() or char == "_":
            kind = "ident"
            cursor.skip_while(lambda c: c.isalnum() or c == "_")
        elif char.isspace():
            kind = "space"
            cursor.skip_while(str.isspace)
        elif cursor.peek_two() == ("-", ">"):
            kind = "arrow"
            cursor.bump_two()
        else:
            kind = "punct"
            cursor.bump()

        text = source[char_start : cursor.char_pos]
        tokens.append((kind, text, byte_start, cursor.byte_pos))

    return tokens


if __name__ == "__main__":
    source = "let 竜 = f(x) -> 42"
    print("=" * 50)
    print(f"Source: {source!r} ({len(source)} chars, {len(source.encode())} bytes)")
    print("=" * 50)

    for kind, text, start, end in scan(source):
        print(f"{kind:<7} {text!r:<8} bytes {start:>2}..{end:<2}")

    cursor = Cursor("")
    print(f"\nEmpty source: is_eof={cursor.is_eof}, peek is EOF_CHAR: {cursor.peek() == EOF_CHAR}")
