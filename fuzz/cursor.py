#!/usr/bin/env python3
"""Cursor Integrity Fuzzer (Atheris).

Targets: simplecursor.cursor.Cursor
Drives random peek/bump/skip_while sequences and checks the byte-position
invariant against the real UTF-8 encoder after every step.

Run: python fuzz/cursor.py [corpus_dir] -max_total_time=60
"""

from __future__ import annotations

import atexit
import json
import logging
import sys
from typing import TypeAlias

# --- PEP 695 Type Aliases ---
FuzzStats: TypeAlias = "dict[str, int | str]"

_fuzz_stats: FuzzStats = {"status": "incomplete", "iterations": 0, "findings": 0}


def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)


atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    print("atheris is not installed: pip install 'simplecursor[fuzz]'", file=sys.stderr)
    sys.exit(1)

logging.getLogger("simplecursor").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["simplecursor"]):
    from simplecursor import EOF_CHAR, Cursor

# peek, peek_second, bump, bump_two, skip_while
_OP_COUNT = 5


def _check_invariants(cursor: Cursor, source: str) -> None:
    consumed = source[: cursor.char_pos]
    expected_bytes = len(consumed.encode("utf-8"))
    if cursor.byte_pos != expected_bytes:
        msg = (
            f"byte_pos mismatch at char {cursor.char_pos}: "
            f"cursor={cursor.byte_pos} encoder={expected_bytes}"
        )
        raise RuntimeError(msg)
    if cursor.is_eof != (cursor.peek() == EOF_CHAR):
        msg = f"is_eof disagrees with peek() at char {cursor.char_pos}"
        raise RuntimeError(msg)


def test_one_input(data: bytes) -> None:
    """Atheris entry point: Test Cursor position integrity."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)

    try:
        source = fdp.ConsumeUnicodeNoSurrogates(1024)
        cursor = Cursor(source)

        ops = fdp.ConsumeIntInRange(1, 50)
        for _ in range(ops):
            match fdp.ConsumeIntInRange(0, _OP_COUNT - 1):
                case 0:
                    cursor.peek()
                case 1:
                    cursor.peek_second()
                case 2:
                    cursor.bump()
                case 3:
                    cursor.bump_two()
                case _:
                    accepted = set(fdp.ConsumeUnicodeNoSurrogates(4))
                    cursor.skip_while(lambda c: c in accepted)
            _check_invariants(cursor, source)

        # Drain and compare against the full encoding
        cursor.skip_while(lambda _: True)
        _check_invariants(cursor, source)

    except Exception:
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        raise


if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
