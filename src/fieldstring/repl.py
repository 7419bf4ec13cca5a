"""FieldStringShell — interactive inspector for serialized records.

Also provides the ``fieldstring-repl`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

from .dialect import DEFAULT, Dialect
from .errors import FieldStringError, FormatError
from .splitter import join_pairs, parse_fields


# ---------------------------------------------------------------------------
# FieldStringShell class (programmatic use)
# ---------------------------------------------------------------------------

class FieldStringShell:
    """Parses record strings and renders them as indented trees.

    Usage::

        shell = FieldStringShell()
        shell.parse("age#5~city#`null`")    # → {"age": "5", "city": "`null`"}
        print(shell.inspect("a#{x#1}"))
        shell.last                          # mapping from the latest parse
    """

    def __init__(self, dialect: Dialect = DEFAULT) -> None:
        self.dialect = dialect
        self.last: dict[str, str] | None = None
        self.batch_files: set[str] = set()

    def parse(self, text: str) -> dict[str, str] | None:
        self.last = parse_fields(text, dialect=self.dialect)
        return self.last

    def inspect(self, text: str) -> str:
        fields = self.parse(text)
        if fields is None:
            return "null"
        return _fmt_fields(fields, self.dialect, 0)

    def join(self, pairs: list[str]) -> str:
        return join_pairs(pairs, dialect=self.dialect)


# ---------------------------------------------------------------------------
# Tree formatting
# ---------------------------------------------------------------------------

def _fmt_fields(fields: dict[str, str], dialect: Dialect, level: int) -> str:
    if not fields:
        return "{}"
    pad = "  " * (level + 1)
    width = max(len(k) for k in fields)
    lines = ["{"]
    for name, raw in fields.items():
        lines.append(f"{pad}{name:<{width}}: {_fmt_value(raw, dialect, level + 1)}")
    lines.append("  " * level + "}")
    return "\n".join(lines)


def _fmt_list(pieces: list[str], dialect: Dialect, level: int) -> str:
    pad = "  " * (level + 1)
    lines = ["["]
    for i, piece in enumerate(pieces, 1):
        lines.append(f"{pad}{i}: {_fmt_value(piece, dialect, level + 1)}")
    lines.append("  " * level + "]")
    return "\n".join(lines)


def _fmt_value(raw: str, dialect: Dialect, level: int) -> str:
    """Render one raw value; envelopes are expanded, other text printed as-is.

    An envelope is shown as a record when its content parses as fields and
    as a list otherwise, since the format does not say which one it holds.
    """
    if raw == dialect.null:
        return "null"
    if not (len(raw) >= 2 and raw[0] == dialect.obj_start and raw[-1] == dialect.obj_end):
        return raw
    inner = raw[1:-1]
    if inner == dialect.null:
        return "null"
    try:
        nested = parse_fields(inner, dialect=dialect)
    except FormatError:
        return _fmt_list(inner.split(dialect.list_sep), dialect, level)
    return _fmt_fields(nested or {}, dialect, level)


def _show_raw(shell: FieldStringShell, text: str, dest: IO[str]) -> None:
    """Print the flat mapping of *text* without expanding envelopes."""
    fields = shell.parse(text)
    if fields is None:
        print("  (null record)", file=dest)
        return
    if not fields:
        print("  (no fields)", file=dest)
        return
    width = max(len(k) for k in fields)
    for name, raw in fields.items():
        print(f"  {name:<{width}} = {raw}", file=dest)


def _run_batch(shell: FieldStringShell, filepath: str, dest: IO[str]) -> None:
    """Process every line of *filepath*; a file already being read is refused."""
    key = os.path.realpath(filepath)
    if key in shell.batch_files:
        print(f"error: '{filepath}' is already being read", file=dest)
        return
    shell.batch_files.add(key)
    try:
        with open(filepath, encoding="utf-8") as fh:
            for file_line in fh:
                _process_line(shell, file_line.rstrip("\n"), dest)
    except OSError as exc:
        print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
    finally:
        shell.batch_files.discard(key)


def _process_line(shell: FieldStringShell, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    try:
        # ── Control commands ──────────────────────────────────────────────
        if line.startswith(":raw "):
            _show_raw(shell, line[5:].strip(), dest)
            return True

        if line.startswith(":join "):
            print(shell.join(line[6:].split()), file=dest)
            return True

        # ── Batch file ────────────────────────────────────────────────────
        if line.startswith("?<< "):
            _run_batch(shell, line[4:].strip(), dest)
            return True

        # ── Record string ─────────────────────────────────────────────────
        print(shell.inspect(line), file=dest)
    except FieldStringError as exc:
        print(f"error: {exc}", file=dest)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _redirect(filepath: str, dest: IO[str]) -> IO[str]:
    """Handle ``?>> path`` and a bare ``?>>``; returns the new output stream."""
    if dest is not sys.stdout:
        dest.close()
    if not filepath:
        return sys.stdout
    try:
        return open(filepath, "w", encoding="utf-8")
    except OSError as exc:
        print(f"Error opening '{filepath}': {exc}", file=sys.stderr)
        return sys.stdout


def main() -> None:
    """Interactive inspector (``fieldstring-repl`` / ``python -m fieldstring.repl``)."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    shell = FieldStringShell()
    dest: IO[str] = sys.stdout

    print("fieldstring  (:q to quit  |  :raw <s>  :join <pairs>  |  ?<< file  ?>> file)")

    try:
        while True:
            try:
                line = input("FS> ").strip()
            except EOFError:
                print()
                break
            except KeyboardInterrupt:
                print()
                continue

            if line == "?>>" or line.startswith("?>> "):
                dest = _redirect(line[3:].strip(), dest)
                continue

            if not _process_line(shell, line, dest):
                break
    finally:
        if dest is not sys.stdout:
            dest.close()


if __name__ == "__main__":
    main()
