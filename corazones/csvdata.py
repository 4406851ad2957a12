"""Reading and writing of simple comma-separated files."""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def _parse(text: str) -> list[list[str]]:
    rows: list[list[str]] = []
    fields: list[str] = []
    field: list[str] = []
    in_quotes = False
    last_quote = False

    for char in text:
        if last_quote and char != '"':
            in_quotes = not in_quotes

        if char == '"':
            if last_quote:
                field.append(char)
                last_quote = False
            else:
                last_quote = True
        elif char == ",":
            if in_quotes:
                field.append(char)
            else:
                fields.append("".join(field))
                field = []
            last_quote = False
        elif char in "\r\n":
            if field:
                fields.append("".join(field))
            field = []
            if fields:
                rows.append(fields)
            fields = []
            in_quotes = False
            last_quote = False
        else:
            field.append(char)
            last_quote = False

    if field:
        fields.append("".join(field))
    if fields:
        rows.append(fields)
    return rows


def read_csv(path: PathLike) -> list[list[str]]:
    """Read a CSV file into a list of rows, each a list of fields.

    Blank lines are skipped and an empty last field on a line is dropped.
    Raises OSError when the file cannot be opened.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        return _parse(handle.read())


def _quote(field: str) -> str:
    return '"' + field.replace('"', '""') + '"'


def write_csv(path: PathLike, data: Iterable[Iterable[str]]) -> None:
    """Write rows to a CSV file, quoting every field.

    Raises OSError when the file cannot be written.
    """
    with open(path, "w", encoding="utf-8", newline="") as handle:
        for fields in data:
            handle.write(",".join(_quote(field) for field in fields) + "\n")