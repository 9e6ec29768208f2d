"""Readable formatting of named values for debugging output."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping
from typing import Any

EMPTY = "<empty container>"
EMPTY_MULTIDIM = "<empty multidimensional container>"


def _is_container(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(
        value, (str, bytes, bytearray, tuple)
    )


def _elements(value: Any) -> list[Any]:
    if isinstance(value, Mapping):
        return list(value.items())
    return list(value)


def format_value(value: Any) -> str:
    """Format one value: strings quoted, tuples in parentheses, containers in brackets."""
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, tuple):
        return "(" + ", ".join(format_value(item) for item in value) + ")"
    if _is_container(value):
        items = _elements(value)
        if not items:
            return EMPTY
        return "[ " + "".join(format_value(item) + " " for item in items) + "]"
    return str(value)


def format_named(name: str, value: Any) -> str:
    """Format ``name: value``; containers end with a newline, nested ones span lines."""
    if not _is_container(value):
        return f"{name}: {format_value(value)}"
    items = _elements(value)
    if items and all(_is_container(item) for item in items):
        indent = " " * (len(name) + 2)
        lines = [format_value(item) for item in items]
        return f"{name}: " + "\n".join(
            line if i == 0 else indent + line for i, line in enumerate(lines)
        ) + "\n"
    return f"{name}: {format_value(items)}\n"


def split_names(names: str) -> list[str]:
    """Split a comma-separated list of expressions at its top-level commas."""
    parts: list[str] = []
    start = 0
    depth = 0
    in_quote = False
    previous = ""
    for i, char in enumerate(names):
        if not in_quote and depth == 0 and i > 0 and previous != "'" and char == ",":
            parts.append(names[start:i].strip())
            start = i + 1
        elif char == '"':
            if previous != "\\":
                in_quote = not in_quote
        elif not in_quote and previous != "'":
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
        previous = char
    parts.append(names[start:].strip())
    return parts


def multi_print(names: str, *args: Any) -> str:
    """Write each named value to standard error and return the text written."""
    if not args:
        raise ValueError("at least one value is required")
    labels = split_names(names)
    if len(labels) != len(args):
        raise ValueError(f"{len(labels)} names given for {len(args)} values")
    pieces = []
    for i, (label, value) in enumerate(zip(labels, args)):
        pieces.append(format_named(label, value))
        if _is_container(value):
            continue
        if i == len(args) - 1:
            pieces.append("\n")
        elif _is_container(args[i + 1]):
            pieces.append("\n")
        else:
            pieces.append(" | ")
    text = "".join(pieces)
    sys.stderr.write(text)
    return text