"""Skiff scripting language front end: scanner and parser."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from skiff.ast import Program

__version__ = "0.1.0"


def parse(source: str, filename: str = "input.skf") -> Program:
    """Scan and parse Skiff source into a Program AST."""
    from skiff.parser import parse as _parse

    return _parse(source, filename)
