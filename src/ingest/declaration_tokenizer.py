"""Declaration tokenizer for API definition lines.

This module splits a declaration description into a tree of atoms
and delimited groups. It reads the text once through a forward-only
character iterator; nested groups consume from the same iterator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from core.errors import ApiParseError, ParseFailure

_OPENING_DELIMITERS = {"(": ")", "[": "]", "{": "}"}
_CLOSING_DELIMITERS = frozenset(_OPENING_DELIMITERS.values())
_QUOTES = frozenset("\"'")
_ESCAPE = "\\"


@dataclass(frozen=True)
class Atom:
    """Raw unparsed text."""

    text: str

    def cast(self) -> str:
        """Return the atom text."""
        return self.text


@dataclass(frozen=True)
class Group:
    """Nodes found between a pair of matching delimiters."""

    children: tuple["Node", ...]

    def cast(self) -> tuple["Node", ...]:
        """Return the group children."""
        return self.children


Node = Union[Atom, Group]


@dataclass(frozen=True)
class SplitFields:
    """Tokenized declaration description.

    Attributes:
        primary: Nodes before the first top-level comma.
        secondary: Nodes after that comma, or None without a top-level comma.
    """

    primary: tuple[Node, ...]
    secondary: tuple[Node, ...] | None


class _NodeCollector:
    """Accumulates atom characters and finished nodes for one level."""

    def __init__(self) -> None:
        self._buffer: list[str] = []
        self._nodes: list[Node] = []

    def append(self, char: str) -> None:
        self._buffer.append(char)

    def flush(self) -> None:
        if self._buffer:
            self._nodes.append(Atom("".join(self._buffer)))
            self._buffer.clear()

    def push(self, node: Node) -> None:
        self.flush()
        self._nodes.append(node)

    def finish(self) -> tuple[Node, ...]:
        self.flush()
        return tuple(self._nodes)


def split_declaration(text: str) -> SplitFields:
    """Split a declaration description into primary and secondary fields.

    Args:
        text: Description part of an API line, e.g.
            ``type Reader interface, Read([]byte) (int, error)``.

    Returns:
        Primary and optional secondary node lists.

    Raises:
        ApiParseError: For unbalanced delimiters, unterminated literals,
            or more than two top-level fields.
    """
    chars = iter(text)
    primary, has_secondary = _split_fields(chars, allow_comma=True)
    if not has_secondary:
        return SplitFields(primary=primary, secondary=None)
    secondary, _ = _split_fields(chars, allow_comma=False)
    return SplitFields(primary=primary, secondary=secondary)


def _split_fields(chars: Iterator[str], allow_comma: bool) -> tuple[tuple[Node, ...], bool]:
    """Collect top-level nodes until a comma or the end of input.

    Returns:
        Collected nodes and whether a top-level comma stopped the scan.
    """
    collector = _NodeCollector()
    for char in chars:
        if char == ",":
            if not allow_comma:
                raise ApiParseError(
                    ParseFailure.UNEXPECTED_THIRD_FIELD,
                    "a declaration holds at most two comma separated fields",
                )
            return collector.finish(), True
        if char in _CLOSING_DELIMITERS:
            raise ApiParseError(
                ParseFailure.UNEXPECTED_CLOSING_DELIMITER,
                f"'{char}' closes no open group",
            )
        _consume(char, chars, collector)
    return collector.finish(), False


def _split_group(chars: Iterator[str], closing: str) -> Group:
    """Collect group elements until the matching closing delimiter."""
    collector = _NodeCollector()
    for char in chars:
        if char == closing:
            return Group(collector.finish())
        if char in _CLOSING_DELIMITERS:
            raise ApiParseError(
                ParseFailure.UNEXPECTED_CLOSING_DELIMITER,
                f"expected '{closing}' but found '{char}'",
            )
        if char == ",":
            collector.flush()
            continue
        _consume(char, chars, collector)
    raise ApiParseError(
        ParseFailure.UNTERMINATED_GROUP,
        f"input ended before the closing '{closing}'",
    )


def _consume(char: str, chars: Iterator[str], collector: _NodeCollector) -> None:
    """Handle a character shared by every nesting level."""
    if char == " ":
        collector.flush()
    elif char in _QUOTES:
        collector.push(_read_literal(chars, char))
    elif char in _OPENING_DELIMITERS:
        collector.push(_split_group(chars, _OPENING_DELIMITERS[char]))
    else:
        collector.append(char)


def _read_literal(chars: Iterator[str], quote: str) -> Atom:
    """Read a quoted literal, keeping escape sequences verbatim."""
    buffer: list[str] = []
    for char in chars:
        if char == quote:
            return Atom("".join(buffer))
        buffer.append(char)
        if char == _ESCAPE:
            escaped = next(chars, None)
            if escaped is None:
                break
            buffer.append(escaped)
    raise ApiParseError(
        ParseFailure.UNTERMINATED_LITERAL,
        f"input ended before the closing {quote}",
    )
