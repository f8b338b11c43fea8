"""API definition file parsing.

This module turns the lines of a ``go1.N.txt`` API file into typed
declarations. Each significant line names one package and one
declaration; comment and blank lines produce nothing.
"""

from __future__ import annotations

from typing import Callable, Iterator

from core.constants import (
    COMMENT_CHAR,
    DEPRECATED_SUFFIX,
    PACKAGE_PREFIX,
    UNEXPORTED_METHODS_MARKER,
)
from core.errors import ApiParseError, ParseFailure
from core.types import ApiDeclaration
from ingest.declaration_tokenizer import Atom, Group, Node, SplitFields, split_declaration

_POINTER_MARKER = "*"
_GENERIC_OPENING = "["
_UNEXPORTED_METHODS = tuple(Atom(word) for word in UNEXPORTED_METHODS_MARKER.split())


def parse_api_file(text: str, source: str) -> Iterator[ApiDeclaration]:
    """Yield declarations of an API file in line order.

    Args:
        text: Whole file content.
        source: File label used in error messages.

    Yields:
        One declaration per significant line.

    Raises:
        ApiParseError: On the first malformed line, located as ``source:line``.
    """
    for line_number, line in enumerate(text.splitlines(), 1):
        try:
            declaration = parse_api_line(line)
        except ApiParseError as error:
            raise ApiParseError(
                error.kind, f"{source}:{line_number}: {error.detail}"
            ) from error
        if declaration is not None:
            yield declaration


def parse_api_line(line: str) -> ApiDeclaration | None:
    """Parse one API file line.

    Args:
        line: Raw line, e.g. ``pkg net/http, func Get(string) (*Response, error)``.

    Returns:
        Parsed declaration, or None for comment and blank lines.

    Raises:
        ApiParseError: If the line does not follow the API grammar.
    """
    content = _strip_comment(line).strip()
    if not content:
        return None
    deprecated = content.endswith(DEPRECATED_SUFFIX)
    if deprecated:
        content = content.removesuffix(DEPRECATED_SUFFIX).rstrip()
    if not content.startswith(PACKAGE_PREFIX):
        raise ApiParseError(
            ParseFailure.MALFORMED_LINE_PREFIX,
            f"expected a line starting with '{PACKAGE_PREFIX}', got '{content}'",
        )
    package, separator, description = content.removeprefix(PACKAGE_PREFIX).partition(",")
    if not separator:
        raise ApiParseError(
            ParseFailure.MISSING_FIELD_SEPARATOR,
            f"no comma between package and declaration in '{content}'",
        )
    fields = split_declaration(description.strip())
    kind = _text_at(fields.primary, 0)
    symbol_builder = _SYMBOL_BUILDERS.get(kind)
    if symbol_builder is None:
        raise ApiParseError(
            ParseFailure.UNKNOWN_SYMBOL_KIND,
            f"unknown declaration kind '{kind}' in '{content}'",
        )
    return ApiDeclaration(
        package=package.strip(),
        symbol=symbol_builder(fields),
        kind=kind,
        deprecated=deprecated,
    )


def _strip_comment(line: str) -> str:
    """Drop text from the first unescaped comment character."""
    if line.startswith(COMMENT_CHAR):
        return ""
    index = line.find(COMMENT_CHAR)
    while index > 0 and line[index - 1] == "\\":
        index = line.find(COMMENT_CHAR, index + 1)
    return line if index == -1 else line[:index]


def _text_at(nodes: tuple[Node, ...], position: int) -> str:
    """Return atom text at a position, or an empty string."""
    if position < len(nodes):
        node = nodes[position]
        if isinstance(node, Atom):
            return node.text
    return ""


def _without_generic(name: str) -> str:
    return name.partition(_GENERIC_OPENING)[0]


def _required_name(fields: SplitFields) -> str:
    name = _without_generic(_text_at(fields.primary, 1))
    if not name:
        raise ApiParseError(ParseFailure.EMPTY_NAME, "declaration has no name")
    return name


def _value_symbol(fields: SplitFields) -> str:
    name = _text_at(fields.primary, 1)
    if not name:
        raise ApiParseError(ParseFailure.EMPTY_NAME, "constant or variable has no name")
    return name


def _method_symbol(fields: SplitFields) -> str:
    receiver = fields.primary[1] if len(fields.primary) > 1 else None
    if not isinstance(receiver, Group):
        raise ApiParseError(ParseFailure.EMPTY_RECEIVER, "method has no receiver")
    receiver_name = _without_generic(
        _text_at(receiver.children, 0).removeprefix(_POINTER_MARKER)
    )
    if not receiver_name:
        raise ApiParseError(ParseFailure.EMPTY_RECEIVER_NAME, "method receiver has no type")
    method_name = _without_generic(_text_at(fields.primary, 2))
    if not method_name:
        raise ApiParseError(ParseFailure.EMPTY_METHOD_NAME, "method has no name")
    return f"{receiver_name}.{method_name}"


def _type_symbol(fields: SplitFields) -> str:
    type_name = _required_name(fields)
    if fields.secondary is None or fields.secondary == _UNEXPORTED_METHODS:
        return type_name
    member_name = _text_at(fields.secondary, 0)
    if not member_name:
        raise ApiParseError(
            ParseFailure.EMPTY_SUB_NAME, f"type {type_name} lists a member without name"
        )
    return f"{type_name}.{member_name}"


_SYMBOL_BUILDERS: dict[str, Callable[[SplitFields], str]] = {
    "const": _value_symbol,
    "var": _value_symbol,
    "func": _required_name,
    "method": _method_symbol,
    "type": _type_symbol,
}
