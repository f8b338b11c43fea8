"""Unit tests for the declaration tokenizer."""

from __future__ import annotations

import pytest

from core.errors import ApiParseError, ParseFailure
from ingest.declaration_tokenizer import Atom, Group, split_declaration


def test_split_declaration_separates_atoms_and_groups() -> None:
    """Spaces and delimiters should split top-level fields."""
    fields = split_declaration("func Get(string) (*Response, error)")

    assert fields.primary == (
        Atom("func"),
        Atom("Get"),
        Group((Atom("string"),)),
        Group((Atom("*Response"), Atom("error"))),
    )
    assert fields.secondary is None


def test_split_declaration_splits_secondary_field_at_first_comma() -> None:
    """The first top-level comma should start the member field list."""
    fields = split_declaration("type Reader interface, Read([]byte) (int, error)")

    assert fields.primary == (Atom("type"), Atom("Reader"), Atom("interface"))
    assert fields.secondary == (
        Atom("Read"),
        Group((Group(()), Atom("byte"))),
        Group((Atom("int"), Atom("error"))),
    )


def test_split_declaration_reports_empty_secondary_after_trailing_comma() -> None:
    """A trailing comma should produce an empty, not missing, secondary list."""
    fields = split_declaration("type Client struct,")

    assert fields.secondary == ()


def test_split_declaration_nests_groups_and_drops_empty_elements() -> None:
    """Nested delimiters should produce nested groups without empty atoms."""
    fields = split_declaration("func Clone[$0 interface{ ~[]$1 }, $1 interface{}]($0) $0")

    generics = fields.primary[2]
    assert fields.primary[1] == Atom("Clone")
    assert generics == Group(
        (
            Atom("$0"),
            Atom("interface"),
            Group((Atom("~"), Group(()), Atom("$1"))),
            Atom("$1"),
            Atom("interface"),
            Group(()),
        )
    )
    assert generics.cast() == generics.children


def test_split_declaration_keeps_literal_escapes_verbatim() -> None:
    """Quoted literals should keep quotes out and escapes in."""
    fields = split_declaration(r'const Separator = "a\"b, (c"')

    literal = fields.primary[-1]
    assert literal == Atom(r"a\"b, (c")
    assert literal.cast() == r"a\"b, (c"
    assert fields.secondary is None


def test_split_declaration_keeps_empty_literal() -> None:
    """An empty literal should still be an atom."""
    fields = split_declaration("const Empty = ''")

    assert fields.primary[-1] == Atom("")


@pytest.mark.parametrize(
    ("text", "kind"),
    [
        ("type T struct, A B, C", ParseFailure.UNEXPECTED_THIRD_FIELD),
        ("func F) int", ParseFailure.UNEXPECTED_CLOSING_DELIMITER),
        ("func F(int]", ParseFailure.UNEXPECTED_CLOSING_DELIMITER),
        ("type T struct, F map[string", ParseFailure.UNTERMINATED_GROUP),
        ("func F((int)", ParseFailure.UNTERMINATED_GROUP),
        ('const C = "open', ParseFailure.UNTERMINATED_LITERAL),
        ("const C = 'trailing\\", ParseFailure.UNTERMINATED_LITERAL),
        ("type T struct, F } ", ParseFailure.UNEXPECTED_CLOSING_DELIMITER),
    ],
)
def test_split_declaration_raises_for_malformed_text(text: str, kind: ParseFailure) -> None:
    """Malformed descriptions should raise the matching failure kind."""
    with pytest.raises(ApiParseError) as error_info:
        split_declaration(text)

    assert error_info.value.kind is kind
