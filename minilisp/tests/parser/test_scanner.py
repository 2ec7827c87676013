# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from minilisp.parser.errors import LexError
from minilisp.parser.scanner import scan
from minilisp.parser.tokens import Token, TokenKind

K = TokenKind


def _kinds(source: str) -> list[TokenKind]:
	return [t.kind for t in scan(source)]


def test_empty_source_yields_only_eof() -> None:
	tokens = scan("")
	assert tokens == [Token(K.EOF, None, 1, 1)]


def test_single_char_tokens_including_reserved_glyphs() -> None:
	assert _kinds("+ − × = ? λ ≜ ( )") == [
		K.PLUS,
		K.MINUS,
		K.MULT,
		K.EQUALS,
		K.CONDITIONAL,
		K.LAMBDA,
		K.LET,
		K.LPAREN,
		K.RPAREN,
		K.EOF,
	]


def test_operator_tokens_have_no_lexeme() -> None:
	for tok in scan("(+)"):
		assert tok.lexeme is None


def test_number_lexeme_keeps_leading_zeros() -> None:
	tok = scan("007")[0]
	assert tok.kind is K.NUMBER
	assert tok.lexeme == "007"


def test_identifier_may_contain_digits() -> None:
	tok = scan("abc123")[0]
	assert tok == Token(K.IDENTIFIER, "abc123", 1, 1)


def test_number_immediately_followed_by_paren_is_two_tokens() -> None:
	assert _kinds("12)") == [K.NUMBER, K.RPAREN, K.EOF]


def test_letter_x_is_an_identifier_not_multiply() -> None:
	assert _kinds("x") == [K.IDENTIFIER, K.EOF]


def test_positions_point_at_first_character() -> None:
	tokens = scan("(+ 12\n  foo)")
	assert [(t.kind, t.line, t.column) for t in tokens] == [
		(K.LPAREN, 1, 1),
		(K.PLUS, 1, 2),
		(K.NUMBER, 1, 4),
		(K.IDENTIFIER, 2, 3),
		(K.RPAREN, 2, 6),
		(K.EOF, 2, 7),
	]


def test_tabs_and_carriage_returns_advance_column() -> None:
	tokens = scan("\t\r x")
	assert (tokens[0].line, tokens[0].column) == (1, 4)


def test_reserved_glyph_counts_as_one_column() -> None:
	tokens = scan("(λ x x)")
	assert tokens[2].column == 4


def test_eof_position_after_trailing_newline() -> None:
	tokens = scan("x\n")
	assert (tokens[-1].kind, tokens[-1].line, tokens[-1].column) == (K.EOF, 2, 1)


def test_ascii_hyphen_suggests_minus_sign() -> None:
	with pytest.raises(LexError) as exc:
		scan("-")
	err = exc.value
	assert err.code == "hyphen-minus"
	assert (err.line, err.column) == (1, 1)
	assert "−" in str(err)
	assert "U+2212" in str(err)


def test_hyphen_inside_expression_reports_its_position() -> None:
	with pytest.raises(LexError) as exc:
		scan("(- 3 1)")
	assert (exc.value.line, exc.value.column) == (1, 2)


def test_number_followed_by_letter_is_malformed() -> None:
	with pytest.raises(LexError) as exc:
		scan("(+ 12abc 1)")
	err = exc.value
	assert err.code == "malformed-number"
	assert err.char == "a"
	assert (err.line, err.column) == (1, 6)


@pytest.mark.parametrize("source,char,column", [("#", "#", 1), ("x * 2", "*", 3), ("(+ 1 2]", "]", 7), ("café", "é", 4)])
def test_unrecognised_character(source: str, char: str, column: int) -> None:
	with pytest.raises(LexError) as exc:
		scan(source)
	err = exc.value
	assert err.code == "unexpected-character"
	assert err.char == char
	assert (err.line, err.column) == (1, column)
	assert f"'{char}'" in err.message


def test_non_ascii_digits_are_rejected() -> None:
	# ARABIC-INDIC DIGIT ONE: str.isdigit() is true but it is not a MiniLisp digit.
	with pytest.raises(LexError):
		scan("١")


def test_error_on_second_line_reports_line() -> None:
	with pytest.raises(LexError) as exc:
		scan("(+ 1\n   2 %)")
	assert (exc.value.line, exc.value.column) == (2, 6)


def test_token_rejects_inconsistent_lexeme() -> None:
	with pytest.raises(ValueError):
		Token(K.NUMBER, None, 1, 1)
	with pytest.raises(ValueError):
		Token(K.PLUS, "+", 1, 1)


def test_token_str_matches_listing_format() -> None:
	assert str(Token(K.NUMBER, "42", 1, 1)) == "Token(NUMBER, '42', 1:1)"
	assert str(Token(K.PLUS, None, 1, 4)) == "Token(PLUS, 1:4)"
