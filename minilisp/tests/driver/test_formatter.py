# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import json

import pytest

from minilisp.formatter import format_grammar, format_tokens, to_json
from minilisp.parser import GRAMMAR, Number, Sequence, Symbol, from_data, parse, scan, to_data


def test_compact_json() -> None:
	assert to_json(parse("(+ 2 3)"), pretty=False) == '["PLUS",2,3]'


def test_pretty_json_uses_two_space_indent() -> None:
	assert to_json(parse("(λ x x)")) == '[\n  "LAMBDA",\n  "x",\n  "x"\n]'


def test_leaf_json() -> None:
	assert to_json(Number(7)) == "7"
	assert to_json(Symbol("x")) == '"x"'


def test_json_round_trips_through_plain_data() -> None:
	tree = parse("((λ x (+ x 1)) 5)")
	assert json.loads(to_json(tree)) == to_data(tree)
	assert from_data(json.loads(to_json(tree, pretty=False))) == tree


def test_from_data_rejects_non_tree_values() -> None:
	with pytest.raises(TypeError):
		from_data(1.5)  # type: ignore[arg-type]
	with pytest.raises(TypeError):
		from_data(True)
	with pytest.raises(ValueError):
		from_data([])


def test_sequence_is_immutable_tuple() -> None:
	seq = Sequence([Symbol("f"), Number(1)])  # type: ignore[arg-type]
	assert isinstance(seq.items, tuple)
	assert seq.head == Symbol("f")
	assert list(seq) == [Symbol("f"), Number(1)]


def test_format_tokens_omits_eof() -> None:
	assert format_tokens(scan("(f 42)")) == [
		"Token(LPAREN, 1:1)",
		"Token(IDENTIFIER, 'f', 1:2)",
		"Token(NUMBER, '42', 1:4)",
		"Token(RPAREN, 1:6)",
	]


def test_format_grammar_lists_productions_and_cells() -> None:
	lines = format_grammar(GRAMMAR)
	assert lines[0] == "Productions:"
	assert "   1. Program -> Expr" in lines
	assert "  12. ParenBody -> Expr Expr*" in lines
	table_lines = lines[lines.index("Parse table:") + 1 :]
	assert len(table_lines) == 16
	assert "  ParenBody  '+'            -> 5" in table_lines
