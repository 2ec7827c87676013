# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Cross-check the LL(1) engine against an independent LALR grammar.

The lark grammar next to this file describes the same language. For every
valid input both parsers must build the same tree, and inputs the engine
rejects as syntax errors must be rejected by lark too.
"""

from __future__ import annotations

import random
from pathlib import Path

import pytest
from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput

from minilisp.parser import Number, ParseError, ParseTree, Sequence, Symbol, parse
from minilisp.parser.tokens import DELTA_EQUAL_TO, GREEK_SMALL_LAMBDA, MINUS_SIGN, MULTIPLICATION_SIGN

_GRAMMAR_PATH = Path(__file__).with_name("minilisp_reference.lark")
_LARK = Lark(_GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


class _ToParseTree(Transformer):
	def start(self, items):
		return items[0]

	def paren(self, items):
		return items[0]

	def number(self, items):
		return Number(int(items[0]))

	def symbol(self, items):
		return Symbol(str(items[0]))

	def binary(self, items):
		op, left, right = items
		return Sequence((Symbol(op.type), left, right))

	def conditional(self, items):
		_, cond, then, otherwise = items
		return Sequence((Symbol("CONDITIONAL"), cond, then, otherwise))

	def lambda_(self, items):
		_, param, body = items
		return Sequence((Symbol("LAMBDA"), Symbol(str(param)), body))

	def let(self, items):
		_, name, value, body = items
		return Sequence((Symbol("LET"), Symbol(str(name)), value, body))

	def application(self, items):
		return Sequence(tuple(items))


def _reference_parse(source: str) -> ParseTree:
	return _ToParseTree().transform(_LARK.parse(source))


_NAMES = ["x", "y", "f", "acc", "n1"]


def _random_expr(rng: random.Random, depth: int) -> str:
	if depth <= 0 or rng.random() < 0.3:
		if rng.random() < 0.5:
			return str(rng.randint(0, 120)).zfill(rng.choice([1, 1, 3]))
		return rng.choice(_NAMES)

	def sub() -> str:
		return _random_expr(rng, depth - 1)

	choice = rng.randrange(8)
	if choice < 4:
		op = ["+", MULTIPLICATION_SIGN, "=", MINUS_SIGN][choice]
		return f"({op} {sub()} {sub()})"
	if choice == 4:
		return f"(? {sub()} {sub()} {sub()})"
	if choice == 5:
		return f"({GREEK_SMALL_LAMBDA} {rng.choice(_NAMES)} {sub()})"
	if choice == 6:
		return f"({DELTA_EQUAL_TO} {rng.choice(_NAMES)} {sub()} {sub()})"
	args = " ".join(sub() for _ in range(rng.randint(0, 3)))
	return f"({sub()} {args})" if args else f"({sub()})"


def _corpus(seed: int, count: int) -> list[str]:
	rng = random.Random(seed)
	return [_random_expr(rng, 5) for _ in range(count)]


@pytest.mark.parametrize("seed", range(8))
def test_engine_agrees_with_reference_grammar(seed: int) -> None:
	for source in _corpus(seed, 40):
		assert parse(source) == _reference_parse(source), source


@pytest.mark.parametrize(
	"source",
	[
		"(+ 2)",
		"(+)",
		"()",
		"(+ 2",
		"(f (g 1)",
		"(λ 1 x)",
		"(≜ x 1)",
		"(+ 1 2 3)",
		"42 43",
		")",
		"",
	],
)
def test_both_parsers_reject_invalid_input(source: str) -> None:
	with pytest.raises(ParseError):
		parse(source)
	with pytest.raises(UnexpectedInput):
		_LARK.parse(source)
