# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
MiniLisp front end: scanner plus table-driven LL(1) parser.

	tree = parse("((λ x (+ x 1)) 5)")

`parse` = `scan` followed by `parse_tokens`. Lexical problems raise
`LexError`, syntax problems raise `ParseError`; both carry line/column.
"""

from __future__ import annotations

from typing import Optional

from .engine import LL1Parser, TraceFn, TraceStep, parse_tokens
from .errors import GrammarConflictError, LexError, ParseError, ParserStateError
from .grammar import GRAMMAR, GrammarTable, NonTerminal, Production
from .scanner import Scanner, scan
from .tokens import Token, TokenKind
from .tree import Number, ParseTree, Sequence, Symbol, from_data, to_data


def parse(source: str, *, trace: Optional[TraceFn] = None) -> ParseTree:
	"""Scan and parse one MiniLisp expression."""
	return parse_tokens(scan(source), trace=trace)


__all__ = [
	"GRAMMAR",
	"GrammarConflictError",
	"GrammarTable",
	"LL1Parser",
	"LexError",
	"NonTerminal",
	"Number",
	"ParseError",
	"ParseTree",
	"ParserStateError",
	"Production",
	"Scanner",
	"Sequence",
	"Symbol",
	"Token",
	"TokenKind",
	"TraceFn",
	"TraceStep",
	"from_data",
	"parse",
	"parse_tokens",
	"scan",
	"to_data",
]
