# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Sub-parser for production 12, `ParenBody -> Expr Expr*`.

A flat (non-terminal, lookahead) table cannot express the unbounded
repetition without loop/counter symbols, so the engine leaves the table for
this one production and calls `parse_application`. A function position or
argument may itself be any expression, including another application or an
operator form, so this module re-implements the ParenBody dispatch. It builds
nodes only through `forms`, the same builders the engine's actions use.

Like the engine, it keeps unfinished constructs on an explicit stack instead
of the Python call stack, so nesting depth is bounded by memory alone.

Diagnostics mirror the engine's: an expression that cannot start reports the
`Expr` lookahead set, a bad parenthesised body reports the `ParenBody` set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, cast

from .cursor import TokenCursor
from .errors import ParseError
from .forms import PAREN_FORMS, Operand, ParenForm, build_application, leaf
from .grammar import EXPR_FIRST, GRAMMAR, PAREN_BODY_FIRST, NonTerminal
from .tokens import TokenKind
from .tree import ParseTree, Sequence

_EXPR_EXPECTED = GRAMMAR.expected(NonTerminal.EXPR)


@dataclass
class _Pending:
	"""
	A construct whose operands are still being parsed.

	`form` is the operator/binder form, or None for an application. A `single`
	frame completes after one expression; it is the root of `parse_one_expr`.
	`closes` frames were opened by '(' and consume the matching ')'.
	"""

	form: Optional[ParenForm]
	closes: bool
	single: bool = False
	items: list[ParseTree] = field(default_factory=list)

	def finished(self, lookahead: TokenKind) -> bool:
		if self.single:
			return bool(self.items)
		if self.form is not None:
			return len(self.items) == self.form.arity
		# Only ')' and EOF are well-formed stops; others are left for the caller.
		return bool(self.items) and lookahead not in EXPR_FIRST

	def wants_identifier(self) -> bool:
		return self.form is not None and self.form.operands[len(self.items)] is Operand.IDENT

	def build(self) -> ParseTree:
		if self.single:
			return self.items[0]
		if self.form is not None:
			return self.form.build(self.items)
		return build_application(self.items)


def _open_body(cursor: TokenCursor, *, closes: bool) -> _Pending:
	token = cursor.current
	form = PAREN_FORMS.get(token.kind)
	if form is not None:
		cursor.advance()
		return _Pending(form, closes)
	if token.kind in EXPR_FIRST:
		return _Pending(None, closes)
	raise ParseError.unexpected(token, expected=PAREN_BODY_FIRST, context=NonTerminal.PAREN_BODY.value)


def _start_expr(cursor: TokenCursor, stack: list[_Pending]) -> None:
	"""Finish a leaf into the top frame, or open a new frame for '('."""
	token = cursor.current
	if token.kind in (TokenKind.NUMBER, TokenKind.IDENTIFIER):
		stack[-1].items.append(leaf(cursor.advance()))
	elif token.kind is TokenKind.LPAREN:
		cursor.advance()
		stack.append(_open_body(cursor, closes=True))
	else:
		raise ParseError.unexpected(token, expected=_EXPR_EXPECTED, context=NonTerminal.EXPR.value)


def _run(cursor: TokenCursor, root: _Pending) -> ParseTree:
	stack = [root]
	while True:
		frame = stack[-1]
		if frame.finished(cursor.current.kind):
			stack.pop()
			node = frame.build()
			if frame.closes:
				cursor.expect(TokenKind.RPAREN)
			if not stack:
				return node
			stack[-1].items.append(node)
		elif frame.wants_identifier():
			frame.items.append(leaf(cursor.expect(TokenKind.IDENTIFIER)))
		else:
			_start_expr(cursor, stack)


def parse_application(cursor: TokenCursor) -> Sequence:
	"""
	Parse a function position and its arguments.

	Stops at the first lookahead that cannot start an expression. Only ')' and
	EOF are well-formed stops; anything else is left for the caller to reject.
	"""
	return cast(Sequence, _run(cursor, _Pending(None, closes=False)))


def parse_one_expr(cursor: TokenCursor) -> ParseTree:
	return _run(cursor, _Pending(None, closes=False, single=True))


def parse_paren_body(cursor: TokenCursor) -> ParseTree:
	"""Body of a parenthesised expression; the '(' is already consumed."""
	return _run(cursor, _open_body(cursor, closes=False))


__all__ = ["parse_application", "parse_one_expr", "parse_paren_body"]
