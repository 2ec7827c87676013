# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Errors raised by the MiniLisp front end.

`LexError` and `ParseError` are user-facing: they are `ValueError` subclasses
carrying a source location and a short stable `code`, so the driver can turn
them into structured diagnostics instead of crashing. Neither is ever
recovered from; the first one raised ends the scan/parse.

`ParserStateError` is different: it means the grammar table and the semantic
actions disagree, which no input should be able to trigger.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .tokens import Token, TokenKind


def _one_of(kinds: Iterable[TokenKind]) -> str:
	names = [k.describe() for k in kinds]
	if not names:
		return "nothing"
	if len(names) == 1:
		return names[0]
	return ", ".join(names[:-1]) + " or " + names[-1]


class LexError(ValueError):
	"""Unrecognised or malformed character in the source text."""

	def __init__(
		self,
		message: str,
		*,
		line: int,
		column: int,
		char: str,
		code: str = "unexpected-character",
		hint: Optional[str] = None,
	) -> None:
		super().__init__(message)
		self.message = message
		self.line = line
		self.column = column
		self.char = char
		self.code = code
		self.hint = hint


class ParseError(ValueError):
	"""
	Syntax error: the token stream does not derive from the grammar.

	`found` is the kind of the offending token and `line`/`column` its
	position. `expected` lists the kinds that would have been accepted (a single
	kind for a terminal mismatch, the table's lookahead set for a missing
	entry). `context` names the non-terminal being expanded, when there is one.
	`token` is the offending token itself, kept so diagnostics can span it.
	"""

	def __init__(
		self,
		message: str,
		*,
		line: int,
		column: int,
		found: TokenKind,
		expected: tuple[TokenKind, ...] = (),
		context: Optional[str] = None,
		code: str = "unexpected-token",
		token: Optional[Token] = None,
	) -> None:
		super().__init__(message)
		self.message = message
		self.line = line
		self.column = column
		self.found = found
		self.expected = expected
		self.context = context
		self.code = code
		self.token = token

	@classmethod
	def mismatch(cls, expected: TokenKind, token: Token) -> "ParseError":
		return cls(
			f"expected {expected.describe()} but found {token.describe()} "
			f"at line {token.line}, column {token.column}",
			line=token.line,
			column=token.column,
			found=token.kind,
			expected=(expected,),
			code="token-mismatch",
			token=token,
		)

	@classmethod
	def unexpected(cls, token: Token, *, expected: Iterable[TokenKind], context: str) -> "ParseError":
		kinds = tuple(expected)
		return cls(
			f"unexpected {token.describe()} at line {token.line}, column {token.column} "
			f"while parsing {context}; expected {_one_of(kinds)}",
			line=token.line,
			column=token.column,
			found=token.kind,
			expected=kinds,
			context=context,
			token=token,
		)


class GrammarConflictError(ValueError):
	"""Two productions claim the same (non-terminal, lookahead) table cell."""


class ParserStateError(RuntimeError):
	"""Grammar table and semantic actions are out of sync (a parser bug)."""


__all__ = ["GrammarConflictError", "LexError", "ParseError", "ParserStateError"]
