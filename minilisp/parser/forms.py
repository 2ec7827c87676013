# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Tree builders shared by the table-driven engine and the application sub-parser.

Every parenthesised operator/binder form is described once, as a `ParenForm`:
the token that introduces it, the label placed at the head of the resulting
`Sequence`, and the shape of its operands. The grammar table derives the
right-hand sides of productions 5-11 from these descriptions, and the
sub-parser walks the same operand shapes, so both paths emit identical trees.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping

from .errors import ParserStateError
from .tokens import Token, TokenKind
from .tree import Number, ParseTree, Sequence, Symbol


class Operand(str, Enum):
	EXPR = "expr"
	IDENT = "ident"


@dataclass(frozen=True)
class ParenForm:
	leader: TokenKind
	label: str
	operands: tuple[Operand, ...]

	@property
	def arity(self) -> int:
		return len(self.operands)

	def build(self, operands: Iterable[ParseTree]) -> Sequence:
		args = tuple(operands)
		if len(args) != self.arity:
			raise ParserStateError(f"{self.label} expects {self.arity} operands, got {len(args)}")
		return Sequence((Symbol(self.label), *args))

	def reduce(self, values: list[ParseTree]) -> None:
		"""
		Replace this form's operands on top of `values` with the built node.

		Operands were pushed left to right, so the rightmost one is popped first.
		"""
		if len(values) < self.arity:
			raise ParserStateError(
				f"{self.label} needs {self.arity} values but the value stack holds {len(values)}"
			)
		operands = [values.pop() for _ in range(self.arity)]
		operands.reverse()
		values.append(self.build(operands))


_E = Operand.EXPR
_I = Operand.IDENT

PAREN_FORMS: Mapping[TokenKind, ParenForm] = {
	form.leader: form
	for form in (
		ParenForm(TokenKind.PLUS, "PLUS", (_E, _E)),
		ParenForm(TokenKind.MULT, "MULT", (_E, _E)),
		ParenForm(TokenKind.EQUALS, "EQUALS", (_E, _E)),
		ParenForm(TokenKind.MINUS, "MINUS", (_E, _E)),
		ParenForm(TokenKind.CONDITIONAL, "CONDITIONAL", (_E, _E, _E)),
		ParenForm(TokenKind.LAMBDA, "LAMBDA", (_I, _E)),
		ParenForm(TokenKind.LET, "LET", (_I, _E, _E)),
	)
}


def leaf(token: Token) -> ParseTree:
	"""Value contributed by a matched NUMBER or IDENTIFIER token."""
	if token.lexeme is None:
		raise ParserStateError(f"{token.kind.value} token carries no value")
	if token.kind is TokenKind.NUMBER:
		return Number(int(token.lexeme, 10))
	return Symbol(token.lexeme)


def build_application(items: Iterable[ParseTree]) -> Sequence:
	"""Function position followed by zero or more arguments."""
	return Sequence(tuple(items))


__all__ = ["Operand", "PAREN_FORMS", "ParenForm", "build_application", "leaf"]
