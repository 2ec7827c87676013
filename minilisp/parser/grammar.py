# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
MiniLisp grammar and its LL(1) parse table.

	1.  Program   -> Expr
	2.  Expr      -> NUMBER
	3.  Expr      -> IDENTIFIER
	4.  Expr      -> '(' ParenBody ')'
	5.  ParenBody -> '+' Expr Expr               {PLUS}
	6.  ParenBody -> '×' Expr Expr               {MULT}
	7.  ParenBody -> '=' Expr Expr               {EQUALS}
	8.  ParenBody -> '−' Expr Expr               {MINUS}
	9.  ParenBody -> '?' Expr Expr Expr          {CONDITIONAL}
	10. ParenBody -> 'λ' IDENTIFIER Expr         {LAMBDA}
	11. ParenBody -> '≜' IDENTIFIER Expr Expr    {LET}
	12. ParenBody -> Expr Expr*

Right-hand sides are sequences of grammar symbols: terminals, non-terminals
and actions. An action sits after the operands it combines so it fires once
they are all on the value stack. Production 12 has no finite right-hand side;
its nominal `rhs` is never pushed, the engine hands it to the application
sub-parser instead.

The table maps (non-terminal, lookahead kind) to a production. A missing cell
is the only way the table reports a syntax error; `lookup` itself never
raises. Building a table with two productions in one cell raises
`GrammarConflictError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Iterator, Optional, Union

from .errors import GrammarConflictError
from .forms import PAREN_FORMS, Operand, ParenForm
from .tokens import TokenKind
from .tree import ParseTree


class NonTerminal(str, Enum):
	PROGRAM = "Program"
	EXPR = "Expr"
	PAREN_BODY = "ParenBody"


@dataclass(frozen=True)
class Terminal:
	kind: TokenKind

	def __str__(self) -> str:
		glyph = self.kind.glyph
		return f"'{glyph}'" if glyph is not None else self.kind.value


@dataclass(frozen=True)
class NonTerminalSymbol:
	which: NonTerminal

	def __str__(self) -> str:
		return self.which.value


@dataclass(frozen=True)
class Action:
	form: ParenForm

	def run(self, values: list[ParseTree]) -> None:
		self.form.reduce(values)

	def __str__(self) -> str:
		return "{" + self.form.label + "}"


GrammarSymbol = Union[Terminal, NonTerminalSymbol, Action]


@dataclass(frozen=True)
class Production:
	id: int
	lhs: NonTerminal
	rhs: tuple[GrammarSymbol, ...]
	# Lookahead kinds this production is selected on (its table cells).
	first: frozenset[TokenKind]
	variadic: bool = False

	def __str__(self) -> str:
		body = " ".join(str(sym) for sym in self.rhs)
		if self.variadic:
			body += " " + " ".join(f"{sym}*" for sym in self.rhs)
		return f"{self.lhs.value} -> {body}"


EXPR_FIRST: frozenset[TokenKind] = frozenset({TokenKind.NUMBER, TokenKind.IDENTIFIER, TokenKind.LPAREN})

APPLICATION_PRODUCTION = 12

_EXPR = NonTerminalSymbol(NonTerminal.EXPR)


def _form_production(pid: int, leader: TokenKind) -> Production:
	form = PAREN_FORMS[leader]
	rhs: list[GrammarSymbol] = [Terminal(leader)]
	for operand in form.operands:
		rhs.append(Terminal(TokenKind.IDENTIFIER) if operand is Operand.IDENT else _EXPR)
	rhs.append(Action(form))
	return Production(pid, NonTerminal.PAREN_BODY, tuple(rhs), frozenset({leader}))


PRODUCTIONS: tuple[Production, ...] = (
	Production(1, NonTerminal.PROGRAM, (_EXPR,), EXPR_FIRST),
	Production(2, NonTerminal.EXPR, (Terminal(TokenKind.NUMBER),), frozenset({TokenKind.NUMBER})),
	Production(3, NonTerminal.EXPR, (Terminal(TokenKind.IDENTIFIER),), frozenset({TokenKind.IDENTIFIER})),
	Production(
		4,
		NonTerminal.EXPR,
		(Terminal(TokenKind.LPAREN), NonTerminalSymbol(NonTerminal.PAREN_BODY), Terminal(TokenKind.RPAREN)),
		frozenset({TokenKind.LPAREN}),
	),
	_form_production(5, TokenKind.PLUS),
	_form_production(6, TokenKind.MULT),
	_form_production(7, TokenKind.EQUALS),
	_form_production(8, TokenKind.MINUS),
	_form_production(9, TokenKind.CONDITIONAL),
	_form_production(10, TokenKind.LAMBDA),
	_form_production(11, TokenKind.LET),
	Production(APPLICATION_PRODUCTION, NonTerminal.PAREN_BODY, (_EXPR,), EXPR_FIRST, variadic=True),
)


class GrammarTable:
	"""Immutable (non-terminal, lookahead) -> production map."""

	def __init__(self, productions: Iterable[Production]) -> None:
		prods = tuple(productions)
		cells: dict[tuple[NonTerminal, TokenKind], Production] = {}
		for prod in prods:
			for kind in TokenKind:
				if kind not in prod.first:
					continue
				key = (prod.lhs, kind)
				other = cells.get(key)
				if other is not None:
					raise GrammarConflictError(
						f"productions {other.id} and {prod.id} both expand {prod.lhs.value} on {kind.value}"
					)
				cells[key] = prod
		self._productions = MappingProxyType({p.id: p for p in prods})
		self._cells = MappingProxyType(cells)

	def lookup(self, nonterminal: NonTerminal, lookahead: TokenKind) -> Optional[Production]:
		return self._cells.get((nonterminal, lookahead))

	def expected(self, nonterminal: NonTerminal) -> tuple[TokenKind, ...]:
		"""Lookahead kinds with an entry for `nonterminal`, in TokenKind order."""
		return tuple(kind for kind in TokenKind if (nonterminal, kind) in self._cells)

	def production(self, pid: int) -> Production:
		return self._productions[pid]

	@property
	def productions(self) -> tuple[Production, ...]:
		return tuple(self._productions.values())

	def rows(self) -> Iterator[tuple[NonTerminal, TokenKind, int]]:
		for nonterminal in NonTerminal:
			for kind in TokenKind:
				prod = self._cells.get((nonterminal, kind))
				if prod is not None:
					yield nonterminal, kind, prod.id

	def __len__(self) -> int:
		return len(self._cells)


GRAMMAR = GrammarTable(PRODUCTIONS)

PAREN_BODY_FIRST: tuple[TokenKind, ...] = GRAMMAR.expected(NonTerminal.PAREN_BODY)


__all__ = [
	"APPLICATION_PRODUCTION",
	"Action",
	"EXPR_FIRST",
	"GRAMMAR",
	"GrammarSymbol",
	"GrammarTable",
	"NonTerminal",
	"NonTerminalSymbol",
	"PAREN_BODY_FIRST",
	"PRODUCTIONS",
	"Production",
	"Terminal",
]
