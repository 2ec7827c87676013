# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Table-driven LL(1) parse engine.

Two stacks drive the parse:

- the *control stack* holds grammar symbols still to be processed
  (terminals to match, non-terminals to expand, actions to run);
- the *value stack* holds finished subtrees waiting to be combined.

Expansion is pre-order (leftmost derivation) while tree building is
post-order: an action is pushed below its operands' symbols, so it only runs
once every operand has been reduced to a single value.

The control stack starts as [EOF, Program], so EOF is matched last. When it
empties, the value stack must hold exactly the finished tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Optional, Sequence

from .application import parse_application
from .cursor import TokenCursor
from .errors import ParseError, ParserStateError
from .forms import leaf
from .grammar import (
	GRAMMAR,
	Action,
	GrammarSymbol,
	GrammarTable,
	NonTerminal,
	NonTerminalSymbol,
	Terminal,
)
from .tokens import Token, TokenKind
from .tree import ParseTree


@dataclass(frozen=True)
class TraceStep:
	"""One control-stack step, reported to an optional trace callback."""

	kind: Literal["match", "expand", "apply", "delegate"]
	symbol: str
	lookahead: Token
	control_depth: int
	value_depth: int
	production: Optional[int] = None

	def __str__(self) -> str:
		prod = f" [{self.production}]" if self.production is not None else ""
		return (
			f"{self.kind:<8} {self.symbol}{prod} @ {self.lookahead.describe()} "
			f"(control={self.control_depth}, values={self.value_depth})"
		)


TraceFn = Callable[[TraceStep], None]


class LL1Parser:
	"""
	Parse one token stream into a `ParseTree`.

	Each instance owns its cursor and stacks; the grammar table is shared and
	read-only, so separate instances may run on separate threads.
	"""

	def __init__(
		self,
		tokens: Sequence[Token],
		*,
		table: GrammarTable = GRAMMAR,
		trace: Optional[TraceFn] = None,
	) -> None:
		self._cursor = TokenCursor(tokens)
		self._table = table
		self._trace = trace

	def parse(self) -> ParseTree:
		control: list[GrammarSymbol] = [Terminal(TokenKind.EOF), NonTerminalSymbol(NonTerminal.PROGRAM)]
		values: list[ParseTree] = []

		while control:
			symbol = control.pop()
			if isinstance(symbol, Terminal):
				self._match(symbol, control, values)
			elif isinstance(symbol, NonTerminalSymbol):
				self._expand(symbol, control, values)
			elif isinstance(symbol, Action):
				symbol.run(values)
				self._emit("apply", symbol, control, values)
			else:
				raise ParserStateError(f"unknown grammar symbol on control stack: {symbol!r}")

		if not values:
			raise ParserStateError("parse completed but no tree was produced")
		if len(values) != 1:
			raise ParserStateError(f"parse completed with {len(values)} values on the value stack")
		return values[0]

	def _match(self, symbol: Terminal, control: list[GrammarSymbol], values: list[ParseTree]) -> None:
		token = self._cursor.expect(symbol.kind)
		if token.kind.carries_lexeme:
			values.append(leaf(token))
		self._emit("match", symbol, control, values, lookahead=token)

	def _expand(self, symbol: NonTerminalSymbol, control: list[GrammarSymbol], values: list[ParseTree]) -> None:
		lookahead = self._cursor.current
		production = self._table.lookup(symbol.which, lookahead.kind)
		if production is None:
			raise ParseError.unexpected(
				lookahead,
				expected=self._table.expected(symbol.which),
				context=symbol.which.value,
			)
		if production.variadic:
			values.append(parse_application(self._cursor))
			self._emit("delegate", symbol, control, values, lookahead=lookahead, production=production.id)
			return
		control.extend(reversed(production.rhs))
		self._emit("expand", symbol, control, values, lookahead=lookahead, production=production.id)

	def _emit(
		self,
		kind: Literal["match", "expand", "apply", "delegate"],
		symbol: GrammarSymbol,
		control: list[GrammarSymbol],
		values: list[ParseTree],
		*,
		lookahead: Optional[Token] = None,
		production: Optional[int] = None,
	) -> None:
		if self._trace is None:
			return
		self._trace(
			TraceStep(
				kind=kind,
				symbol=str(symbol),
				lookahead=lookahead if lookahead is not None else self._cursor.current,
				control_depth=len(control),
				value_depth=len(values),
				production=production,
			)
		)


def parse_tokens(
	tokens: Sequence[Token],
	*,
	table: GrammarTable = GRAMMAR,
	trace: Optional[TraceFn] = None,
) -> ParseTree:
	"""Parse a scanned token list; raises `ParseError` on the first mismatch."""
	return LL1Parser(tokens, table=table, trace=trace).parse()


__all__ = ["LL1Parser", "TraceFn", "TraceStep", "parse_tokens"]
