# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Structured diagnostics for the MiniLisp front end.

The scanner and parser raise exceptions; the driver converts the first one
into a `Diagnostic` so the CLI can print it (or emit it as JSON) without a
traceback. There is only ever one: neither phase recovers from errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from minilisp.parser.errors import LexError, ParseError

from .span import Span


@dataclass
class Diagnostic:
	"""A front-end diagnostic (error/warning) with a source location."""

	message: str
	code: str | None = None
	# "lexer" or "parser"; set by `diagnostic_from_error`.
	phase: str | None = None
	severity: str = "error"
	span: Span = field(default_factory=Span)  # Span() denotes unknown.
	notes: list[str] = field(default_factory=list)

	def __post_init__(self) -> None:
		if self.span is None:  # type: ignore[unreachable]
			self.span = Span()

	def format_human(self) -> str:
		"""`file:line:col: severity: message`, one line, plus indented notes."""
		lines = [f"{self.span.label()}: {self.severity}: {self.message}"]
		lines.extend(f"  note: {note}" for note in self.notes)
		return "\n".join(lines)

	def to_dict(self) -> dict:
		return {
			"phase": self.phase,
			"code": self.code,
			"message": self.message,
			"severity": self.severity,
			"file": self.span.file,
			"line": self.span.line,
			"column": self.span.column,
			"end_line": self.span.end_line,
			"end_column": self.span.end_column,
			"notes": list(self.notes),
		}


def diagnostic_from_error(err: Union[LexError, ParseError], *, file: Optional[str] = None) -> Diagnostic:
	"""Convert a scanner/parser exception into a Diagnostic."""
	if isinstance(err, LexError):
		notes = [err.hint] if err.hint else []
		span = Span.from_loc(err, file=file)
		return Diagnostic(message=err.message, code=err.code, phase="lexer", span=span, notes=notes)
	if err.token is not None:
		span = Span.from_token(err.token, file=file)
	else:
		span = Span.from_loc(err, file=file)
	return Diagnostic(message=err.message, code=err.code, phase="parser", span=span)


__all__ = ["Diagnostic", "diagnostic_from_error"]
