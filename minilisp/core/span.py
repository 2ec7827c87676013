# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Source span attached to diagnostics.

MiniLisp errors point at a single character or token, so a span is a start
position plus an optional end. `file` names the input (a path, or a label
like `<expr>` for text given on the command line).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Span:
	"""Best-effort file/line/column location (Span() denotes unknown)."""

	file: Optional[str] = None
	line: Optional[int] = None
	column: Optional[int] = None
	end_line: Optional[int] = None
	end_column: Optional[int] = None

	@classmethod
	def from_token(cls, token: Any, *, file: Optional[str] = None) -> "Span":
		"""Span covering a scanned token; EOF gets an empty span."""
		if token.lexeme is not None:
			width = len(token.lexeme)
		else:
			width = 1 if token.kind.glyph is not None else 0
		return cls(
			file=file,
			line=token.line,
			column=token.column,
			end_line=token.line,
			end_column=token.column + width,
		)

	@classmethod
	def from_loc(cls, loc: Any, *, file: Optional[str] = None) -> "Span":
		"""
		Span from any object exposing `line`/`column` (errors, tokens).

		A Span is returned unchanged; None yields the unknown span.
		"""
		if loc is None:
			return cls(file=file)
		if isinstance(loc, cls):
			return loc
		return cls(
			file=file,
			line=getattr(loc, "line", None),
			column=getattr(loc, "column", None),
		)

	def label(self) -> str:
		"""`file:line:column` with `?` for unknown parts."""
		line = self.line if self.line is not None else "?"
		column = self.column if self.column is not None else "?"
		return f"{self.file or '<input>'}:{line}:{column}"


__all__ = ["Span"]
