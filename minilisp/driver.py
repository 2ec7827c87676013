# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Front-end driver: source text -> tokens -> tree, with errors as diagnostics.

The library entry points (`minilisp.parser.scan` / `parse`) raise. This layer
is what the CLI uses: it catches the first `LexError`/`ParseError` and returns
it as a `Diagnostic` (phase "lexer" or "parser") together with whatever was
produced before the failure (the token list survives a syntax error, not a
lexical one).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from minilisp.core.diagnostics import Diagnostic, diagnostic_from_error
from minilisp.parser import LexError, ParseError, ParseTree, Token, TraceFn, parse_tokens, scan


@dataclass
class ParseResult:
	tree: Optional[ParseTree] = None
	tokens: list[Token] = field(default_factory=list)
	diagnostics: list[Diagnostic] = field(default_factory=list)

	@property
	def ok(self) -> bool:
		return self.tree is not None and not any(d.severity == "error" for d in self.diagnostics)


def parse_source(source: str, *, file: Optional[str] = None, trace: Optional[TraceFn] = None) -> ParseResult:
	result = ParseResult()
	try:
		result.tokens = scan(source)
		result.tree = parse_tokens(result.tokens, trace=trace)
	except (LexError, ParseError) as err:
		result.diagnostics.append(diagnostic_from_error(err, file=file))
	return result


def parse_file(path: Path, *, trace: Optional[TraceFn] = None) -> ParseResult:
	return parse_source(path.read_text(encoding="utf-8"), file=str(path), trace=trace)


__all__ = ["ParseResult", "parse_file", "parse_source"]
