# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
minilisp: scanner and table-driven LL(1) parser for MiniLisp expressions.

Packages:
  parser: tokens, scanner, grammar table, parse engine, application sub-parser
  core:   spans and diagnostics used by the driver and CLI

The CLI entrypoint is `minilisp.mlparse:main`.
"""

from minilisp.parser import LexError, ParseError, ParseTree, parse, scan

__all__ = ["LexError", "ParseError", "ParseTree", "parse", "scan"]
