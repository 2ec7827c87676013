# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
`mlparse`: command-line front end for the MiniLisp parser.

	mlparse '(+ 2 3)'            parse text, print the tree as JSON
	mlparse -f prog.ml --tokens  parse a file, list tokens first
	mlparse --grammar            print productions and the parse table
	mlparse                      interactive mode, one expression per line

With --json the result (tree or diagnostics) is printed as one JSON object
with an `exit_code`; otherwise diagnostics go to stderr as
`file:line:col: error: message`.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from minilisp.core.diagnostics import Diagnostic
from minilisp.core.span import Span
from minilisp.driver import ParseResult, parse_source
from minilisp.formatter import format_grammar, format_tokens, to_json
from minilisp.parser import GRAMMAR, Token, TraceStep
from minilisp.parser.tokens import DELTA_EQUAL_TO, GREEK_SMALL_LAMBDA, MINUS_SIGN, MULTIPLICATION_SIGN

HELP_TEXT = f"""\
Basic expressions:
  42                 number literal
  x                  identifier
  (+ 2 3)            addition
  ({MULTIPLICATION_SIGN} x 5)            multiplication

Nested expressions:
  (+ ({MULTIPLICATION_SIGN} 2 3) 4)      nested arithmetic
  (? (= x 0) 1 0)    conditional

Functions:
  ({GREEK_SMALL_LAMBDA} x x)            lambda (identity)
  ({DELTA_EQUAL_TO} y 10 y)          let binding
  (({GREEK_SMALL_LAMBDA} x (+ x 1)) 5)  application

Reserved glyphs:
  {MULTIPLICATION_SIGN} (U+00D7) multiply   {MINUS_SIGN} (U+2212) minus, not '-'
  {GREEK_SMALL_LAMBDA} (U+03BB) lambda     {DELTA_EQUAL_TO} (U+225C) let
"""


def _token_to_json(tok: Token) -> dict:
	return {"kind": tok.kind.value, "lexeme": tok.lexeme, "line": tok.line, "column": tok.column}


def _print_trace(step: TraceStep) -> None:
	print(f"trace: {step}", file=sys.stderr)


def _json_payload(result: ParseResult, exit_code: int, with_tokens: bool) -> str:
	# The tree is rendered by `to_json`, which has no nesting limit; the other
	# fields are shallow and go through `json.dumps`.
	fields = [
		("exit_code", json.dumps(exit_code)),
		("tree", to_json(result.tree, pretty=False) if result.tree is not None else "null"),
		("diagnostics", json.dumps([d.to_dict() for d in result.diagnostics])),
	]
	if with_tokens:
		fields.append(("tokens", json.dumps([_token_to_json(t) for t in result.tokens])))
	return "{" + ", ".join(f"{json.dumps(key)}: {value}" for key, value in fields) + "}"


def _report(result: ParseResult, args: argparse.Namespace) -> int:
	exit_code = 0 if result.ok else 1
	if args.json:
		print(_json_payload(result, exit_code, args.tokens))
		return exit_code
	tree = result.tree
	if tree is None or not result.ok:
		for diag in result.diagnostics:
			print(diag.format_human(), file=sys.stderr)
		return exit_code
	if args.tokens:
		for line in format_tokens(result.tokens):
			print(line)
		print()
	print(to_json(tree, pretty=not args.compact))
	return exit_code


def _run_once(source: str, name: str, args: argparse.Namespace) -> int:
	trace = _print_trace if args.trace else None
	return _report(parse_source(source, file=name, trace=trace), args)


def _interactive(args: argparse.Namespace) -> int:
	print("MiniLisp LL(1) parser: one expression per line")
	print("Commands: 'exit' to quit, 'help' for examples")
	while True:
		try:
			line = input("> ")
		except EOFError:
			print()
			return 0
		text = line.strip()
		if not text:
			continue
		if text.lower() == "exit":
			return 0
		if text.lower() == "help":
			print(HELP_TEXT)
			continue
		_run_once(text, "<stdin>", args)


def _read_source(path: Path, args: argparse.Namespace) -> Optional[str]:
	try:
		return path.read_text(encoding="utf-8")
	except (OSError, UnicodeDecodeError) as err:
		diag = Diagnostic(message=f"cannot read {path}: {err}", phase="input", span=Span(file=str(path)))
		_report(ParseResult(diagnostics=[diag]), args)
		return None


def main(argv: list[str] | None = None) -> int:
	"""
	Parse one MiniLisp expression (argument or file) or run interactively.

	Returns 0 on success and 1 when the input has a lexical or syntax error.
	"""
	parser = argparse.ArgumentParser(prog="mlparse", description="MiniLisp table-driven LL(1) parser")
	parser.add_argument("expr", nargs="?", help="Expression text; omit (and omit --file) for interactive mode")
	parser.add_argument("-f", "--file", type=Path, help="Read the expression from a UTF-8 file")
	parser.add_argument("--tokens", action="store_true", help="Print the token stream before the tree")
	parser.add_argument("--compact", action="store_true", help="Print the tree as single-line JSON")
	parser.add_argument(
		"--json",
		action="store_true",
		help="Emit one JSON object (exit_code/tree/diagnostics) instead of text",
	)
	parser.add_argument("--trace", action="store_true", help="Print every parse-engine step to stderr")
	parser.add_argument("--grammar", action="store_true", help="Print the productions and parse table, then exit")
	args = parser.parse_args(argv)

	if args.grammar:
		for line in format_grammar(GRAMMAR):
			print(line)
		return 0
	if args.expr is not None and args.file is not None:
		parser.error("give an expression or --file, not both")
	if args.file is not None:
		source = _read_source(args.file, args)
		if source is None:
			return 1
		return _run_once(source, str(args.file), args)
	if args.expr is not None:
		return _run_once(args.expr, "<expr>", args)
	return _interactive(args)


__all__ = ["main"]
