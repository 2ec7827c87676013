# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Text renderings of parse trees, token streams and the grammar table.

Trees render as JSON arrays: numbers stay numbers, symbols and form labels
become strings, sequences become arrays. Rendering is a pure function of the
tree, so formatting the same tree twice is byte-identical.
"""

from __future__ import annotations

import json
from typing import Iterable, Union

from minilisp.parser.grammar import GrammarTable
from minilisp.parser.tokens import Token, TokenKind
from minilisp.parser.tree import ParseTree, Sequence, to_data


def to_json(tree: ParseTree, *, pretty: bool = True) -> str:
	"""
	Render `tree` as JSON, byte-for-byte what `json.dumps` gives for
	`to_data(tree)` with `indent=2` (pretty) or `separators=(",", ":")`.

	Sequences are expanded from an explicit stack, so nesting deeper than the
	interpreter's recursion limit still renders.
	"""
	out: list[str] = []
	# Entries are literal text, or a (node, depth) pair still to render.
	stack: list[Union[str, tuple[ParseTree, int]]] = [(tree, 0)]
	while stack:
		entry = stack.pop()
		if isinstance(entry, str):
			out.append(entry)
			continue
		node, depth = entry
		if not isinstance(node, Sequence):
			out.append(json.dumps(to_data(node)))
			continue
		if pretty:
			inner = "\n" + "  " * (depth + 1)
			out.append("[" + inner)
			stack.append("\n" + "  " * depth + "]")
			separator = "," + inner
		else:
			out.append("[")
			stack.append("]")
			separator = ","
		for index in reversed(range(len(node))):
			stack.append((node[index], depth + 1))
			if index:
				stack.append(separator)
	return "".join(out)


def format_tokens(tokens: Iterable[Token]) -> list[str]:
	"""One line per token, EOF omitted."""
	return [str(tok) for tok in tokens if tok.kind is not TokenKind.EOF]


def format_grammar(table: GrammarTable) -> list[str]:
	lines = ["Productions:"]
	for prod in table.productions:
		lines.append(f"  {prod.id:>2}. {prod}")
	lines.append("")
	lines.append("Parse table:")
	for nonterminal, kind, pid in table.rows():
		lines.append(f"  {nonterminal.value:<10} {kind.describe():<14} -> {pid}")
	return lines


__all__ = ["format_grammar", "format_tokens", "to_json"]
