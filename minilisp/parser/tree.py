# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Parse tree produced by the MiniLisp parser.

A tree is one of three frozen node types:

  Number(int)             integer literal (leading zeros are not retained)
  Symbol(str)             identifier, or the form label heading a Sequence
  Sequence(tuple[...])    operator form or function application

Form labels (`PLUS`, `LAMBDA`, ...) are plain `Symbol` heads, so
`(+ 1 2)` and `(PLUS 1 2)` produce equal trees; the formatter contract only
promises that the label is reproduced verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union


@dataclass(frozen=True)
class Number:
	value: int


@dataclass(frozen=True)
class Symbol:
	name: str


@dataclass(frozen=True)
class Sequence:
	items: tuple["ParseTree", ...]

	def __post_init__(self) -> None:
		# Accept any iterable from builders but store an immutable tuple.
		object.__setattr__(self, "items", tuple(self.items))
		if not self.items:
			raise ValueError("Sequence requires at least one element")

	@property
	def head(self) -> "ParseTree":
		return self.items[0]

	def __len__(self) -> int:
		return len(self.items)

	def __iter__(self) -> Iterator["ParseTree"]:
		return iter(self.items)

	def __getitem__(self, index: int) -> "ParseTree":
		return self.items[index]


ParseTree = Union[Number, Symbol, Sequence]

TreeData = Union[int, str, list]


def _leaf_data(node: ParseTree) -> TreeData:
	if isinstance(node, Number):
		return node.value
	if isinstance(node, Symbol):
		return node.name
	raise TypeError(f"not a parse tree node: {node!r}")


def _leaf_node(data: TreeData) -> ParseTree:
	# bool is an int subclass; it never appears in a parse tree.
	if isinstance(data, bool):
		raise TypeError(f"cannot convert {data!r} to a parse tree node")
	if isinstance(data, int):
		return Number(data)
	if isinstance(data, str):
		return Symbol(data)
	raise TypeError(f"cannot convert {data!r} to a parse tree node")


def to_data(tree: ParseTree) -> TreeData:
	"""Plain nested data: ints, strings and lists."""
	if not isinstance(tree, Sequence):
		return _leaf_data(tree)
	root: list = []
	# Walk with an explicit stack; trees may nest deeper than the recursion limit.
	stack = [(tree, root)]
	while stack:
		node, out = stack.pop()
		for item in node.items:
			if isinstance(item, Sequence):
				child: list = []
				out.append(child)
				stack.append((item, child))
			else:
				out.append(_leaf_data(item))
	return root


def from_data(data: TreeData) -> ParseTree:
	"""Inverse of `to_data`; handy for spelling expected trees in tests."""
	if not isinstance(data, (list, tuple)):
		return _leaf_node(data)
	stack: list[tuple[Iterator, list[ParseTree]]] = [(iter(data), [])]
	while True:
		items, built = stack[-1]
		for item in items:
			if isinstance(item, (list, tuple)):
				stack.append((iter(item), []))
				break
			built.append(_leaf_node(item))
		else:
			stack.pop()
			node = Sequence(tuple(built))
			if not stack:
				return node
			stack[-1][1].append(node)


__all__ = ["Number", "ParseTree", "Sequence", "Symbol", "TreeData", "from_data", "to_data"]
