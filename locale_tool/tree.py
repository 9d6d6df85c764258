#!/usr/bin/env python3
"""
Locale trees
A locale tree is either a Leaf holding one translated string or a Node mapping
path segments to subtrees, in insertion order.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Sequence, Union


@dataclass(frozen=True)
class Leaf:
	value: str

	def to_plain(self) -> str:
		return self.value


@dataclass
class Node:
	children: Dict[str, "LocaleTree"] = field(default_factory=dict)

	def set_path(self, path: Sequence[str], value: str) -> None:
		"""
		Store value at the end of path, creating nodes along the way

		Intermediate segments that are missing or hold a Leaf become empty Nodes.
		The final segment is always overwritten, whether it held a Leaf or a whole subtree.

		Args:
			path: Non-empty sequence of segments
			value (str): Leaf text to store
		"""
		if not path:
			raise ValueError("path must contain at least one segment")
		node = self
		for segment in path[:-1]:
			child = node.children.get(segment)
			if not isinstance(child, Node):
				child = Node()
				node.children[segment] = child
			node = child
		node.children[path[-1]] = Leaf(value)

	def count_leaves(self) -> int:
		return sum(1 if isinstance(child, Leaf) else child.count_leaves() for child in self.children.values())

	def to_plain(self) -> Dict[str, Any]:
		"""Convert to nested dicts and strings, ready for json.dump."""
		return {key: child.to_plain() for key, child in self.children.items()}


LocaleTree = Union[Leaf, Node]
