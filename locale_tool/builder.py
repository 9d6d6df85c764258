#!/usr/bin/env python3
"""
Locale tree building
Assigns a role to every column of a normalized sheet (key, reference, language)
and fills one locale tree per language column from the sheet's rows.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .errors import UsageError
from .normalizer import SheetTable
from .tree import Node


@dataclass(frozen=True)
class ColumnRoles:
	"""Which header holds the keys, which the reference text, and which the languages."""

	key: str
	reference: Optional[str]
	languages: Tuple[str, ...]


def _resolve_override(headers: Sequence[str], name: Optional[str], role: str) -> Optional[str]:
	if name is None:
		return None
	header = name.strip()
	if header not in headers:
		available = ", ".join(headers)
		raise UsageError(f"{role} column '{header}' not found in sheet headers: {available}")
	return header


def resolve_column_roles(
	headers: Sequence[str],
	key_header: Optional[str] = None,
	reference_header: Optional[str] = None,
) -> ColumnRoles:
	"""
	Resolve column roles for a header set

	Args:
		headers: Normalized header names in column order
		key_header (str, optional): Key column name. Defaults to the first header.
		reference_header (str, optional): Reference column name. Defaults to the second header.

	Returns:
		ColumnRoles; languages are all remaining headers in column order

	Raises:
		UsageError: when an explicit name is not one of the headers
	"""
	if not headers:
		raise UsageError("Sheet has no header row")
	key = _resolve_override(headers, key_header, "Key") or headers[0]
	reference = _resolve_override(headers, reference_header, "Reference")
	if reference is None and len(headers) > 1:
		reference = headers[1]
	languages = tuple(h for h in headers if h != key and h != reference)
	return ColumnRoles(key=key, reference=reference, languages=languages)


def normalize_value(value: str) -> str:
	# Keep multi-line translations on one JSON line as a literal \n
	return value.replace("\r", "").replace("\n", "\\n")


def split_key(key: str) -> List[str]:
	return [segment for segment in key.split(".") if segment]


def build_locale_trees(
	table: SheetTable,
	key_header: Optional[str] = None,
	reference_header: Optional[str] = None,
) -> Dict[str, Node]:
	"""
	Build one locale tree per language column

	Rows with a blank key are skipped for every language. A later row whose key
	collides with an earlier one (same key, or one a path prefix of the other)
	overwrites it at the node it writes.

	Args:
		table (SheetTable): Normalized sheet
		key_header (str, optional): Key column override
		reference_header (str, optional): Reference column override

	Returns:
		Mapping from language header to its tree, in column order
	"""
	roles = resolve_column_roles(table.headers, key_header, reference_header)
	trees: Dict[str, Node] = {language: Node() for language in roles.languages}

	for row in table.rows:
		key = row.get(roles.key, "").strip()
		if not key:
			continue
		path = split_key(key)
		if not path:
			continue
		for language in roles.languages:
			trees[language].set_path(path, normalize_value(row.get(language, "")))

	return trees
