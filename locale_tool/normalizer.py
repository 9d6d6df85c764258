#!/usr/bin/env python3
"""
Sheet normalization
Turns the raw rows read from a worksheet (header row first) into records keyed
by trimmed header names, with every cell converted to text.
"""

from datetime import date, datetime, time
from typing import Any, Dict, List, NamedTuple, Optional, Sequence, Tuple

from .errors import EmptySheet

EMPTY_HEADER = "__EMPTY"


class SheetTable(NamedTuple):
	"""Header names in column order plus one record per data row."""

	headers: Tuple[str, ...]
	rows: Tuple[Dict[str, str], ...]


def cell_to_text(value: Any) -> str:
	"""Convert a raw cell value to the text shown for it in the sheet."""
	if value is None:
		return ""
	if isinstance(value, str):
		return value
	if isinstance(value, bool):
		return "TRUE" if value else "FALSE"
	if isinstance(value, float) and value.is_integer():
		return str(int(value))
	if isinstance(value, datetime):
		if value.time() == time(0, 0):
			return value.date().isoformat()
		return value.isoformat(sep=" ")
	if isinstance(value, (date, time)):
		return value.isoformat()
	return str(value)


def normalize_header(header: Any) -> str:
	return cell_to_text(header).strip()


def _is_blank(value: Any) -> bool:
	return cell_to_text(value) == ""


def _unique_headers(raw_headers: Sequence[Any]) -> List[str]:
	headers: List[str] = []
	seen: Dict[str, int] = {}
	for raw in raw_headers:
		base = normalize_header(raw) or EMPTY_HEADER
		name = base
		while name in seen:
			seen[base] += 1
			name = f"{base}_{seen[base]}"
		seen.setdefault(name, 0)
		headers.append(name)
	return headers


def _used_width(rows: Sequence[Sequence[Any]]) -> int:
	width = 0
	for row in rows:
		for index in range(len(row) - 1, -1, -1):
			if not _is_blank(row[index]):
				width = max(width, index + 1)
				break
	return width


def normalize_sheet(rows: Sequence[Sequence[Any]], sheet_name: Optional[str] = None) -> SheetTable:
	"""
	Build the header set and the per-row records of a sheet

	Args:
		rows: Raw rows of the sheet, the header row first
		sheet_name (str, optional): Only used in the error message

	Returns:
		SheetTable whose records hold a string (possibly empty) for every header

	Raises:
		EmptySheet: when no non-blank row follows the header row
	"""
	if not rows:
		raise EmptySheet(sheet_name)

	width = _used_width(rows)
	header_row = list(rows[0][:width])
	header_row += [None] * (width - len(header_row))
	headers = _unique_headers(header_row)

	records: List[Dict[str, str]] = []
	for row in rows[1:]:
		cells = list(row[:width])
		if all(_is_blank(cell) for cell in cells):
			continue
		cells += [None] * (width - len(cells))
		records.append({header: cell_to_text(cell) for header, cell in zip(headers, cells)})

	if not records:
		raise EmptySheet(sheet_name)

	return SheetTable(headers=tuple(headers), rows=tuple(records))
