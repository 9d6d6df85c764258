#!/usr/bin/env python3
"""CSV sheet reader. A CSV file is treated as a workbook with one sheet named after the file."""

import csv
from pathlib import Path
from typing import Any, List, Optional

from .errors import InputNotFound, SheetNotFound, UnreadableInput


class CsvSheetReader:
	"""Read the rows of a UTF-8 CSV file with the same interface as the workbook readers."""

	def __init__(self, csv_file_path: str):
		self.csv_file_path = Path(csv_file_path)
		self.rows: Optional[List[List[Any]]] = None
		if not self.csv_file_path.exists():
			raise InputNotFound(csv_file_path)

	def __enter__(self):
		self.open_workbook()
		return self

	def __exit__(self, exc_type, exc_val, exc_tb):
		self.rows = None

	def open_workbook(self) -> None:
		# utf-8-sig drops the BOM spreadsheet apps put in front of exported CSV
		try:
			with self.csv_file_path.open("r", newline="", encoding="utf-8-sig") as f:
				self.rows = [list(row) for row in csv.reader(f)]
		except UnicodeDecodeError as e:
			raise UnreadableInput(self.csv_file_path, f"not UTF-8 encoded ({e.reason} at byte {e.start}); re-export the file as UTF-8 CSV") from e

	def sheet_names(self) -> List[str]:
		return [self.csv_file_path.stem]

	def read_rows(self, sheet_name: Optional[str] = None) -> List[List[Any]]:
		if sheet_name and sheet_name not in self.sheet_names():
			raise SheetNotFound(sheet_name)
		return [list(row) for row in self.rows or []]

	@property
	def sheet_title(self) -> str:
		return self.csv_file_path.stem
