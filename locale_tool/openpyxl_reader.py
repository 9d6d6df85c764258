#!/usr/bin/env python3
"""
OpenPyXL-based sheet reader for cross-platform environments without local Excel.
Limitations:
- No live calculation engine; formula cells yield the value cached by the last save
  (None when the workbook was never opened in Excel)
"""

from __future__ import annotations

from pathlib import Path
from zipfile import BadZipFile
from typing import Any, List, Optional

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.worksheet import Worksheet

from .errors import InputNotFound, SheetNotFound, UnreadableInput


class OpenpyxlSheetReader:
	"""Read the raw cell values of one worksheet using openpyxl."""

	def __init__(self, excel_file_path: str):
		self.excel_file_path = Path(excel_file_path)
		self.workbook = None
		self.worksheet: Optional[Worksheet] = None
		if not self.excel_file_path.exists():
			raise InputNotFound(excel_file_path)

	def __enter__(self):
		self.open_workbook()
		return self

	def __exit__(self, exc_type, exc_val, exc_tb):
		self.close_workbook()

	def open_workbook(self) -> None:
		# data_only=True so formula cells give their displayed result, not the formula text
		try:
			self.workbook = load_workbook(filename=str(self.excel_file_path), data_only=True, read_only=True)
		except (InvalidFileException, BadZipFile) as e:
			raise UnreadableInput(self.excel_file_path, e) from e

	def close_workbook(self) -> None:
		if self.workbook:
			self.workbook.close()
			self.workbook = None

	def sheet_names(self) -> List[str]:
		return list(self.workbook.sheetnames)

	def _select_sheet(self, sheet_name: Optional[str]) -> Worksheet:
		if sheet_name:
			if sheet_name not in self.sheet_names():
				raise SheetNotFound(sheet_name)
			self.worksheet = self.workbook[sheet_name]
		else:
			# First sheet in the file, not whichever one was active on save
			self.worksheet = self.workbook.worksheets[0]
		return self.worksheet

	def read_rows(self, sheet_name: Optional[str] = None) -> List[List[Any]]:
		"""
		Read every row of a worksheet as a list of raw cell values

		Args:
			sheet_name (str, optional): Name of the worksheet. If None, uses the first sheet.

		Returns:
			List of rows, header row first; rows may differ in length
		"""
		ws = self._select_sheet(sheet_name)
		return [list(row) for row in ws.iter_rows(values_only=True)]

	@property
	def sheet_title(self) -> Optional[str]:
		return self.worksheet.title if self.worksheet is not None else None
