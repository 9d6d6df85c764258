#!/usr/bin/env python3
"""
pandas-based sheet reader for the workbook formats openpyxl cannot open:
legacy Excel .xls (through xlrd) and OpenDocument .ods (through odfpy).
"""

from pathlib import Path
from typing import Any, List, Optional

import pandas as pd

from .errors import InputNotFound, SheetNotFound, UnreadableInput

ENGINES = {
	".xls": "xlrd",
	".ods": "odf",
}


class PandasSheetReader:
	"""Read the raw cell values of one worksheet using pandas.read_excel."""

	def __init__(self, excel_file_path: str):
		self.excel_file_path = Path(excel_file_path)
		self.workbook: Optional[pd.ExcelFile] = None
		self.worksheet: Optional[str] = None
		if not self.excel_file_path.exists():
			raise InputNotFound(excel_file_path)

	def __enter__(self):
		self.open_workbook()
		return self

	def __exit__(self, exc_type, exc_val, exc_tb):
		self.close_workbook()

	def open_workbook(self) -> None:
		engine = ENGINES.get(self.excel_file_path.suffix.lower())
		try:
			self.workbook = pd.ExcelFile(self.excel_file_path, engine=engine)
		except Exception as e:
			# xlrd, odfpy and pandas each raise their own error type for a corrupt file
			raise UnreadableInput(self.excel_file_path, e) from e

	def close_workbook(self) -> None:
		if self.workbook is not None:
			self.workbook.close()
			self.workbook = None

	def sheet_names(self) -> List[str]:
		return [str(name) for name in self.workbook.sheet_names]

	def read_rows(self, sheet_name: Optional[str] = None) -> List[List[Any]]:
		"""
		Read every row of a worksheet as a list of raw cell values

		Args:
			sheet_name (str, optional): Name of the worksheet. If None, uses the first sheet.

		Returns:
			List of rows, header row first; empty cells are None
		"""
		if sheet_name:
			if sheet_name not in self.sheet_names():
				raise SheetNotFound(sheet_name)
			self.worksheet = sheet_name
		else:
			self.worksheet = self.sheet_names()[0]

		# header=None keeps the header row as data so the normalizer sees it like any other reader's output
		frame = self.workbook.parse(self.worksheet, header=None, dtype=object)
		return [
			[None if pd.isna(value) else value for value in row]
			for row in frame.itertuples(index=False, name=None)
		]

	@property
	def sheet_title(self) -> Optional[str]:
		return self.worksheet
