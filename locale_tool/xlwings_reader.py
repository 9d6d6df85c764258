#!/usr/bin/env python3
"""
Sheet reader using xlwings
Drives a local Excel instance, so cell values are read exactly as Excel
calculates them. Requires Excel (Windows or macOS).
"""

from pathlib import Path
from typing import Any, List, Optional

from .errors import InputNotFound, SheetNotFound


class XlwingsSheetReader:
	"""Read the raw cell values of one worksheet through Excel using xlwings"""

	def __init__(self, excel_file_path: str):
		"""
		Initialize the reader with an Excel file path

		Args:
			excel_file_path (str): Path to the Excel file
		"""
		self.excel_file_path = Path(excel_file_path)
		self.app = None
		self.workbook = None
		self.worksheet = None

		if not self.excel_file_path.exists():
			raise InputNotFound(excel_file_path)

	def __enter__(self):
		"""Context manager entry"""
		self.open_workbook()
		return self

	def __exit__(self, exc_type, exc_val, exc_tb):
		"""Context manager exit"""
		self.close_workbook()

	def open_workbook(self):
		"""Open the Excel workbook using xlwings"""
		# Imported here: xlwings is only installed where Excel is available
		import xlwings as xw

		try:
			self.app = xw.App(visible=False)
			self.workbook = self.app.books.open(str(self.excel_file_path))
		except Exception:
			self.close_workbook()
			raise

	def close_workbook(self):
		"""Close the workbook and Excel application"""
		if self.workbook:
			self.workbook.close()
			self.workbook = None
		if self.app:
			self.app.quit()
			self.app = None

	def sheet_names(self) -> List[str]:
		return [sheet.name for sheet in self.workbook.sheets]

	def read_rows(self, sheet_name: Optional[str] = None) -> List[List[Any]]:
		"""
		Read the used range of a worksheet as rows of raw cell values

		Args:
			sheet_name (str, optional): Name of the worksheet. If None, uses the first sheet.

		Returns:
			List of rows, header row first
		"""
		if sheet_name:
			if sheet_name not in self.sheet_names():
				raise SheetNotFound(sheet_name)
			self.worksheet = self.workbook.sheets[sheet_name]
		else:
			self.worksheet = self.workbook.sheets[0]

		# ndim=2 keeps single-row and single-cell ranges as a list of lists
		values = self.worksheet.used_range.options(ndim=2).value
		return [list(row) for row in values or []]

	@property
	def sheet_title(self) -> Optional[str]:
		return self.worksheet.name if self.worksheet is not None else None
