#!/usr/bin/env python3
import platform
from pathlib import Path
from typing import Dict, List, Optional

from .builder import build_locale_trees
from .csv_reader import CsvSheetReader
from .normalizer import SheetTable, normalize_sheet
from .openpyxl_reader import OpenpyxlSheetReader
from .pandas_reader import ENGINES as PANDAS_SUFFIXES, PandasSheetReader
from .tools import summarize_trees, write_locale_files
from .tree import Node
from .xlwings_reader import XlwingsSheetReader

READERS = {
	"openpyxl": OpenpyxlSheetReader,
	"xlwings": XlwingsSheetReader,
	"csv": CsvSheetReader,
	"pandas": PandasSheetReader,
}


def default_engine(input_path: Path) -> str:
	if input_path.suffix.lower() == ".csv":
		return "csv"
	if input_path.suffix.lower() in PANDAS_SUFFIXES:
		return "pandas"
	# Excel itself on Windows, openpyxl elsewhere
	return "xlwings" if platform.system().lower().startswith("win") else "openpyxl"


def load_sheet(input_path: Path, sheet_name: Optional[str] = None, engine: Optional[str] = None) -> SheetTable:
	reader_cls = READERS[engine or default_engine(input_path)]
	with reader_cls(str(input_path)) as reader:
		rows = reader.read_rows(sheet_name)
		return normalize_sheet(rows, reader.sheet_title)


def build_locales(
	input_path: Path,
	sheet_name: Optional[str] = None,
	key_header: Optional[str] = None,
	reference_header: Optional[str] = None,
	engine: Optional[str] = None,
) -> Dict[str, Node]:
	table = load_sheet(input_path, sheet_name, engine)
	return build_locale_trees(table, key_header, reference_header)


def convert(
	input_path: Path,
	output_dir: Path,
	sheet_name: Optional[str] = None,
	key_header: Optional[str] = None,
	reference_header: Optional[str] = None,
	engine: Optional[str] = None,
) -> List[Path]:
	# Every tree is complete before the first file is written
	trees = build_locales(input_path, sheet_name, key_header, reference_header, engine)
	written = write_locale_files(output_dir, trees)

	print("Conversion complete.")
	print(f"Output directory: {output_dir}")
	for language, leaves in summarize_trees(trees).items():
		print(f"  {language}: {leaves} keys")
	return written
