from .builder import ColumnRoles, build_locale_trees, resolve_column_roles
from .csv_reader import CsvSheetReader
from .errors import EmptySheet, InputNotFound, LocaleToolError, SheetNotFound, UnreadableInput, UsageError
from .normalizer import SheetTable, normalize_sheet
from .openpyxl_reader import OpenpyxlSheetReader
from .pandas_reader import PandasSheetReader
from .tree import Leaf, Node
from .xlwings_reader import XlwingsSheetReader

__all__ = [
	"ColumnRoles",
	"CsvSheetReader",
	"EmptySheet",
	"InputNotFound",
	"Leaf",
	"LocaleToolError",
	"Node",
	"OpenpyxlSheetReader",
	"PandasSheetReader",
	"SheetNotFound",
	"SheetTable",
	"UnreadableInput",
	"UsageError",
	"XlwingsSheetReader",
	"build_locale_trees",
	"normalize_sheet",
	"resolve_column_roles",
]

__version__ = "0.1.0"
