#!/usr/bin/env python3
"""
Command-line interface for the locale_tool package.
Usage:
  python -m locale_tool --input=translations.xlsx --outDir=locales [options]
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from ._convert_impl import READERS, convert
from .errors import LocaleToolError, UsageError

EPILOG = """\
Notes:
  - First column is the key (e.g., common.loading)
  - Second column is the reference language; it is not written out
  - Remaining columns are language outputs, named by their header (e.g., en, fr, ja)
"""


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog='locale-tool',
		description='Convert an Excel sheet of translations to per-language JSON files',
		epilog=EPILOG,
		formatter_class=argparse.RawDescriptionHelpFormatter,
	)
	parser.add_argument('excel_file', nargs='?', help='Path to the spreadsheet (same as --input)')
	parser.add_argument('--input', '-i', dest='input', help='Path to the spreadsheet (.xlsx, .xls, .ods or .csv)')
	parser.add_argument('--outDir', '-o', dest='out_dir', default='locales',
				   help='Output directory (default: locales)')
	parser.add_argument('--sheet', '-s', help='Worksheet name (default: first sheet)')
	parser.add_argument('--keyCol', dest='key_col', help='Key column header (default: first column)')
	parser.add_argument('--viCol', '--refCol', dest='ref_col',
				   help='Reference language column header, excluded from output (default: second column)')
	parser.add_argument('--engine', choices=sorted(READERS), help='Backend used to read the spreadsheet')
	return parser


def main(argv: Optional[List[str]] = None) -> None:
	parser = build_parser()
	args = parser.parse_args(argv)

	input_file = args.input or args.excel_file
	try:
		if not input_file:
			raise UsageError('--input=path/to/file.xlsx is required (or provide as first argument)')
		convert(
			Path(input_file).resolve(),
			Path(args.out_dir).resolve(),
			sheet_name=args.sheet,
			key_header=args.key_col or None,
			reference_header=args.ref_col or None,
			engine=args.engine,
		)
	except LocaleToolError as e:
		print(f"Error: {e}", file=sys.stderr)
		if isinstance(e, UsageError):
			parser.print_help()
		sys.exit(1)
	except OSError as e:
		print(f"Error: {e}", file=sys.stderr)
		sys.exit(1)


if __name__ == "__main__":
	main()
