#!/usr/bin/env python3
"""Exceptions raised while turning a translation sheet into locale files."""


class LocaleToolError(Exception):
	"""Base class for every error the tool reports to the user."""


class InputNotFound(LocaleToolError, FileNotFoundError):
	"""The input spreadsheet does not exist on disk."""

	def __init__(self, path):
		super().__init__(f"Input file not found: {path}")
		self.path = path


class SheetNotFound(LocaleToolError, KeyError):
	"""An explicitly requested sheet is missing from the workbook."""

	def __init__(self, sheet_name: str):
		super().__init__(f"Sheet not found: {sheet_name}")
		self.sheet_name = sheet_name

	def __str__(self) -> str:
		# KeyError would otherwise repr() the message
		return str(self.args[0])


class EmptySheet(LocaleToolError, ValueError):
	"""The selected sheet has no data rows below its header row."""

	def __init__(self, sheet_name=None):
		where = f" '{sheet_name}'" if sheet_name else ""
		super().__init__(f"The sheet{where} is empty.")
		self.sheet_name = sheet_name


class UsageError(LocaleToolError):
	"""The command was invoked with missing or inconsistent arguments."""


class UnreadableInput(LocaleToolError):
	"""The input exists but cannot be parsed in the format its reader expects."""

	def __init__(self, path, reason):
		super().__init__(f"Cannot read {path}: {reason}")
		self.path = path
		self.reason = reason
