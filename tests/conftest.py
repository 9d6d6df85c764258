"""Shared pytest fixtures for the locale_tool test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List, Sequence

import pytest
from openpyxl import Workbook

Rows = Sequence[Sequence[Any]]


@pytest.fixture
def sample_rows() -> List[List[Any]]:
	"""Header row plus two translated keys, reference column in Vietnamese."""

	return [
		["Key", "vi", "en", "fr"],
		["common.loading", "Đang tải", "Loading", "Chargement"],
		["common.ok", "Đồng ý", "OK", "OK"],
	]


@pytest.fixture
def write_workbook(tmp_path: Path) -> Callable[..., Path]:
	"""Return a factory writing one `.xlsx` file with the given sheets, in order."""

	def _write(sheets: Dict[str, Rows], name: str = "translations.xlsx") -> Path:
		workbook = Workbook()
		workbook.remove(workbook.active)
		for title, rows in sheets.items():
			worksheet = workbook.create_sheet(title)
			for row in rows:
				worksheet.append(list(row))
		path = tmp_path / name
		workbook.save(path)
		return path

	return _write
