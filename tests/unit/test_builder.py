"""Unit tests for column role resolution and locale tree building."""

from __future__ import annotations

import json

import pytest

from locale_tool.builder import (
	build_locale_trees,
	normalize_value,
	resolve_column_roles,
	split_key,
)
from locale_tool.errors import UsageError
from locale_tool.normalizer import normalize_sheet


def _plain(trees):
	return {language: tree.to_plain() for language, tree in trees.items()}


def test_default_roles_are_positional() -> None:
	"""First header is the key, second the reference, the rest are languages."""

	roles = resolve_column_roles(["Key", "vi", "en", "fr"])

	assert roles.key == "Key"
	assert roles.reference == "vi"
	assert roles.languages == ("en", "fr")


def test_overrides_exclude_named_columns_from_languages() -> None:
	"""Explicit key/reference names should be removed wherever they sit."""

	roles = resolve_column_roles(["Notes", "Key", "en", "vi", "fr"], key_header="Key", reference_header=" vi ")

	assert roles.key == "Key"
	assert roles.reference == "vi"
	assert roles.languages == ("Notes", "en", "fr")


def test_single_column_sheet_has_no_reference_or_languages() -> None:
	"""A sheet with only a key column should produce no languages."""

	roles = resolve_column_roles(["Key"])

	assert roles.reference is None
	assert roles.languages == ()


@pytest.mark.parametrize("override", [{"key_header": "Id"}, {"reference_header": "de"}])
def test_unknown_override_is_a_usage_error(override: dict) -> None:
	"""Naming a column that is not in the sheet should fail instead of reading blanks."""

	with pytest.raises(UsageError, match="not found"):
		resolve_column_roles(["Key", "vi", "en"], **override)


def test_builds_one_tree_per_language(sample_rows: list) -> None:
	"""The reference column should not get a tree."""

	trees = build_locale_trees(normalize_sheet(sample_rows))

	assert _plain(trees) == {
		"en": {"common": {"loading": "Loading", "ok": "OK"}},
		"fr": {"common": {"loading": "Chargement", "ok": "OK"}},
	}


def test_blank_keys_are_skipped_for_every_language() -> None:
	"""Rows whose key is empty or whitespace should write nothing."""

	table = normalize_sheet([
		["Key", "vi", "en", "fr"],
		["   ", "a", "b", "c"],
		["", "d", "e", "f"],
		["kept", "g", "h", "i"],
	])

	trees = build_locale_trees(table)

	assert _plain(trees) == {"en": {"kept": "h"}, "fr": {"kept": "i"}}


def test_every_row_writes_one_leaf_per_language() -> None:
	"""Distinct keys should give as many leaves as rows in every tree."""

	table = normalize_sheet([
		["Key", "vi", "en", "fr"],
		["a.b", "", "1", "2"],
		["a.c", "", "3", ""],
		["d", "", "", "4"],
	])

	trees = build_locale_trees(table)

	assert trees["en"].count_leaves() == 3
	assert trees["fr"].count_leaves() == 3
	assert trees["en"].to_plain()["d"] == ""


@pytest.mark.parametrize(
	("first", "second", "expected"),
	[
		("a.b", "a.b.c", {"a": {"b": {"c": "2"}}}),
		("a.b.c", "a.b", {"a": {"b": "2"}}),
	],
)
def test_later_row_wins_on_prefix_collision(first: str, second: str, expected: dict) -> None:
	"""Colliding keys should never raise; the later row overwrites."""

	table = normalize_sheet([
		["Key", "vi", "en"],
		[first, "", "1"],
		[second, "", "2"],
	])

	assert build_locale_trees(table)["en"].to_plain() == expected


def test_multiline_values_keep_escaped_newlines() -> None:
	"""Line breaks become a literal backslash-n and carriage returns vanish."""

	table = normalize_sheet([
		["Key", "vi", "en"],
		["msg", "", "Line one\r\nLine two\nLine three\r"],
	])

	value = build_locale_trees(table)["en"].to_plain()["msg"]

	assert value == "Line one\\nLine two\\nLine three"
	assert "\n" not in value
	assert "\r" not in value


def test_placeholders_pass_through_verbatim() -> None:
	"""Template placeholders should be stored character for character."""

	text = "Hello {name}, you have %d items {0} %s {{var}}"

	assert normalize_value(text) == text


def test_empty_segments_are_ignored() -> None:
	"""Doubled, leading and trailing dots should not create empty keys."""

	assert split_key("a..b") == ["a", "b"]
	assert split_key(".a.b.") == ["a", "b"]
	assert split_key("...") == []


def test_key_made_of_dots_writes_nothing() -> None:
	"""A key with no segments should leave every tree untouched."""

	table = normalize_sheet([["Key", "vi", "en"], ["..", "", "x"]])

	assert _plain(build_locale_trees(table)) == {"en": {}}


def test_building_twice_gives_identical_output(sample_rows: list) -> None:
	"""Two builds of the same sheet should serialize byte for byte the same."""

	table = normalize_sheet(sample_rows)

	first = json.dumps(_plain(build_locale_trees(table)), ensure_ascii=False, indent=2)
	second = json.dumps(_plain(build_locale_trees(table)), ensure_ascii=False, indent=2)

	assert first == second
