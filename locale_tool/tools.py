#!/usr/bin/env python3
import json
from pathlib import Path
from typing import Dict, List, Mapping

from .tree import Node


def ensure_dir(path: Path) -> None:
	path.mkdir(parents=True, exist_ok=True)


def render_locale_json(tree: Node) -> str:
	return json.dumps(tree.to_plain(), ensure_ascii=False, indent=2)


def write_locale_json(out_dir: Path, language: str, tree: Node) -> Path:
	path = out_dir / f"{language}.json"
	with path.open("w", encoding="utf-8", newline="\n") as f:
		f.write(render_locale_json(tree))
	return path


def write_locale_files(out_dir: Path, trees: Mapping[str, Node]) -> List[Path]:
	ensure_dir(out_dir)
	written: List[Path] = []
	for language, tree in trees.items():
		path = write_locale_json(out_dir, language, tree)
		print(f"Wrote {path}")
		written.append(path)
	return written


def summarize_trees(trees: Mapping[str, Node]) -> Dict[str, int]:
	return {language: tree.count_leaves() for language, tree in trees.items()}
