import re
from pathlib import Path
from typing import Dict, List, Tuple, Union

import pytest

import textify

RECORD_RE = re.compile(
    r"={80}\nFile: (?P<path>[^\n]*)\nSize: (?P<size>[^\n]*)\n={80}\n\n(?P<payload>.*?)\n\n"
    r"(?=={80}\nFile: |\Z)",
    re.S,
)


def make_tree(root: Path, files: Dict[str, Union[str, bytes]]) -> Path:
    """Create files under root from a {relative path: content} mapping."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


def parse_records(output: Path) -> List[Tuple[str, str, str]]:
    """Split an output artifact into (path, size, payload) records."""
    text = output.read_text(encoding="utf-8")
    return [
        (m.group("path"), m.group("size"), m.group("payload"))
        for m in RECORD_RE.finditer(text)
    ]


@pytest.fixture
def options():
    return textify.build_options(show_progress=False, workers=4)


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    root = tmp_path / "repo"
    root.mkdir()
    return root
