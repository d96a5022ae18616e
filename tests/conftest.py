from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from tests.helpers import header


TITLES = {
    1: "Calorie Counting",
    2: "Rock Paper Scissors",
    3: "Rucksack Reorganization",
    10: "Cathode-Ray Tube",
}


@pytest.fixture
def write_solution(tmp_path: Path) -> Callable[..., Path]:
    src = tmp_path / "src"
    src.mkdir(exist_ok=True)

    def _write(name: str, first_line: str, body: str = "\n//!\nfn main() {}\n") -> Path:
        path = src / name
        path.write_text(first_line + body, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def src_dir(tmp_path: Path, write_solution: Callable[..., Path]) -> Path:
    for day, title in TITLES.items():
        write_solution(f"day_{day}.rs", header(day, title))
    write_solution("main.rs", "mod day_1;")
    (tmp_path / "src" / "util").mkdir()
    return tmp_path / "src"


@pytest.fixture
def write_post(tmp_path: Path) -> Callable[..., Path]:
    posts = tmp_path / "pubs" / "posts"
    posts.mkdir(parents=True, exist_ok=True)

    def _write(name: str, front_matter: str, body: str = "Some notes.\n") -> Path:
        path = posts / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"---\n{front_matter}---\n{body}", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def posts_dir(tmp_path: Path, write_post: Callable[..., Path]) -> Path:
    write_post("day-3.md", "title: Rucksacks\nday: 3\n")
    write_post("day-10.md", "title: CRT\nday: '10'\npermalink: /blog/crt/\n")
    write_post("draft.md", "title: Draft\nday: 2\npermalink: false\n")
    return tmp_path / "pubs" / "posts"
