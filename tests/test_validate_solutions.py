from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from typing import Callable

import pytest

from blog_posts import Post
from tests.helpers import header
from validate_solutions import main
from validate_solutions import validate_posts
from validate_solutions import validate_solution


def test_validate_solution_ok(write_solution: Callable[..., Path]) -> None:
    path = write_solution("day_3.rs", header(3, "Rucksack Reorganization"))

    assert validate_solution(path, 3) == ([], [])


def test_validate_solution_without_header(write_solution: Callable[..., Path]) -> None:
    path = write_solution("day_3.rs", "use std::fs;")

    errors, warnings = validate_solution(path, 3)

    assert errors == ["[day_3.rs] First line has no puzzle header"]
    assert warnings == []


def test_validate_solution_day_mismatch(write_solution: Callable[..., Path]) -> None:
    path = write_solution("day_3.rs", header(1, "Calorie Counting", url_day=3))

    errors, _ = validate_solution(path, 3)

    assert errors == ["[day_3.rs] Header says day 1, file name says day 3"]


def test_validate_solution_url_points_elsewhere(write_solution: Callable[..., Path]) -> None:
    path = write_solution("day_3.rs", header(3, "Calorie Counting", url_day=1))

    errors, warnings = validate_solution(path, 3)

    assert errors == []
    assert warnings == [
        "[day_3.rs] Puzzle URL points at day 1: https://adventofcode.com/2022/day/1"
    ]


def test_validate_solution_url_without_day(write_solution: Callable[..., Path]) -> None:
    path = write_solution(
        "day_3.rs", "//! [Advent of Code - Day 3 - _Rucksack_](https://adventofcode.com/2022)"
    )

    _, warnings = validate_solution(path, 3)

    assert len(warnings) == 1
    assert "has no /day/N" in warnings[0]


def test_validate_posts() -> None:
    posts = [
        Post(url="/posts/day-3/", data={"day": 3}, source=Path("day-3.md")),
        Post(url="/posts/day-3-again/", data={"day": "3"}),
        Post(url="/posts/day-9/", data={"day": 9}),
        Post(url="/posts/about/", data={}),
    ]

    errors, warnings = validate_posts(posts, {1, 3})

    assert errors == ["[/posts/about/] Missing or non-integer day: None"]
    assert warnings == [
        "[/posts/day-9/] Day 9 has no solution file",
        "[day 3] 2 posts, the last one wins: /posts/day-3/, /posts/day-3-again/",
    ]


def test_validate_posts_collection_items() -> None:
    posts = [
        SimpleNamespace(data={"day": 3}, url="/blog/day3-writeup"),
        SimpleNamespace(data={"day": 4}, url=None),
    ]

    errors, warnings = validate_posts(posts, {3, 4})

    assert errors == ["[None] Missing url: None"]
    assert warnings == []


def test_main_single_day_with_post_list(
    src_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "posts.json"
    path.write_text('[{"day": 3, "url": "/posts/day-3/"}, {"day": 10, "url": "/posts/day-10/"}]')

    code = main(["--src", str(src_dir), "--posts", str(path), "--day", "3"])

    assert code == 0
    assert "Days: 1  Posts: 1" in capsys.readouterr().out


def test_main_passes(src_dir: Path, posts_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--src", str(src_dir), "--posts", str(posts_dir)])

    out = capsys.readouterr().out
    assert code == 0
    assert "✓ day 10" in out
    assert "ALL VALIDATIONS PASSED" in out


def test_main_duplicate_files_fail(
    src_dir: Path, posts_dir: Path, write_solution: Callable[..., Path], capsys: pytest.CaptureFixture[str]
) -> None:
    write_solution("day_03.rs", header(3, "Rucksack Reorganization"))

    code = main(["--src", str(src_dir), "--posts", str(posts_dir)])

    out = capsys.readouterr().out
    assert code == 1
    assert "[day 3] 2 files: day_03.rs, day_3.rs" in out


def test_main_strict_fails_on_warnings(
    src_dir: Path, posts_dir: Path, write_post: Callable[..., Path]
) -> None:
    write_post("day-25.md", "day: 25\n")

    assert main(["--src", str(src_dir), "--posts", str(posts_dir)]) == 0
    assert main(["--src", str(src_dir), "--posts", str(posts_dir), "--strict"]) == 1


def test_main_single_day(
    src_dir: Path, posts_dir: Path, write_solution: Callable[..., Path], capsys: pytest.CaptureFixture[str]
) -> None:
    write_solution("day_4.rs", "use std::fs;")

    code = main(["--src", str(src_dir), "--posts", str(posts_dir), "--day", "3"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Validating 1 days" in out
    assert "day 4" not in out


def test_main_missing_src_dir(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--src", str(tmp_path / "missing")]) == 1
    assert capsys.readouterr().out.startswith("✗")
