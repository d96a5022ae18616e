"""
Build the solutions index for the Advent of Code site.

Each solution file (src/day_<N>.rs) opens with a header line such as:

    //! This is my solution for [Advent of Code - Day 3 - _Rucksack Reorganization_](https://adventofcode.com/2022/day/3)

The index pairs every file with its header and with the write-up post for the
same day (if one was published), and is sorted by day for the page templates.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

HEADER_PATTERN = re.compile(
    r"\[Advent of Code - Day (?P<day>\d+) - _(?P<title>[^_]+)_]\((?P<url>[^)]+)\)"
)
DOCUMENTATION_URL = "./advent_of_code_2022/day_{day}/index.html"
DEFAULT_SUFFIX = ".rs"

_LINE_BREAK = re.compile(r"[\n\r]+")


@dataclass
class PuzzleHeader:
    """What the first line of a solution file says about its puzzle."""
    day: int
    title: str
    url: str


@dataclass
class Solution:
    day: int
    title: str | None
    links: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"day": self.day, "title": self.title, "links": dict(self.links)}


def _warn(warnings: list[str] | None, message: str):
    print(f"  ⚠ {message}")
    if warnings is not None:
        warnings.append(message)


def coerce_day(value) -> int | None:
    """Day keys arrive as ints or as numeric strings from front matter."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    return None


def solution_pattern(suffix: str = DEFAULT_SUFFIX) -> re.Pattern:
    return re.compile(r"day_(\d+)" + re.escape(suffix))


# ---------------------------------------------------------------------------
# Posts
# ---------------------------------------------------------------------------

def post_day(post):
    """The raw day of a collection item, read from its `data` mapping."""
    return (getattr(post, "data", None) or {}).get("day")


def build_posts_lookup(posts: Iterable | None, warnings: list[str] | None = None) -> dict[int, str]:
    """Map day -> write-up URL. A later post for the same day replaces an earlier one.

    Posts are any objects with a `data` mapping holding `day` and a `url`.
    """
    lookup: dict[int, str] = {}
    for post in posts or []:
        raw_day = post_day(post)
        day = coerce_day(raw_day)
        if day is None:
            _warn(warnings, f"post {post.url}: no usable day ({raw_day!r}), skipped")
            continue
        if not isinstance(post.url, str) or not post.url:
            _warn(warnings, f"day {day}: post has no url ({post.url!r}), skipped")
            continue
        if day in lookup and lookup[day] != post.url:
            _warn(warnings, f"day {day}: post {post.url} replaces {lookup[day]}")
        lookup[day] = post.url
    return lookup


# ---------------------------------------------------------------------------
# Solution files
# ---------------------------------------------------------------------------

def first_line(text: str) -> str:
    return _LINE_BREAK.split(text, maxsplit=1)[0]


def parse_header(line: str) -> PuzzleHeader | None:
    match = HEADER_PATTERN.search(line)
    if not match:
        return None
    return PuzzleHeader(day=int(match["day"]), title=match["title"], url=match["url"])


def parse_solution_file(path: Path) -> PuzzleHeader | None:
    """Parse the header from the first line of a solution file, or None if it has none."""
    return parse_header(first_line(Path(path).read_text(encoding="utf-8")))


def build_day_record(
    path: Path,
    day: int,
    posts_lookup: dict[int, str],
    warnings: list[str] | None = None,
) -> Solution:
    header = parse_solution_file(path)
    links = {}
    if header is None:
        _warn(warnings, f"{Path(path).name}: first line has no puzzle header")
    else:
        links["Puzzle"] = header.url
    if day in posts_lookup:
        links["Write Up"] = posts_lookup[day]
    links["Documentation"] = DOCUMENTATION_URL.format(day=day)

    return Solution(day=day, title=header.title if header else None, links=links)


def list_solution_files(source_dir: Path, suffix: str = DEFAULT_SUFFIX) -> list[tuple[int, Path]]:
    """(day, path) for every day_<N><suffix> file, in name order."""
    pattern = solution_pattern(suffix)
    found = []
    for entry in sorted(Path(source_dir).iterdir()):
        match = pattern.fullmatch(entry.name)
        if match and entry.is_file():
            found.append((int(match.group(1)), entry))
    return found


def build_solution_data(
    posts_lookup: dict[int, str],
    source_dir: Path,
    suffix: str = DEFAULT_SUFFIX,
    warnings: list[str] | None = None,
) -> list[Solution]:
    """One record per solution file. Order is not meaningful, sort the result."""
    by_day: dict[int, Solution] = {}
    sources: dict[int, Path] = {}
    for day, path in list_solution_files(source_dir, suffix):
        record = build_day_record(path, day, posts_lookup, warnings)
        if day in by_day:
            _warn(warnings, f"day {day}: {path.name} replaces {sources[day].name}")
        by_day[day] = record
        sources[day] = path
        if record.title is not None:
            print(f"  ✓ day {day}: {record.title}")
    return list(by_day.values())


def build_sorted_index(
    posts: Iterable | None,
    source_dir: Path,
    suffix: str = DEFAULT_SUFFIX,
    warnings: list[str] | None = None,
) -> list[Solution]:
    """Solution records for every file in source_dir, ascending by day."""
    posts_lookup = build_posts_lookup(posts, warnings)
    solutions = build_solution_data(posts_lookup, source_dir, suffix, warnings)
    return sorted(solutions, key=lambda s: s.day)
