#!/usr/bin/env python3
"""
Validate the solution files and write-up posts behind the solutions index.

Checks:
- Every solution file starts with an "[Advent of Code - Day N - _Title_](url)" header
- The header's day matches the file name (day_N.rs)
- The puzzle URL points at the same day
- No two files or posts claim the same day
- Every post has an integer day that has a solution

Usage:
    python3 scripts/validate_solutions.py
    python3 scripts/validate_solutions.py --strict  # treat warnings as errors
    python3 scripts/validate_solutions.py --day 3
"""

import argparse
import re
import sys
from collections import defaultdict
from pathlib import Path

import yaml

from blog_posts import Post, load_posts
from solution_index import (
    DEFAULT_SUFFIX,
    coerce_day,
    list_solution_files,
    parse_solution_file,
    post_day,
)

SCRIPT_DIR = Path(__file__).parent.resolve()
ROOT_DIR = SCRIPT_DIR.parent
DEFAULT_SRC_DIR = ROOT_DIR / "src"
DEFAULT_POSTS_PATH = ROOT_DIR / "pubs" / "posts"

PUZZLE_URL_DAY = re.compile(r"/day/(\d+)/?$")


def validate_solution(path: Path, day: int) -> tuple[list[str], list[str]]:
    """Validate a single solution file. Returns (errors, warnings)."""
    errors = []
    warnings = []
    prefix = f"[{path.name}]"

    header = parse_solution_file(path)
    if header is None:
        errors.append(f"{prefix} First line has no puzzle header")
        return errors, warnings

    if header.day != day:
        errors.append(f"{prefix} Header says day {header.day}, file name says day {day}")

    url_day = PUZZLE_URL_DAY.search(header.url)
    if not url_day:
        warnings.append(f"{prefix} Puzzle URL has no /day/N: {header.url}")
    elif int(url_day.group(1)) != day:
        warnings.append(f"{prefix} Puzzle URL points at day {url_day.group(1)}: {header.url}")

    return errors, warnings


def validate_posts(posts: list[Post], days: set[int]) -> tuple[list[str], list[str]]:
    """Validate the posts collection against the solution days. Returns (errors, warnings)."""
    errors = []
    warnings = []
    urls_by_day = defaultdict(list)

    for post in posts:
        source = getattr(post, "source", None)
        prefix = f"[{source.name if source else post.url}]"
        raw_day = post_day(post)
        day = coerce_day(raw_day)
        if day is None:
            errors.append(f"{prefix} Missing or non-integer day: {raw_day!r}")
            continue
        if not isinstance(post.url, str) or not post.url:
            errors.append(f"{prefix} Missing url: {post.url!r}")
            continue
        urls_by_day[day].append(post.url)
        if day not in days:
            warnings.append(f"{prefix} Day {day} has no solution file")

    for day, urls in sorted(urls_by_day.items()):
        if len(urls) > 1:
            warnings.append(f"[day {day}] {len(urls)} posts, the last one wins: {', '.join(urls)}")

    return errors, warnings


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Validate solution headers and write-up posts")
    parser.add_argument("--src", type=Path, default=DEFAULT_SRC_DIR, help="Directory of solution files")
    parser.add_argument("--posts", type=Path, default=DEFAULT_POSTS_PATH,
                        help="Posts directory, or a JSON/YAML list of {day, url}")
    parser.add_argument("--suffix", default=DEFAULT_SUFFIX, help="Solution file suffix")
    parser.add_argument("--day", type=int, help="Validate a single day")
    parser.add_argument("--strict", action="store_true", help="Treat warnings as errors")
    args = parser.parse_args(argv)

    try:
        files = list_solution_files(args.src, args.suffix)
        posts = load_posts(args.posts)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"✗ {e}")
        return 1

    all_errors = []
    all_warnings = []

    files_by_day = defaultdict(list)
    for day, path in files:
        files_by_day[day].append(path)

    if args.day is not None:
        files_by_day = {d: p for d, p in files_by_day.items() if d == args.day}
        posts = [p for p in posts if coerce_day(post_day(p)) == args.day]

    print(f"Validating {len(files_by_day)} days from {args.src}...")
    print()

    for day, paths in sorted(files_by_day.items()):
        errors = []
        warnings = []
        if len(paths) > 1:
            errors.append(f"[day {day}] {len(paths)} files: {', '.join(p.name for p in paths)}")
        for path in paths:
            try:
                file_errors, file_warnings = validate_solution(path, day)
            except OSError as e:
                file_errors, file_warnings = [f"[{path.name}] {e}"], []
            errors.extend(file_errors)
            warnings.extend(file_warnings)
        all_errors.extend(errors)
        all_warnings.extend(warnings)

        issue_count = len(errors) + (len(warnings) if args.strict else 0)
        if issue_count > 0:
            status = "✗" if errors else "⚠"
            print(f"{status} day {day}: {len(errors)} errors, {len(warnings)} warnings")
        else:
            print(f"✓ day {day}")

    post_errors, post_warnings = validate_posts(posts, set(files_by_day))
    all_errors.extend(post_errors)
    all_warnings.extend(post_warnings)

    print()
    print("=" * 50)

    if all_warnings:
        print(f"\n⚠ {len(all_warnings)} WARNINGS:")
        for w in all_warnings:
            print(f"  {w}")

    if all_errors:
        print(f"\n✗ {len(all_errors)} ERRORS:")
        for e in all_errors:
            print(f"  {e}")

    print(f"\nDays: {len(files_by_day)}  Posts: {len(posts)}")

    total_issues = len(all_errors) + (len(all_warnings) if args.strict else 0)
    if total_issues == 0:
        print(f"\n✓ ALL VALIDATIONS PASSED ({len(all_warnings)} warnings)")
        return 0
    print(f"\n✗ VALIDATION FAILED: {len(all_errors)} errors, {len(all_warnings)} warnings")
    return 1


if __name__ == "__main__":
    sys.exit(main())
