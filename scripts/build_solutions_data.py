#!/usr/bin/env python3
"""
Write the solutions index consumed by the site's solutions page.

Reads every src/day_<N>.rs header, pairs it with the write-up posts under
pubs/posts/, and writes the records sorted by day to pubs/_data/solutions.json
(global data for the page templates).

Usage:
    python3 scripts/build_solutions_data.py
    python3 scripts/build_solutions_data.py --dry-run          # print, don't write
    python3 scripts/build_solutions_data.py --strict           # fail on any warning
    python3 scripts/build_solutions_data.py --output pubs/_data/solutions.yaml
    python3 scripts/build_solutions_data.py --posts posts.json --src other/src
"""

import argparse
import json
import sys
from pathlib import Path

import yaml

from blog_posts import load_posts
from solution_index import DEFAULT_SUFFIX, build_sorted_index

SCRIPT_DIR = Path(__file__).parent.resolve()
ROOT_DIR = SCRIPT_DIR.parent
DEFAULT_SRC_DIR = ROOT_DIR / "src"
DEFAULT_POSTS_PATH = ROOT_DIR / "pubs" / "posts"
DEFAULT_OUTPUT_PATH = ROOT_DIR / "pubs" / "_data" / "solutions.json"


def output_format(path: Path, requested: str | None = None) -> str:
    if requested:
        return requested
    return "yaml" if path.suffix in (".yaml", ".yml") else "json"


def dump_solutions(records: list[dict], fmt: str) -> str:
    if fmt == "yaml":
        return yaml.safe_dump(records, sort_keys=False, allow_unicode=True)
    return json.dumps(records, indent=2, ensure_ascii=False) + "\n"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build the solutions index data file")
    parser.add_argument("--src", type=Path, default=DEFAULT_SRC_DIR,
                        help=f"Directory of solution files (default: {DEFAULT_SRC_DIR})")
    parser.add_argument("--posts", type=Path, default=DEFAULT_POSTS_PATH,
                        help="Posts directory, or a JSON/YAML list of {day, url}")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT_PATH,
                        help=f"Data file to write (default: {DEFAULT_OUTPUT_PATH})")
    parser.add_argument("--suffix", default=DEFAULT_SUFFIX,
                        help=f"Solution file suffix (default: {DEFAULT_SUFFIX})")
    parser.add_argument("--format", choices=("json", "yaml"),
                        help="Output format (default: from the output suffix)")
    parser.add_argument("--strict", action="store_true", help="Treat warnings as errors")
    parser.add_argument("--dry-run", action="store_true", help="Print the data instead of writing it")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    warnings: list[str] = []
    try:
        posts = load_posts(args.posts)
        print(f"Loaded {len(posts)} posts")
        print(f"Scanning {args.src} for day_<N>{args.suffix} files...")
        solutions = build_sorted_index(posts, args.src, args.suffix, warnings)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"✗ Failed to build solutions index: {e}")
        return 1

    write_ups = sum(1 for s in solutions if "Write Up" in s.links)
    print(f"\n{len(solutions)} solutions, {write_ups} with write-ups, {len(warnings)} warnings")

    if warnings and args.strict:
        print(f"\n✗ {len(warnings)} WARNINGS (--strict):")
        for w in warnings:
            print(f"  {w}")
        return 1

    data = dump_solutions([s.to_dict() for s in solutions], output_format(args.output, args.format))
    if args.dry_run:
        print()
        print(data, end="")
        return 0

    try:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(data, encoding="utf-8")
    except OSError as e:
        print(f"✗ Error writing {args.output}: {e}")
        return 1

    print(f"✓ Wrote {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
