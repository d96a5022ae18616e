from __future__ import annotations


def header(day: int, title: str, url_day: int | None = None) -> str:
    url_day = day if url_day is None else url_day
    return (
        f"//! This is my solution for [Advent of Code - Day {day} - _{title}_]"
        f"(https://adventofcode.com/2022/day/{url_day})"
    )
