"""
Load the blog's write-up posts for the solutions index.

Posts are Markdown files with YAML front matter, e.g.

    ---
    title: Day 3 - Rucksack Reorganization
    day: 3
    ---

A post's URL is its `permalink` if the front matter sets one, otherwise the
path the site generator gives it by default (posts/day-3.md -> /posts/day-3/).
Only pages that belong to the "post" collection count: a page that declares
`tags` must include `post`, and a page without `tags` is taken as a post.
A list of {day, url} entries in a JSON or YAML file works as well.
"""

import json
import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml

_FRONT_MATTER_END = re.compile(r"^---[ \t]*\r?$", re.MULTILINE)
POST_TAG = "post"


@dataclass
class Post:
    url: str
    data: dict = field(default_factory=dict)
    source: Path | None = None

    @property
    def day(self):
        return self.data.get("day")


# ── Front matter ─────────────────────────────────────────────────────────────

def parse_front_matter(content: str) -> tuple[dict, str]:
    """Split a Markdown document into (front matter dict, body)."""
    content = content.lstrip("\ufeff")
    first, _, rest = content.partition("\n")
    if first.rstrip() != "---":
        return {}, content

    end = _FRONT_MATTER_END.search(rest)
    if not end:
        return {}, content

    metadata = yaml.safe_load(rest[:end.start()])
    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise ValueError(f"front matter is a {type(metadata).__name__}, expected a mapping")

    body = rest[end.end():].lstrip("\r\n")
    return metadata, body


def post_url(path: Path, metadata: dict, site_dir: Path) -> str | None:
    """URL of a post, or None when the post is not written out (permalink: false)."""
    permalink = metadata.get("permalink")
    if permalink is False:
        return None
    if isinstance(permalink, str):
        return permalink

    parts = list(path.relative_to(site_dir).with_suffix("").parts)
    if parts and parts[-1] == "index":
        parts.pop()
    if not parts:
        return "/"
    return "/" + "/".join(parts) + "/"


# ── Loaders ──────────────────────────────────────────────────────────────────

def is_post(metadata: dict, tag: str = POST_TAG) -> bool:
    tags = metadata.get("tags")
    if tags is None:
        return True
    if isinstance(tags, str):
        return tags == tag
    return tag in tags


def load_posts_dir(posts_dir: Path, site_dir: Path | None = None) -> list[Post]:
    posts_dir = Path(posts_dir)
    site_dir = Path(site_dir) if site_dir is not None else posts_dir.parent

    posts = []
    for md_file in sorted(posts_dir.rglob("*.md")):
        try:
            metadata, _ = parse_front_matter(md_file.read_text(encoding="utf-8"))
        except (ValueError, yaml.YAMLError) as e:
            raise ValueError(f"{md_file}: invalid front matter: {e}") from e

        if not is_post(metadata):
            continue
        url = post_url(md_file, metadata, site_dir)
        if url is None:
            continue
        posts.append(Post(url=url, data=metadata, source=md_file))
    return posts


def _post_from_entry(entry, source: Path) -> Post:
    if not isinstance(entry, dict) or "url" not in entry:
        raise ValueError(f"{source}: post entries need a 'url', got {entry!r}")
    if not isinstance(entry["url"], str) or not entry["url"]:
        raise ValueError(f"{source}: post url must be a non-empty string, got {entry['url']!r}")
    if isinstance(entry.get("data"), dict):
        data = dict(entry["data"])
    else:
        data = {k: v for k, v in entry.items() if k != "url"}
    return Post(url=entry["url"], data=data, source=source)


def load_posts_file(path: Path) -> list[Post]:
    """Posts from a JSON or YAML list of {day, url} (or {data: {day}, url}) entries."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        if path.suffix in (".yaml", ".yml"):
            entries = yaml.safe_load(f)
        else:
            entries = json.load(f)

    if entries is None:
        return []
    if not isinstance(entries, list):
        raise ValueError(f"{path}: expected a list of posts, got {type(entries).__name__}")
    return [_post_from_entry(entry, path) for entry in entries]


def load_posts(path: Path | None) -> list[Post]:
    """The posts collection; no path, or a path that does not exist, means no posts."""
    if path is None:
        return []
    path = Path(path)
    if not path.exists():
        print(f"No posts at {path}, building without write-ups")
        return []
    if path.is_dir():
        return load_posts_dir(path)
    return load_posts_file(path)
