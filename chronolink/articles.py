"""Articles and their plain-text storage on disk."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Union

PathLike = Union[str, Path]

DEFAULT_DIRECTORY = Path("../Articles")
EXTENSION = ".txt"

_UNSAFE_CHARS = re.compile(r'[/:*?"<>|]')
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def safe_filename(title: str) -> str:
    """Replace characters that are not allowed in file names with underscores."""
    return _UNSAFE_CHARS.sub("_", title)


def _parse_year(line: str) -> int:
    """Read a leading integer the way a lenient C-style conversion does."""
    match = _LEADING_INT.match(line)
    if match is None:
        raise ValueError(f"no year found in {line!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"year out of range: {value}")
    return value


@dataclass
class Article:
    """A dated article, either a draft or already published."""

    year_of_event: int
    title: str
    text: str = ""
    is_draft: bool = False

    def publish(self, directory: PathLike = DEFAULT_DIRECTORY) -> Path | None:
        """Write the article to ``directory``; return the file path, or None if it cannot be written."""
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / (safe_filename(self.title) + EXTENSION)
        try:
            with path.open("w", encoding="utf-8") as out:
                out.write(f"{self.year_of_event}\n{self.text}\n")
        except OSError:
            return None
        return path


def load_published_articles(folder: PathLike = DEFAULT_DIRECTORY) -> list[Article]:
    """Load every article file in ``folder``; a missing folder is created and yields nothing.

    Each file holds the year on its first line and the text on its second.
    A file whose first line holds no integer raises ValueError.
    """
    folder = Path(folder)
    if not folder.exists():
        folder.mkdir(parents=True)
        return []

    articles: list[Article] = []
    for entry in sorted(folder.iterdir()):
        if not entry.is_file():
            continue
        try:
            with entry.open(encoding="utf-8") as source:
                year_line = source.readline()
                text_line = source.readline()
        except OSError:
            continue

        title = entry.name
        if title.endswith(EXTENSION):
            title = title[: -len(EXTENSION)]

        articles.append(
            Article(
                year_of_event=_parse_year(year_line.rstrip("\n")),
                title=title,
                text=text_line.rstrip("\n"),
                is_draft=False,
            )
        )
    return articles


def publish_drafts(
    articles: Sequence[Article],
    start: int = 0,
    directory: PathLike = DEFAULT_DIRECTORY,
) -> int:
    """Publish every draft from index ``start`` onwards and return how many there were."""
    published = 0
    for article in articles[start:]:
        if article.is_draft:
            article.publish(directory)
            article.is_draft = False
            published += 1
    return published