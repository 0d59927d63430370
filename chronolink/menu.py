"""The main menu: listing, creating and opening articles."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from chronolink.articles import (
    DEFAULT_DIRECTORY,
    Article,
    PathLike,
    load_published_articles,
    publish_drafts,
)
from chronolink.console import Console
from chronolink.editor import text_editor
from chronolink.keys import Keyboard, SpecialKey

VISIBLE_ARTICLES = 5
CREATE_BUTTON = "+ Create An Article\n\n"
HEADER = "Articles:\n\n"
YEAR_PROMPT = "Enter year: "
TITLE_PROMPT = "Enter Article Title: "
INVALID_YEAR = "Invalid year. Press any key to try again..."

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _parse_year(text: str) -> int:
    """Read a leading integer, ignoring whatever follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no year found in {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"year out of range: {value}")
    return value


@dataclass
class MenuState:
    """Which entry is highlighted and where the visible window of articles starts.

    ``selected`` is -1 while the create button is highlighted, otherwise the
    index of the highlighted article. ``start`` is the index of the first
    article shown.
    """

    selected: int = -1
    start: int = 0

    @property
    def highlighted(self) -> int:
        """Position of the highlight relative to the visible window; -1 is the create button."""
        return self.selected - self.start

    def move_down(self, count: int) -> bool:
        """Move the highlight down in a list of ``count`` articles; True if it moved."""
        if self.selected == -1 and count > 0:
            self.selected = 0
            return True
        if self.selected + 1 < count:
            self.selected += 1
            if self.selected - self.start >= VISIBLE_ARTICLES:
                self.start += 1
            return True
        return False

    def move_up(self) -> bool:
        """Move the highlight up, onto the create button from the first article; True if it moved."""
        if self.selected == 0:
            self.selected = -1
            return True
        if self.selected > 0:
            self.selected -= 1
            if self.selected < self.start:
                self.start -= 1
            return True
        return False


def _read_year(console: Console, keyboard: Keyboard) -> int | None:
    typed = ""
    while True:
        console.clear_screen()
        console.center_text(YEAR_PROMPT)
        console.write(typed)

        key = keyboard.get_keypress()
        if key.special is SpecialKey.ESC:
            return None
        if key.special is SpecialKey.ENTER:
            try:
                return _parse_year(typed)
            except ValueError:
                typed = ""
                console.clear_screen()
                console.center_text(INVALID_YEAR)
                keyboard.get_keypress()
        else:
            console.write(key.char)
            typed += key.char


def _read_title(console: Console, keyboard: Keyboard) -> str | None:
    typed = ""
    console.clear_screen()
    console.center_text(TITLE_PROMPT)
    while True:
        key = keyboard.get_keypress()
        if key.special is SpecialKey.ESC:
            return None
        if key.special is SpecialKey.ENTER and typed:
            return typed
        console.write(key.char)
        typed += key.char


def create_new_draft(
    console: Console, keyboard: Keyboard, articles: list[Article]
) -> Article | None:
    """Ask for a year and a title and put the new draft at the front of ``articles``.

    Returns the draft, or None if Escape was pressed along the way.
    """
    year = _read_year(console, keyboard)
    if year is None:
        return None
    title = _read_title(console, keyboard)
    if title is None:
        return None
    article = Article(year_of_event=year, title=title, is_draft=True)
    articles.insert(0, article)
    return article


def render_menu(console: Console, articles: Sequence[Article], state: MenuState) -> None:
    """Draw the create button and the visible window of articles with the highlight."""
    console.clear_screen()
    console.center_text(HEADER)

    highlighted = state.highlighted
    if highlighted == -1:
        console.print_colored(CREATE_BUTTON)
    else:
        console.center_text(CREATE_BUTTON)

    window = articles[state.start : state.start + VISIBLE_ARTICLES]
    for index, article in enumerate(window):
        label = f"{article.year_of_event}   {article.title}\n\n"
        if index == highlighted:
            console.print_colored(label)
        else:
            console.center_text(label)


def show_menu(
    console: Console,
    keyboard: Keyboard,
    articles: list[Article] | None = None,
    directory: PathLike = DEFAULT_DIRECTORY,
) -> list[Article]:
    """Run the main menu until Escape, then publish the drafts and return the articles.

    When ``articles`` is empty the published articles in ``directory`` are loaded.
    """
    if articles is None:
        articles = []
    if not articles:
        articles.extend(load_published_articles(directory))

    state = MenuState()
    changed = True
    while True:
        if changed:
            render_menu(console, articles, state)
            changed = False

        key = keyboard.get_keypress()
        if key.special is SpecialKey.ESC:
            publish_drafts(articles, state.start, directory)
            return articles

        if key.special is SpecialKey.ENTER:
            if state.selected >= 0:
                if state.selected < len(articles):
                    text_editor(console, keyboard, articles[state.selected])
                    state = MenuState()
                    changed = True
                    continue
            else:
                if create_new_draft(console, keyboard, articles) is not None:
                    state.start = 0
                changed = True
        elif key.special is SpecialKey.DOWN:
            changed = state.move_down(len(articles)) or changed
        elif key.special is SpecialKey.UP:
            changed = state.move_up() or changed


def main(argv: Sequence[str] | None = None) -> int:
    """Start the article menu on the terminal."""
    parser = argparse.ArgumentParser(
        prog="chronolink", description="Write and browse dated articles."
    )
    parser.add_argument(
        "--directory",
        type=Path,
        default=DEFAULT_DIRECTORY,
        help="folder the articles are stored in",
    )
    args = parser.parse_args(argv)

    console = Console()
    keyboard = Keyboard()
    try:
        with keyboard.raw_mode():
            show_menu(console, keyboard, [], args.directory)
    except EOFError:
        return 1
    return 0