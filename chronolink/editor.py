"""The interactive article editor and its save prompt."""

from __future__ import annotations

from chronolink.articles import Article
from chronolink.console import HIGHLIGHT, Console, change_color
from chronolink.editing import Position, TextBuffer
from chronolink.keys import Keyboard, KeyPress, SpecialKey

SAVE = 0
DONT_SAVE = 1

_OPTIONS = ("Save", "Don't Save")
_OPTION_GAP = " " * 10
_CTRL_S = "\x13"


def _render_prompt(console: Console, title: str, option: int) -> None:
    console.clear_screen()
    console.center_text(f"Do you want to save the changes to {title}?\n\n")
    labels = [
        change_color(HIGHLIGHT, label) if index == option else label
        for index, label in enumerate(_OPTIONS)
    ]
    console.center_text(_OPTION_GAP.join(labels))


def save_prompt(console: Console, keyboard: Keyboard, title: str) -> int:
    """Ask whether to keep the changes to ``title``.

    Returns 0 when the user chose to save and 1 when they chose not to.
    """
    option = SAVE
    while True:
        _render_prompt(console, title, option)
        while True:
            key = keyboard.get_keypress()
            if key.special is SpecialKey.ENTER:
                return option
            if key.special is SpecialKey.LEFT and option > SAVE:
                option -= 1
                break
            if key.special is SpecialKey.RIGHT and option < DONT_SAVE:
                option += 1
                break


def _backspace(console: Console, buffer: TextBuffer) -> None:
    if not buffer.left:
        return
    width = console.width()
    pos = buffer.cursor(width)
    went_back_a_line = False
    if pos.x == 0 and pos.y > 0:
        console.move_cursor(Position(width - 1, pos.y - 1))
        went_back_a_line = True

    buffer.backspace()

    if went_back_a_line:
        console.redraw_line(buffer.left)
        if buffer.right:
            console.redraw_past_cursor(buffer.left, buffer.right)
    elif buffer.right:
        console.redraw_past_cursor(buffer.left, buffer.right)
    else:
        console.write("\b \b")


def _erase_word(console: Console, buffer: TextBuffer) -> None:
    if not buffer.left:
        return
    buffer.erase_word()
    console.redraw_screen(buffer.left, buffer.right)


def _move(console: Console, buffer: TextBuffer, direction: SpecialKey) -> None:
    width = console.width()
    x, y = buffer.cursor(width)
    size = len(buffer.left) + len(buffer.right)

    if direction is SpecialKey.LEFT and buffer.left:
        buffer.move_left()
        x -= 1
    elif direction is SpecialKey.RIGHT and buffer.right:
        buffer.move_right()
        x += 1
    elif direction is SpecialKey.UP and size > width and y > 0:
        target = Position(x, y - 1)
        console.move_cursor(target)
        buffer.move_to(target, width)
        return
    elif direction is SpecialKey.DOWN and size > width and y < size // width:
        target = Position(x, y + 1)
        console.move_cursor(target)
        buffer.move_to(target, width)
        return

    if 0 <= x < width:
        console.move_cursor(Position(x, y))
    elif x < 0:
        console.move_cursor(Position(width - 1, y - 1))
    else:
        console.move_cursor(Position(0, y + 1))


def _type(console: Console, buffer: TextBuffer, ch: str) -> None:
    console.write(buffer.insert(ch))
    if buffer.right:
        console.redraw_past_cursor(buffer.left, buffer.right)


_MOVES = (SpecialKey.LEFT, SpecialKey.RIGHT, SpecialKey.UP, SpecialKey.DOWN)


def _handle(console: Console, buffer: TextBuffer, article: Article, key: KeyPress) -> None:
    if key.ctrl:
        if key.special is SpecialKey.BACKSPACE:
            _erase_word(console, buffer)
        elif key.char.lower() == _CTRL_S:
            article.text = buffer.text()
    elif key.is_special:
        if key.special is SpecialKey.BACKSPACE:
            _backspace(console, buffer)
        elif key.special in _MOVES:
            _move(console, buffer, key.special)
    else:
        _type(console, buffer, key.char)


def text_editor(console: Console, keyboard: Keyboard, article: Article) -> str:
    """Edit ``article``'s text until Escape is pressed and return the edited text.

    Ctrl+S stores the text in the article. If the text on leaving differs from
    the article's, the user is asked whether to keep it.
    """
    console.clear_screen()
    buffer = TextBuffer(article.text)
    if buffer.left:
        console.write("".join(buffer.left))

    while True:
        key = keyboard.get_keypress()
        if key.special is SpecialKey.ESC:
            break
        _handle(console, buffer, article, key)

    edited = buffer.text()
    if edited != article.text and save_prompt(console, keyboard, article.title) == SAVE:
        article.text = edited
    return edited