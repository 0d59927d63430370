import io

import pytest

from chronolink.articles import Article
from chronolink.console import Console, center
from chronolink.keys import Keyboard
from chronolink.menu import (
    CREATE_BUTTON,
    VISIBLE_ARTICLES,
    MenuState,
    create_new_draft,
    main,
    render_menu,
    show_menu,
)

DOWN = "\x1b[B"
UP = "\x1b[A"
ESC = "\x1b"
HIGHLIGHT_ON = "\033[36m"


def make_io(keys):
    out = io.StringIO()
    return Console(out, width=80), Keyboard(io.StringIO(keys)), out


def make_articles(n):
    return [Article(year_of_event=1900 + i, title=f"Title{i}") for i in range(n)]


def test_move_down_without_articles_stays_on_create_button():
    state = MenuState()
    assert state.move_down(0) is False
    assert state.selected == -1


def test_move_down_from_create_button_selects_first():
    state = MenuState()
    assert state.move_down(3) is True
    assert state.selected == 0
    assert state.start == 0


def test_move_down_stops_at_last_article():
    state = MenuState()
    for _ in range(10):
        state.move_down(2)
    assert state.selected == 1
    assert state.move_down(2) is False


def test_scrolling_keeps_highlight_in_window():
    state = MenuState()
    for _ in range(20):
        state.move_down(12)
        assert 0 <= state.selected - state.start < VISIBLE_ARTICLES
    assert state.selected == 11
    for _ in range(20):
        state.move_up()
        if state.selected >= 0:
            assert 0 <= state.selected - state.start < VISIBLE_ARTICLES
    assert state.selected == -1
    assert state.start == 0


def test_move_up_from_first_goes_to_create_button():
    state = MenuState(selected=0)
    assert state.move_up() is True
    assert state.selected == -1
    assert state.move_up() is False


def test_create_new_draft_inserts_at_front():
    console, keyboard, _ = make_io("1999\rMy Title\r")
    articles = make_articles(2)
    draft = create_new_draft(console, keyboard, articles)
    assert draft is articles[0]
    assert draft.year_of_event == 1999
    assert draft.title == "My Title"
    assert draft.is_draft is True
    assert draft.text == ""
    assert len(articles) == 3


@pytest.mark.parametrize("keys", [ESC, "1999\r" + ESC])
def test_create_new_draft_cancelled(keys):
    console, keyboard, _ = make_io(keys)
    articles = make_articles(1)
    assert create_new_draft(console, keyboard, articles) is None
    assert len(articles) == 1


def test_create_new_draft_retries_invalid_year():
    console, keyboard, out = make_io("abc\rx2000\rT\r")
    articles = []
    draft = create_new_draft(console, keyboard, articles)
    assert draft.year_of_event == 2000
    assert draft.title == "T"
    assert "Invalid year. Press any key to try again..." in out.getvalue()


def test_create_new_draft_ignores_trailing_text_in_year():
    console, keyboard, _ = make_io("12abc\rT\r")
    draft = create_new_draft(console, keyboard, [])
    assert draft.year_of_event == 12


def test_render_menu_highlights_create_button():
    console, _, out = make_io("")
    render_menu(console, make_articles(1), MenuState())
    text = out.getvalue()
    assert "Articles:" in text
    assert HIGHLIGHT_ON + center(CREATE_BUTTON, 80) in text


def test_render_menu_highlights_selected_and_limits_window():
    console, _, out = make_io("")
    articles = make_articles(7)
    render_menu(console, articles, MenuState(selected=1))
    text = out.getvalue()
    label = f"{articles[1].year_of_event}   {articles[1].title}\n\n"
    assert HIGHLIGHT_ON + center(label, 80) in text
    assert HIGHLIGHT_ON + center(CREATE_BUTTON, 80) not in text
    assert articles[4].title in text
    assert articles[5].title not in text
    assert articles[6].title not in text


def test_show_menu_creates_missing_directory(tmp_path):
    folder = tmp_path / "Articles"
    console, keyboard, _ = make_io(ESC)
    assert show_menu(console, keyboard, [], folder) == []
    assert folder.is_dir()


def test_show_menu_publishes_new_draft(tmp_path):
    console, keyboard, _ = make_io("\r1999\rMoon\r" + ESC)
    articles = show_menu(console, keyboard, [], tmp_path)
    assert [a.title for a in articles] == ["Moon"]
    assert articles[0].is_draft is False
    assert (tmp_path / "Moon.txt").read_text(encoding="utf-8") == "1999\n\n"


def test_show_menu_loads_and_edits_article(tmp_path):
    (tmp_path / "Moon.txt").write_text("1969\nLanding\n", encoding="utf-8")
    keys = DOWN + "\r" + "!" + ESC + "\r" + ESC
    console, keyboard, _ = make_io(keys)
    articles = show_menu(console, keyboard, [], tmp_path)
    assert len(articles) == 1
    assert articles[0].year_of_event == 1969
    assert articles[0].text == "Landing!"


def test_show_menu_discarding_changes_keeps_text(tmp_path):
    (tmp_path / "Moon.txt").write_text("1969\nLanding\n", encoding="utf-8")
    keys = DOWN + "\r" + "!" + ESC + "\x1b[C" + "\r" + ESC
    console, keyboard, _ = make_io(keys)
    articles = show_menu(console, keyboard, [], tmp_path)
    assert articles[0].text == "Landing"


def test_main_exits_on_escape(tmp_path, monkeypatch):
    folder = tmp_path / "store"
    monkeypatch.setattr("sys.stdin", io.StringIO(ESC))
    out = io.StringIO()
    monkeypatch.setattr("sys.stdout", out)
    assert main(["--directory", str(folder)]) == 0
    assert folder.is_dir()
    assert "Articles:" in out.getvalue()


def test_main_reports_closed_input(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    monkeypatch.setattr("sys.stdout", io.StringIO())
    assert main(["--directory", str(tmp_path)]) == 1