# chronolink

A small full-screen terminal program for writing short articles about
historical events. Each article has a year, a title and a body of text.
Articles are kept as plain text files in a directory, one file per article.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running

```
chronolink
chronolink --directory path/to/articles
```

Articles are read from and written to `--directory`, which defaults to
`../Articles` relative to the current directory. The directory is created
if it does not exist. The command exits with status 0 when you leave the
menu, or 1 if input ends first.

The program opens a main menu listing the saved articles, five at a time.

### Main menu

| Key        | Action                                                   |
|------------|----------------------------------------------------------|
| Up / Down  | Move between "+ Create An Article" and the article list  |
| Enter      | Open the selected article, or create a new one           |
| Esc        | Publish the drafts and quit                              |

Creating an article asks for a year, then a title. The year is the
leading whole number of what you type; if there is none you are told so
and asked again. Pressing Esc during either prompt cancels. New articles
are added at the top of the list as drafts and are written to disk when
you press Esc in the menu (drafts from the first article currently shown
onwards are published).

### Editor

| Key              | Action                                                 |
|------------------|--------------------------------------------------------|
| Arrow keys       | Move the cursor; Up and Down move by one screen row    |
| Backspace        | Delete the character before the cursor                 |
| Ctrl+Backspace   | Delete back to the previous space or `.`, `!`, `?`     |
| Ctrl+S           | Store the text in the article                          |
| Tab              | Insert eight spaces                                    |
| Esc              | Leave the editor and return to the menu                |

If on leaving the text differs from the article's stored text, you are
asked whether to keep the changes. Choose "Save" or "Don't Save" with
Left and Right, then press Enter.

Ctrl+Backspace is recognised when the terminal sends `^H` for it. Some
terminals use Ctrl+S for flow control and do not pass it on.

## Article files

An article is stored as `<title>.txt`. The characters `/ : * ? " < > |`
in the title are replaced by `_`. The file has two lines: the year first,
then the article text. When loading, files are read in name order, a
trailing `.txt` is dropped from the name to give the title, and a file
whose first line does not start with a whole number raises `ValueError`.

## What it does not do

- Article text is a single line: Enter does nothing in the editor, and
  only the second line of a file is read back.
- Articles cannot be renamed, re-dated or deleted from the program.
- Raw keyboard input needs a POSIX terminal (`termios`). Elsewhere, or
  when input is not a terminal, keys are read from the stream as they
  come, without turning off line buffering or echo.

## Using it as a library

- `chronolink.articles`: `Article` (with `publish`), `safe_filename`,
  `load_published_articles` and `publish_drafts`.
- `chronolink.editing`: `TextBuffer`, the text and cursor model behind the
  editor, `Position` and `cursor_position`.
- `chronolink.keys`: `Keyboard` (with `raw_mode` and `get_keypress`),
  `KeyPress`, `SpecialKey` and `parse_key`.
- `chronolink.console`: `Console`, `center` and `change_color`.
- `chronolink.editor`: `text_editor` and `save_prompt`.
- `chronolink.menu`: `MenuState`, `create_new_draft`, `render_menu`,
  `show_menu` and `main`.

```python
from chronolink.editing import TextBuffer

buf = TextBuffer("Hello World!")
buf.erase_word()
print(buf.text())  # "Hello "
```