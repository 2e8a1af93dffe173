"""CurrencyInput component - single-line amount field for terminal UIs."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable

from currency_input.formatter import CurrencyTextInputFormatter
from currency_input.keybindings import get_input_keybindings
from currency_input.types import FormatterState, TextEditingValue
from currency_input.undo_stack import UndoStack
from currency_input.utils import (
    first_grapheme_length,
    is_control_input,
    last_grapheme_length,
    visible_width,
)

# Zero-width APC marker telling a renderer where to put the hardware cursor
CURSOR_MARKER = "\x1b_ci:c\x07"

_PASTE_START = "\x1b[200~"
_PASTE_END = "\x1b[201~"


@dataclass
class _InputState:
    value: str = ""
    anchor: int = 0
    cursor: int = 0
    formatter_state: FormatterState = field(default_factory=FormatterState)


class CurrencyInput:
    """Single-line field whose every edit is reformatted by a formatter.

    Key data goes in through :meth:`handle_input`; each edit is turned into an
    old/new :class:`TextEditingValue` pair and the formatter's answer becomes
    the field's text and caret. Rejected edits leave the field untouched.
    """

    def __init__(self, formatter: CurrencyTextInputFormatter, prompt: str = "> ") -> None:
        self.formatter = formatter
        self.prompt = prompt

        self._value: str = ""
        # Selection runs from anchor to cursor; equal means a plain caret
        self._anchor: int = 0
        self._cursor: int = 0

        self.on_submit: Callable[[str], None] | None = None
        self.on_escape: Callable[[], None] | None = None

        # Focusable interface
        self.focused: bool = False

        # Bracketed paste mode
        self._paste_buffer: str = ""
        self._is_in_paste: bool = False

        self._undo_stack: UndoStack[_InputState] = UndoStack()

    # ------------------------------------------------------------------
    # Value access
    # ------------------------------------------------------------------

    def get_value(self) -> str:
        return self._value

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def selection(self) -> tuple[int, int]:
        return (min(self._anchor, self._cursor), max(self._anchor, self._cursor))

    def get_amount(self) -> Decimal:
        return self.formatter.get_unformatted_value()

    def set_value(self, value: str) -> None:
        """Seed the field from a plain number string such as ``"1234.5"``."""
        self._set_text(self.formatter.format_string(value))

    def set_amount(self, amount: float | Decimal | int) -> None:
        self._set_text(self.formatter.format_double(amount))

    def _set_text(self, text: str) -> None:
        self._value = text
        self._anchor = self._cursor = len(text)
        self._undo_stack.clear()

    # ------------------------------------------------------------------
    # Input handling
    # ------------------------------------------------------------------

    def handle_input(self, data: str) -> None:
        if _PASTE_START in data:
            self._is_in_paste = True
            self._paste_buffer = ""
            data = data.replace(_PASTE_START, "")

        if self._is_in_paste:
            self._paste_buffer += data
            end_index = self._paste_buffer.find(_PASTE_END)
            if end_index != -1:
                paste_content = self._paste_buffer[:end_index]
                remaining = self._paste_buffer[end_index + len(_PASTE_END):]
                self._is_in_paste = False
                self._paste_buffer = ""
                self._handle_paste(paste_content)
                if remaining:
                    self.handle_input(remaining)
            return

        kb = get_input_keybindings()

        if kb.matches(data, "cancel"):
            if self.on_escape:
                self.on_escape()
            return

        if kb.matches(data, "undo"):
            self._undo()
            return

        if kb.matches(data, "submit"):
            if self.on_submit:
                self.on_submit(self._value)
            return

        if kb.matches(data, "deleteCharBackward"):
            self._handle_backspace()
            return

        if kb.matches(data, "deleteCharForward"):
            self._handle_forward_delete()
            return

        if kb.matches(data, "deleteToLineStart"):
            if self._cursor > 0:
                self._edit(self._value[self._cursor:], 0)
            return

        if kb.matches(data, "selectAll"):
            self._anchor = 0
            self._cursor = len(self._value)
            return

        if kb.matches(data, "cursorLeft"):
            start, end = self.selection
            if start != end:
                self._move_to(start)
            else:
                self._move_to(self._cursor - (last_grapheme_length(self._value[: self._cursor]) or 0))
            return

        if kb.matches(data, "cursorRight"):
            start, end = self.selection
            if start != end:
                self._move_to(end)
            else:
                self._move_to(self._cursor + first_grapheme_length(self._value[self._cursor:]))
            return

        if kb.matches(data, "cursorLineStart"):
            self._move_to(0)
            return

        if kb.matches(data, "cursorLineEnd"):
            self._move_to(len(self._value))
            return

        if not is_control_input(data):
            self._replace_selection(data)

    def _move_to(self, offset: int) -> None:
        self._anchor = self._cursor = max(0, min(offset, len(self._value)))

    def _replace_selection(self, text: str) -> None:
        start, end = self.selection
        self._edit(self._value[:start] + text + self._value[end:], start + len(text))

    def _handle_backspace(self) -> None:
        start, end = self.selection
        if start != end:
            self._replace_selection("")
            return
        if self._cursor == 0:
            return
        gl = last_grapheme_length(self._value[: self._cursor]) or 1
        self._edit(self._value[: self._cursor - gl] + self._value[self._cursor:], self._cursor - gl)

    def _handle_forward_delete(self) -> None:
        start, end = self.selection
        if start != end:
            self._replace_selection("")
            return
        if self._cursor >= len(self._value):
            return
        gl = first_grapheme_length(self._value[self._cursor:]) or 1
        self._edit(self._value[: self._cursor] + self._value[self._cursor + gl:], self._cursor)

    def _handle_paste(self, pasted_text: str) -> None:
        clean_text = pasted_text.replace("\r\n", "").replace("\r", "").replace("\n", "")
        if clean_text:
            self._replace_selection(clean_text)

    def _edit(self, new_text: str, new_cursor: int) -> None:
        start, end = self.selection
        old = TextEditingValue(self._value, start, end)
        snapshot = _InputState(self._value, self._anchor, self._cursor, self.formatter.state)

        result = self.formatter.format_edit_update(old, TextEditingValue.collapsed(new_text, new_cursor))
        if result is old:
            return

        self._undo_stack.push(snapshot)
        self._value = result.text
        self._anchor = result.selection_start
        self._cursor = result.selection_end

    def _undo(self) -> None:
        snapshot = self._undo_stack.pop()
        if not snapshot:
            return
        self._value = snapshot.value
        self._anchor = snapshot.anchor
        self._cursor = snapshot.cursor
        self.formatter.state = snapshot.formatter_state

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, width: int) -> list[str]:
        available_width = width - visible_width(self.prompt)
        if available_width <= 0:
            return [self.prompt]

        # Amounts rarely overflow; when they do, scroll so the caret stays visible
        start = 0
        if len(self._value) >= available_width:
            start = max(0, self._cursor - available_width + 1)
        visible_text = self._value[start : start + available_width]
        cursor_display = self._cursor - start

        after_cursor_text = visible_text[cursor_display:]
        at_cursor = after_cursor_text[: first_grapheme_length(after_cursor_text)] or " "
        before_cursor = visible_text[:cursor_display]
        after_cursor = visible_text[cursor_display + len(at_cursor):]

        marker = CURSOR_MARKER if self.focused else ""
        cursor_char = f"\x1b[7m{at_cursor}\x1b[27m"
        text_with_cursor = before_cursor + marker + cursor_char + after_cursor

        padding = " " * max(0, available_width - visible_width(text_with_cursor))
        return [self.prompt + text_with_cursor + padding]
