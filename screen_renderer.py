import curses
import textwrap

from editor_state import EditingField, EditorState, Screen
from screen_layout import ScreenLayout
from status_bar import render_status


TITLE = "Create New Json"
POPUP_TITLE = "Enter a new key-value pair"
EXIT_PROMPT = "Would you like to output the buffer as json? (y/n)"


class ScreenRenderer:
    """
    Draws the editor state onto a curses window.
    Read-only with respect to state; every frame is drawn from scratch.
    """

    PAIR_TITLE = 1
    PAIR_ACTIVE = 2
    PAIR_POPUP = 3

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.colors = False
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_TITLE, curses.COLOR_GREEN, -1)
            curses.init_pair(self.PAIR_ACTIVE, curses.COLOR_BLACK, curses.COLOR_YELLOW)
            curses.init_pair(self.PAIR_POPUP, curses.COLOR_WHITE, curses.COLOR_BLUE)
            self.colors = True
        except curses.error:
            pass

    def draw(self, state: EditorState):
        win = self.stdscr
        win.erase()
        layout = ScreenLayout.from_window(win)

        self._draw_title(layout)
        self._draw_pairs(state, layout)
        self._draw_footer(state, layout)

        if state.screen is Screen.EDITING:
            self._draw_editing_popup(state, layout)
        elif state.screen is Screen.EXITING:
            self._draw_exit_popup(layout)

        win.refresh()

    # ---------- regions ----------
    def _draw_title(self, layout):
        y, x, h, w = layout.title_rect
        self._box(layout.title_rect)
        self._put_centered(y + 1, x, w, TITLE, self._color(self.PAIR_TITLE))

    def _draw_pairs(self, state, layout):
        y, x, h, w = layout.list_rect
        rows = state.pairs()
        for i, (key, value) in enumerate(rows):
            if i >= h:
                break
            self._put(y + i, x, f"{key}: {value}", w, 0)
            self._put(y + i, x, key, w, curses.A_BOLD)

    def _draw_footer(self, state, layout):
        y, x, h, w = layout.footer_rect
        self._box(layout.footer_rect)
        inner_w = max(0, w - 2)
        self._put(y + 1, x + 1, render_status(state, inner_w), inner_w, 0)

    def _draw_editing_popup(self, state, layout):
        self._clear_rect(layout.popup_rect)
        self._box(layout.popup_rect, POPUP_TITLE)

        key_rect, value_rect = layout.popup_halves()
        key_attr = self._active_attr(state.editing_field is EditingField.KEY)
        value_attr = self._active_attr(state.editing_field is EditingField.VALUE)

        self._box(key_rect, "Key", key_attr)
        self._box(value_rect, "Value", value_attr)

        for rect, text, attr in (
            (key_rect, state.key_input, key_attr),
            (value_rect, state.value_input, value_attr),
        ):
            y, x, h, w = rect
            inner_w = max(0, w - 2)
            if h < 3 or inner_w == 0:
                continue
            # show the tail of long input so the typing point stays visible
            self._put(y + 1, x + 1, text[-inner_w:], inner_w, attr)

    def _draw_exit_popup(self, layout):
        self._clear_rect(layout.popup_rect, self._color(self.PAIR_POPUP))
        self._box(layout.popup_rect, "Y/N", self._color(self.PAIR_POPUP))
        y, x, h, w = layout.popup_rect
        inner_w = max(0, w - 2)
        if h < 3 or inner_w == 0:
            return
        attr = self._color(self.PAIR_POPUP) | curses.A_BOLD
        for i, line in enumerate(textwrap.wrap(EXIT_PROMPT, inner_w)[: h - 2]):
            self._put(y + 1 + i, x + 1, line, inner_w, attr)

    # ---------- primitives ----------
    def _color(self, pair):
        if not self.colors:
            return 0
        try:
            return curses.color_pair(pair)
        except curses.error:
            return 0

    def _active_attr(self, active):
        if not active:
            return 0
        color = self._color(self.PAIR_ACTIVE)
        return color if color else curses.A_REVERSE

    def _put(self, y, x, text, max_w, attr=0):
        H, W = self.stdscr.getmaxyx()
        if y < 0 or y >= H or x < 0 or x >= W or max_w <= 0:
            return
        n = min(max_w, W - x)
        # writing into the bottom-right cell moves the cursor off-screen
        if y == H - 1 and x + n >= W:
            n = W - x - 1
        if n <= 0:
            return
        try:
            self.stdscr.addnstr(y, x, text, n, attr)
        except curses.error:
            pass

    def _put_centered(self, y, x, w, text, attr=0):
        text = text[:w]
        self._put(y, x + max(0, (w - len(text)) // 2), text, w, attr)

    def _clear_rect(self, rect, attr=0):
        y, x, h, w = rect
        blank = " " * w
        for row in range(y, y + h):
            self._put(row, x, blank, w, attr)

    def _box(self, rect, title=None, attr=0):
        y, x, h, w = rect
        if w < 2 or h < 2:
            return
        self._put(y, x, "┌" + "─" * (w - 2) + "┐", w, attr)
        for row in range(y + 1, y + h - 1):
            self._put(row, x, "│", 1, attr)
            self._put(row, x + w - 1, "│", 1, attr)
        self._put(y + h - 1, x, "└" + "─" * (w - 2) + "┘", w, attr)
        if title:
            self._put(y, x + 2, f" {title} ", max(0, w - 4), attr)
