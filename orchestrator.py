import curses

from dispatcher import DispatchResult, dispatch
from key_event import from_curses
from logging_config import get_logger
from screen_renderer import ScreenRenderer


logger = get_logger("orchestrator")


class Orchestrator:
    """
    Owns the render -> read one key -> dispatch loop.
    The loop ends only when dispatch returns a terminal result.
    """

    def __init__(self, stdscr, state, renderer=None):
        self.stdscr = stdscr
        self.state = state
        self.renderer = renderer if renderer is not None else ScreenRenderer(stdscr)

    def _prepare_window(self):
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        self.stdscr.keypad(True)
        # block until a key arrives; nothing here needs a poll interval
        self.stdscr.nodelay(False)
        self.stdscr.timeout(-1)

    def _read_event(self):
        try:
            ch = self.stdscr.get_wch()
        except curses.error:
            return None
        return from_curses(ch)

    def run(self) -> DispatchResult:
        self._prepare_window()
        logger.info("editor loop started")

        while True:
            self.renderer.draw(self.state)
            event = self._read_event()
            result = dispatch(self.state, event)
            if result.is_terminal:
                logger.info(
                    "editor loop finished: %s with %d pairs",
                    result.value,
                    len(self.state.mapping),
                )
                return result
