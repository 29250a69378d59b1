import contextlib
import curses
import os
import sys

from logging_config import get_logger


logger = get_logger("terminal")

TTY_PATH = "/dev/tty"


@contextlib.contextmanager
def redirected_stdout(tty_path=TTY_PATH):
    """
    Point fd 1 at the controlling terminal while curses runs.

    curses draws on stdout. When stdout is a pipe or a file the UI has to go to
    the terminal instead, and the real stdout is put back before anything is
    emitted. No-op when stdout is already a TTY.
    """
    try:
        stdout_fd = sys.stdout.fileno()
    except (AttributeError, ValueError, OSError):
        stdout_fd = 1

    if os.isatty(stdout_fd):
        yield False
        return

    sys.stdout.flush()
    saved_fd = os.dup(stdout_fd)
    try:
        tty_fd = os.open(tty_path, os.O_RDWR)
        try:
            os.dup2(tty_fd, stdout_fd)
        finally:
            os.close(tty_fd)
        logger.debug("stdout redirected to %s for the UI", tty_path)
        yield True
    finally:
        sys.stdout.flush()
        os.dup2(saved_fd, stdout_fd)
        os.close(saved_fd)


def run_ui(fn, escdelay=25):
    """
    Run fn(stdscr) inside curses and return its result.

    curses.wrapper restores the terminal on every path, including exceptions,
    before anything propagates to the caller.
    """

    def _run(stdscr):
        # configured value wins over an exported ESCDELAY
        curses.set_escdelay(escdelay)
        return fn(stdscr)

    with redirected_stdout():
        return curses.wrapper(_run)
