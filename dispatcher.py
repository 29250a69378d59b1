from enum import Enum

from editor_state import EditorState, EditingField, Screen
from key_event import BACKSPACE, ENTER, ESC, TAB, KeyPress
from logging_config import get_logger


logger = get_logger("dispatcher")


class DispatchResult(Enum):
    CONTINUE = "continue"
    EXIT_DISCARD = "exit_discard"
    EXIT_AND_EMIT = "exit_and_emit"

    @property
    def is_terminal(self) -> bool:
        return self is not DispatchResult.CONTINUE


def dispatch(state: EditorState, event) -> DispatchResult:
    """
    Apply one input event to the editor state.

    Only key presses are acted on; releases and non-key events fall through as
    CONTINUE on every screen. Every (screen, key) pair is defined, unmatched
    ones are no-ops, so this never raises.
    """
    if not isinstance(event, KeyPress) or not event.is_press:
        return DispatchResult.CONTINUE

    if state.screen is Screen.MAIN:
        _handle_main(state, event)
        return DispatchResult.CONTINUE
    if state.screen is Screen.EXITING:
        return _handle_exiting(state, event)
    if state.screen is Screen.EDITING:
        _handle_editing(state, event)
    return DispatchResult.CONTINUE


# ---------- main ----------
def _handle_main(state: EditorState, event: KeyPress) -> None:
    if event.code == "e":
        state.screen = Screen.EDITING
        state.editing_field = EditingField.KEY
        logger.debug("screen main -> editing")
    elif event.code == "q":
        state.screen = Screen.EXITING
        logger.debug("screen main -> exiting")


# ---------- exiting ----------
def _handle_exiting(state: EditorState, event: KeyPress) -> DispatchResult:
    if event.code == "y":
        return DispatchResult.EXIT_AND_EMIT
    if event.code in ("n", "q"):
        return DispatchResult.EXIT_DISCARD
    return DispatchResult.CONTINUE


# ---------- editing ----------
def _handle_editing(state: EditorState, event: KeyPress) -> None:
    code = event.code

    if code == ENTER:
        if state.editing_field is EditingField.KEY:
            state.editing_field = EditingField.VALUE
        elif state.editing_field is EditingField.VALUE:
            _commit(state)
        return

    if code == BACKSPACE:
        if state.editing_field is EditingField.KEY:
            state.key_input = state.key_input[:-1]
        elif state.editing_field is EditingField.VALUE:
            state.value_input = state.value_input[:-1]
        return

    if code == ESC:
        # Buffers stay populated; the next 'e' resumes with them
        state.screen = Screen.MAIN
        state.editing_field = None
        logger.debug("screen editing -> main (cancelled)")
        return

    if code == TAB:
        if state.editing_field is EditingField.KEY:
            state.editing_field = EditingField.VALUE
        else:
            state.editing_field = EditingField.KEY
        return

    if event.is_char:
        if state.editing_field is EditingField.KEY:
            state.key_input += code
        elif state.editing_field is EditingField.VALUE:
            state.value_input += code


def _commit(state: EditorState) -> None:
    replaced = state.key_input in state.mapping
    state.mapping[state.key_input] = state.value_input

    state.key_input = ""
    state.value_input = ""
    state.editing_field = None
    state.screen = Screen.MAIN
    logger.debug(
        "committed pair (%s), %d pairs total",
        "replaced" if replaced else "new",
        len(state.mapping),
    )
