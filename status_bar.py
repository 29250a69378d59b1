from editor_state import EditingField, EditorState, Screen


def mode_text(state: EditorState) -> str:
    if state.screen is Screen.EDITING:
        if state.editing_field is EditingField.KEY:
            return "Editing Mode | Editing Json Key"
        if state.editing_field is EditingField.VALUE:
            return "Editing Mode | Editing Json Value"
        return "Editing Mode"
    if state.screen is Screen.EXITING:
        return "Exiting"
    return "Normal Mode"


def hint_text(state: EditorState) -> str:
    if state.screen is Screen.EDITING:
        return "(ESC) to cancel/(Tab) to switch boxes/enter to complete"
    if state.screen is Screen.EXITING:
        return "(y) to output / (n) or (q) to quit"
    return "(q) to quit / (e) to make new pair"


def render_status(state: EditorState, width):
    """
    Footer line: mode on the left, key hints on the right when they fit.
    Always exactly `width` characters.
    """
    width = max(0, width)
    left = f" {mode_text(state)} "
    right = f" {hint_text(state)} "
    if len(left) + len(right) <= width:
        text = left + " " * (width - len(left) - len(right)) + right
    else:
        text = f"{left}|{right}"
    return text.ljust(width)[:width]
