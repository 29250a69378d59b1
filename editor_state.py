from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Screen(Enum):
    MAIN = "main"
    EDITING = "editing"
    EXITING = "exiting"


class EditingField(Enum):
    KEY = "key"
    VALUE = "value"


@dataclass
class EditorState:
    mapping: dict[str, str] = field(default_factory=dict)

    # Text being typed; append/pop only
    key_input: str = ""
    value_input: str = ""

    screen: Screen = Screen.MAIN
    editing_field: Optional[EditingField] = None  # only set while EDITING

    def pairs(self) -> list[tuple[str, str]]:
        return sorted(self.mapping.items())
