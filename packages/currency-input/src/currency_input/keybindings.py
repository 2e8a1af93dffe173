"""Keybindings for the currency input field."""

from __future__ import annotations

from typing import Literal

from currency_input.keys import KeyId, matches_key

InputAction = Literal[
    # Cursor movement
    "cursorLeft",
    "cursorRight",
    "cursorLineStart",
    "cursorLineEnd",
    # Selection
    "selectAll",
    # Deletion
    "deleteCharBackward",
    "deleteCharForward",
    "deleteToLineStart",
    # Field
    "submit",
    "cancel",
    "undo",
]

InputKeybindingsConfig = dict[InputAction, KeyId | list[KeyId]]

DEFAULT_INPUT_KEYBINDINGS: dict[InputAction, KeyId | list[KeyId]] = {
    # Cursor movement
    "cursorLeft": ["left", "ctrl+b"],
    "cursorRight": ["right", "ctrl+f"],
    "cursorLineStart": "home",
    "cursorLineEnd": ["end", "ctrl+e"],
    # Selection
    "selectAll": "ctrl+a",
    # Deletion
    "deleteCharBackward": "backspace",
    "deleteCharForward": ["delete", "ctrl+d"],
    "deleteToLineStart": "ctrl+u",
    # Field
    "submit": "enter",
    "cancel": ["escape", "ctrl+c"],
    "undo": ["ctrl+-", "ctrl+z"],
}


class InputKeybindingsManager:
    """Maps raw key data to field actions; user config overrides defaults."""

    def __init__(self, config: InputKeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[InputAction, list[KeyId]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: InputKeybindingsConfig) -> None:
        self._action_to_keys.clear()
        for source in (DEFAULT_INPUT_KEYBINDINGS, config):
            for action, keys in source.items():
                self._action_to_keys[action] = list(keys) if isinstance(keys, list) else [keys]

    def matches(self, data: str, action: InputAction) -> bool:
        """Check if input matches a specific action."""
        return any(matches_key(data, key) for key in self._action_to_keys.get(action, []))

    def get_keys(self, action: InputAction) -> list[KeyId]:
        return self._action_to_keys.get(action, [])

    def set_config(self, config: InputKeybindingsConfig) -> None:
        self._build_maps(config)


_global_input_keybindings: InputKeybindingsManager | None = None


def get_input_keybindings() -> InputKeybindingsManager:
    global _global_input_keybindings
    if _global_input_keybindings is None:
        _global_input_keybindings = InputKeybindingsManager()
    return _global_input_keybindings


def set_input_keybindings(manager: InputKeybindingsManager | None) -> None:
    global _global_input_keybindings
    _global_input_keybindings = manager
