"""Matching raw terminal input against key identifiers.

Only the keys a single-line amount field reacts to are known here: arrows,
home/end, backspace/delete, enter, escape and ``ctrl+<char>`` chords, in the
legacy VT encodings most terminals send by default.
"""

from __future__ import annotations

KeyId = str

# Legacy escape sequences -> key names
LEGACY_KEY_SEQUENCES: dict[str, str] = {
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
    "\x1b[7~": "home",
    "\x1b[8~": "end",
    "\x1b[3~": "delete",
}

SPECIAL_KEY_DATA: dict[str, tuple[str, ...]] = {
    "enter": ("\r", "\n"),
    "escape": ("\x1b",),
    "backspace": ("\x7f", "\x08"),
    "tab": ("\t",),
}

# Control characters for symbol keys; ctrl+- is sent as the ctrl+_ byte
_CTRL_SYMBOLS: dict[str, str] = {
    "-": "\x1f",
    "_": "\x1f",
    "[": "\x1b",
    "\\": "\x1c",
    "]": "\x1d",
    "^": "\x1e",
    "@": "\x00",
}


def raw_ctrl_char(key: str) -> str | None:
    """Return the control character for ``ctrl+<key>``, or ``None``.

    For example, ``raw_ctrl_char("a")`` returns ``"\\x01"``.
    """
    if len(key) != 1:
        return None
    if "a" <= key.lower() <= "z":
        return chr(ord(key.lower()) & 0x1F)
    return _CTRL_SYMBOLS.get(key)


def matches_key(data: str, key_id: KeyId) -> bool:
    """Return ``True`` if *data* (raw terminal input) is the key *key_id*.

    *key_id* examples: ``"left"``, ``"backspace"``, ``"ctrl+a"``, ``"5"``.
    """
    if not key_id:
        return False

    modifier, _, key = key_id.rpartition("+")
    if not key:
        # "+" or "ctrl++"
        modifier, key = modifier.rstrip("+"), "+"

    if modifier == "":
        if key in SPECIAL_KEY_DATA:
            return data in SPECIAL_KEY_DATA[key]
        if len(key) == 1:
            return data == key
        return LEGACY_KEY_SEQUENCES.get(data) == key

    if modifier == "ctrl":
        ctrl = raw_ctrl_char(key)
        return ctrl is not None and data == ctrl

    if modifier == "alt" and len(key) == 1:
        return data == "\x1b" + key

    return False
