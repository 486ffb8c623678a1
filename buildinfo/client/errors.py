"""buildinfo – client configuration errors.

Only one error category exists at this layer: a stored value that is
present but cannot be interpreted as the requested type. An absent key
is not an error; typed getters report it as ``None``.
"""

from __future__ import annotations


class ConfigParseError(ValueError):
    """Raised when a stored property cannot be parsed as the requested type.

    Attributes:
        key: Full (prefixed) property key that was read.
        value: Raw stored text.
        expected: Name of the requested type (``"integer"`` or ``"boolean"``).
    """

    def __init__(self, key: str, value: str, expected: str) -> None:
        self.key = key
        self.value = value
        self.expected = expected
        super().__init__(f"Property {key!r} has value {value!r} which is not a valid {expected}")
