"""buildinfo – prefix-scoped typed property access.

:class:`PrefixedProperties` binds an immutable prefix to the shared
:class:`~buildinfo.client.store.PropertyStore` and provides string,
integer and boolean accessors over *local* keys. Every key it touches is
``prefix + local_key``.

The field descriptors at the bottom of this module turn those accessors
into plain Python properties on view classes::

    class ProxyView(AuthenticationView):
        host = StringField(HOST)
        port = IntegerField(PORT)

    proxy.port = 8080          # stores "8080" under "proxy.port"
    proxy.port = None          # removes "proxy.port"

Parsing rules:

- Integers are base-10 with an optional sign; surrounding whitespace is
  ignored. Anything else raises :class:`ConfigParseError`.
- Booleans are written as ``"true"``/``"false"`` and read
  case-insensitively. Any other present value raises
  :class:`ConfigParseError`.
- An absent key always reads as ``None``.
"""

from __future__ import annotations

import re
from typing import Any, Generic, Optional, TypeVar

from buildinfo.client.errors import ConfigParseError
from buildinfo.client.store import PropertyStore
from buildinfo.core.types import PropertyMap

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_TRUE = "true"
_FALSE = "false"


class PrefixedProperties:
    """Typed accessor over ``(store, prefix)``.

    Attributes:
        store: The shared property store.
        prefix: Immutable prefix prepended to every local key.
    """

    __slots__ = ("_store", "_prefix")

    def __init__(self, store: PropertyStore, prefix: str = "") -> None:
        self._store = store
        self._prefix = prefix

    @property
    def store(self) -> PropertyStore:
        return self._store

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def props(self) -> PropertyMap:
        """The full backing mapping, for cross-prefix filtering."""

        return self._store.all()

    def key_for(self, local_key: str) -> str:
        return self._prefix + local_key

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------

    def get_string(self, local_key: str) -> Optional[str]:
        return self._store.get(self.key_for(local_key))

    def set_string(self, local_key: str, value: Optional[str]) -> None:
        self._store.set(self.key_for(local_key), value)

    # ------------------------------------------------------------------
    # Integers
    # ------------------------------------------------------------------

    def get_integer(self, local_key: str) -> Optional[int]:
        key = self.key_for(local_key)
        value = self._store.get(key)
        if value is None:
            return None
        text = value.strip()
        if not _INTEGER_RE.fullmatch(text):
            raise ConfigParseError(key, value, "integer")
        return int(text)

    def set_integer(self, local_key: str, value: Optional[int]) -> None:
        # bool is an int subclass but "True" is not a valid stored integer.
        if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
            msg = f"Expected int for {self.key_for(local_key)!r}, got {type(value).__name__}"
            raise TypeError(msg)
        self._store.set(self.key_for(local_key), None if value is None else str(value))

    # ------------------------------------------------------------------
    # Booleans
    # ------------------------------------------------------------------

    def get_boolean(self, local_key: str) -> Optional[bool]:
        key = self.key_for(local_key)
        value = self._store.get(key)
        if value is None:
            return None
        token = value.strip().lower()
        if token == _TRUE:
            return True
        if token == _FALSE:
            return False
        raise ConfigParseError(key, value, "boolean")

    def set_boolean(self, local_key: str, value: Optional[bool]) -> None:
        if value is None:
            self._store.set(self.key_for(local_key), None)
            return
        if not isinstance(value, bool):
            msg = f"Expected bool for {self.key_for(local_key)!r}, got {type(value).__name__}"
            raise TypeError(msg)
        self._store.set(self.key_for(local_key), _TRUE if value else _FALSE)

    def __repr__(self) -> str:
        return f"PrefixedProperties(prefix={self._prefix!r})"


# ============================================================================
# Field descriptors
# ============================================================================

T = TypeVar("T")


class _Field(Generic[T]):
    """Base descriptor mapping an attribute to a local key on ``instance.properties``."""

    def __init__(self, local_key: str) -> None:
        self.local_key = local_key
        self.name = local_key

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return self.read(instance.properties)

    def __set__(self, instance: Any, value: Optional[T]) -> None:
        self.write(instance.properties, value)

    def __delete__(self, instance: Any) -> None:
        self.write(instance.properties, None)

    def read(self, properties: PrefixedProperties) -> Optional[T]:  # pragma: no cover - interface
        raise NotImplementedError

    def write(self, properties: PrefixedProperties, value: Optional[T]) -> None:  # pragma: no cover - interface
        raise NotImplementedError


class StringField(_Field[str]):
    def read(self, properties: PrefixedProperties) -> Optional[str]:
        return properties.get_string(self.local_key)

    def write(self, properties: PrefixedProperties, value: Optional[str]) -> None:
        properties.set_string(self.local_key, value)


class IntegerField(_Field[int]):
    def read(self, properties: PrefixedProperties) -> Optional[int]:
        return properties.get_integer(self.local_key)

    def write(self, properties: PrefixedProperties, value: Optional[int]) -> None:
        properties.set_integer(self.local_key, value)


class BooleanField(_Field[bool]):
    def read(self, properties: PrefixedProperties) -> Optional[bool]:
        return properties.get_boolean(self.local_key)

    def write(self, properties: PrefixedProperties, value: Optional[bool]) -> None:
        properties.set_boolean(self.local_key, value)


class PatternField(StringField):
    """String field that falls back to ``default`` when unset or blank.

    Stored values are returned stripped of surrounding whitespace.
    """

    def __init__(self, local_key: str, default: str) -> None:
        super().__init__(local_key)
        self.default = default

    def read(self, properties: PrefixedProperties) -> str:
        value = properties.get_string(self.local_key)
        if value is None or not value.strip():
            return self.default
        return value.strip()
