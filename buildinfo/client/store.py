"""buildinfo – the shared property store.

Every configuration view reads and writes one :class:`PropertyStore`
instance owned by :class:`buildinfo.client.configuration.ClientConfiguration`.
The store is a thin wrapper over an insertion-ordered ``dict``; it has no
knowledge of prefixes or types.

Thread safety: Not thread-safe. Configuration is assembled on one thread
and consumed read-only afterwards; concurrent mutation is undefined
behaviour.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple, Union

from buildinfo.core.types import KeyPredicate, PropertyMap, ReadonlyProperties


def filter_keys(props: Mapping[str, str], predicate: KeyPredicate) -> ReadonlyProperties:
    """Return a read-only snapshot of ``props`` restricted to matching keys.

    The predicate is evaluated against full keys at call time; the result
    is a fresh mapping that does not track later changes.
    """

    return MappingProxyType({key: value for key, value in props.items() if predicate(key)})


class PropertyStore:
    """Flat ``str -> str`` mapping shared by all configuration views.

    Setting a key to ``None`` removes it, so absence stays distinguishable
    from an empty string.
    """

    def __init__(self, initial: Optional[Mapping[str, str]] = None) -> None:
        self._props: PropertyMap = {}
        if initial:
            self.update(initial)

    def get(self, key: str) -> Optional[str]:
        return self._props.get(key)

    def set(self, key: str, value: Optional[str]) -> None:
        if value is None:
            self._props.pop(key, None)
            return
        if not isinstance(value, str):
            msg = f"Property values must be strings, got {type(value).__name__} for {key!r}"
            raise TypeError(msg)
        self._props[key] = value

    def update(self, entries: Union[Mapping[str, str], Iterable[Tuple[str, str]]]) -> int:
        """Set every entry in order; later entries overwrite earlier ones.

        All values are checked before anything is written, so a bad entry
        leaves the store unchanged.

        Returns:
            Number of entries processed.

        Raises:
            TypeError: If any value is neither a string nor ``None``.
        """

        items = list(entries.items() if isinstance(entries, Mapping) else entries)
        for key, value in items:
            if value is not None and not isinstance(value, str):
                msg = f"Property values must be strings, got {type(value).__name__} for {key!r}"
                raise TypeError(msg)
        for key, value in items:
            self.set(key, value)
        return len(items)

    def all(self) -> PropertyMap:
        """Return the live underlying mapping (not a copy)."""

        return self._props

    def filter(self, predicate: KeyPredicate) -> ReadonlyProperties:
        return filter_keys(self._props, predicate)

    def __contains__(self, key: object) -> bool:
        return key in self._props

    def __iter__(self) -> Iterator[str]:
        return iter(self._props)

    def __len__(self) -> int:
        return len(self._props)

    def __repr__(self) -> str:
        return f"PropertyStore({len(self._props)} properties)"
