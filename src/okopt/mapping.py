"""OptionalDict: a dict whose lookups return Options instead of raising or None."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any

from okopt.types.option import Nothing, NothingType, Option, Some

__all__ = ['OptionalDict']


class OptionalDict[K: Hashable, V](dict[K, V]):
    """A dict where item access returns an Option.

    Missing keys and keys mapped to None both read as Nothing; anything else
    is wrapped in Some. Writes, iteration and the rest of the dict API behave
    as usual, so ``get`` still returns raw values.

    Examples:
        >>> d = OptionalDict(color='blue')
        >>> d['color']
        Some(value='blue')
        >>> d['size']
        Nothing
    """

    def __getitem__(self, key: K) -> Option[V]:  # type: ignore[override]
        value = self.get(key)
        if value is None:
            return Nothing
        return Some(value)

    def dig(self, *keys: Hashable) -> Option[Any]:
        """Look up a path of keys through nested mappings.

        Options met on the way are unwrapped; a missing key, a None, a
        Nothing or a non-mapping before the last key ends the walk with
        Nothing. A Some holding the final value is flattened.

        Examples:
            >>> d = OptionalDict(description={'short': {'text': 'Nested'}})
            >>> d.dig('description', 'short', 'text')
            Some(value='Nested')
            >>> d.dig('description', 'long')
            Nothing
        """
        current: Any = self
        for key in keys:
            if isinstance(current, OptionalDict):
                current = dict.get(current, key)
            elif isinstance(current, Mapping):
                current = current.get(key)
            else:
                return Nothing
            while isinstance(current, Some):
                current = current.value
            if current is None or isinstance(current, NothingType):
                return Nothing
        return Some(current)
