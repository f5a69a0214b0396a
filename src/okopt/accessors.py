"""Descriptors exposing None-able attributes as Options.

`OptionalAttribute` turns a plain attribute that may hold None into one that
reads as Some/Nothing. `DelegateOptional` forwards an attribute lookup
through an Option-valued attribute, giving Nothing when the target is absent.
The class decorators `optional_attributes` and `delegate_optional` install
these descriptors in bulk.

Example:
    ```python
    @delegate_optional('name', to='owner', prefix=True)
    @optional_attributes('owner', 'nickname')
    class Account:
        def __init__(self, owner=None, nickname=None):
            self.owner = owner
            self.nickname = nickname

    Account(owner=User('ada')).owner_name  # Some(value='ada')
    Account().owner_name  # Nothing
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from okopt.errors import ArgumentError
from okopt.types.option import Nothing, NothingType, Option, Some

__all__ = [
    'DelegateOptional',
    'OptionalAttribute',
    'delegate_optional',
    'optional_attributes',
]


class OptionalAttribute:
    """Data descriptor storing a raw value and reading it back as an Option.

    None is stored for Nothing and the payload for a Some, so assigning
    either an Option or a raw value works.
    """

    def __init__(self) -> None:
        self.name = ''
        self.storage = ''

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.storage = f'_{name}'

    def __get__(self, obj: object | None, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        value = getattr(obj, self.storage, None)
        if value is None:
            return Nothing
        return Some(value)

    def __set__(self, obj: object, value: Any) -> None:
        if isinstance(value, Some):
            value = value.value
        elif isinstance(value, NothingType):
            value = None
        setattr(obj, self.storage, value)

    def __delete__(self, obj: object) -> None:
        delattr(obj, self.storage)


class DelegateOptional:
    """Descriptor forwarding an attribute lookup through an Option.

    Reads ``getattr(obj, to)``, which must be an Option, and maps it to the
    target's ``attribute``. Bound methods are called with no arguments;
    anything else is returned as found.
    """

    def __init__(self, attribute: str, *, to: str) -> None:
        self.attribute = attribute
        self.to = to

    def __get__(self, obj: object | None, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        target: Option[Any] = getattr(obj, self.to)
        if not isinstance(target, Some | NothingType):
            raise ArgumentError(f'{self.to} must be an Option to delegate {self.attribute}')
        return target.map(self._resolve)

    def _resolve(self, target: object) -> Any:
        value = getattr(target, self.attribute)
        if inspect.ismethod(value):
            return value()
        return value


def optional_attributes[C: type](*names: str) -> Callable[[C], C]:
    """Class decorator installing an OptionalAttribute for each name."""

    def decorate(cls: C) -> C:
        for name in names:
            descriptor = OptionalAttribute()
            setattr(cls, name, descriptor)
            descriptor.__set_name__(cls, name)
        return cls

    return decorate


def delegate_optional[C: type](*attributes: str, to: str, prefix: bool = False) -> Callable[[C], C]:
    """Class decorator installing a DelegateOptional for each attribute.

    Args:
        *attributes: Attribute names to look up on the target.
        to: Name of the Option-valued attribute holding the target.
        prefix: If True, expose each as ``f'{to}_{attribute}'``.
    """

    def decorate(cls: C) -> C:
        for attribute in attributes:
            exposed = f'{to}_{attribute}' if prefix else attribute
            setattr(cls, exposed, DelegateOptional(attribute, to=to))
        return cls

    return decorate
