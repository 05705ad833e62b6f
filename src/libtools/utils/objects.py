"""
Helpers for poking at mappings and plain objects.

Mappings are addressed by key, anything else by attribute.
"""

from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any, Callable


def empty(*args: Any, **kwargs: Any) -> None:
    """Do nothing. Handy as a default callback."""


def make_setter(target: Any, field: str) -> Callable[[Any], None]:
    """
    Build a setter for one field of ``target``.

    Example:
        >>> settings = {"level": 5}
        >>> set_level = make_setter(settings, "level")
        >>> set_level(4)
        >>> settings["level"]
        4
    """
    if isinstance(target, MutableMapping):

        def setter(value: Any) -> None:
            target[field] = value

    else:

        def setter(value: Any) -> None:
            setattr(target, field, value)

    return setter


def has_keys(target: Any, keys: Iterable[str]) -> bool:
    """
    Check that every key in ``keys`` is an own key of ``target``.

    Mappings are checked by key and plain objects by instance attribute.
    Objects without a ``__dict__`` (``__slots__`` classes) fall back to
    ``hasattr``.
    """
    if isinstance(target, Mapping):
        own = target
    else:
        own = getattr(target, "__dict__", None)
        if own is None:
            return all(hasattr(target, key) for key in keys)
    return all(key in own for key in keys)


def nest(target: MutableMapping, parent: str, children: Iterable[str]) -> None:
    """
    Move a set of keys one level deeper, in place.

    Args:
        target: The mapping to rearrange
        parent: Key of the mapping the children are moved into; an existing
            mapping under that key is reused
        children: Keys to move under ``parent`` and drop from the top level

    Example:
        >>> person = {"name": "george", "height": 180, "weight": 75}
        >>> nest(person, "stats", ["height", "weight"])
        >>> person
        {'name': 'george', 'stats': {'height': 180, 'weight': 75}}
    """
    nested = target.get(parent)
    if not isinstance(nested, MutableMapping):
        nested = {}
    target[parent] = nested
    for child in children:
        if child in target:
            nested[child] = target.pop(child)
