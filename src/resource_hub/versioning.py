"""Version ordering for dot-separated numeric version strings.

Versions compare as integer sequences, component by component, the same way
a relational store orders `string_to_array(version, '.')::int[]`: "1.9" sorts
before "1.10", and a shorter prefix sorts first ("1.0" < "1.0.1").
"""

from typing import Callable, Iterable, List, Tuple, TypeVar

T = TypeVar("T")


class MalformedVersionError(ValueError):
    """Raised when a version string has a non-integer component."""


def version_key(version: str) -> Tuple[int, ...]:
    """
    Parse a version string into its integer components.

    Raises:
        MalformedVersionError: If any component is not a non-negative integer
    """
    parts = version.split(".")
    if not all(part.isdigit() and part.isascii() for part in parts):
        raise MalformedVersionError(f"Malformed version: {version!r}")
    return tuple(int(part) for part in parts)


def sort_versions(items: Iterable[T], key: Callable[[T], str] = lambda v: v.version) -> List[T]:
    """
    Sort items ascending by version.

    The sort is stable: items with equal versions keep their input order.
    """
    return sorted(items, key=lambda item: version_key(key(item)))


def latest(items: Iterable[T], key: Callable[[T], str] = lambda v: v.version) -> T:
    """Return the item with the highest version (last after sorting)."""
    ordered = sort_versions(items, key=key)
    if not ordered:
        raise ValueError("No versions to choose from")
    return ordered[-1]
