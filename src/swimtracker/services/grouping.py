"""Generic group-and-reduce over a collection."""

from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
A = TypeVar("A")


def group_reduce(
    items: Iterable[T],
    key: Callable[[T], K],
    initial: Callable[[T], A],
    merge: Callable[[A, T], A],
) -> dict[K, A]:
    """Group items by key and fold each group into an accumulator.

    The first item of a group seeds the accumulator through `initial`;
    each later item is folded in with `merge`. Groups keep first-seen order.

    Args:
        items: Items to group
        key: Extracts the group key from an item
        initial: Builds the accumulator from a group's first item
        merge: Combines the accumulator with a later item

    Returns:
        Mapping from group key to accumulator
    """
    groups: dict[K, A] = {}
    for item in items:
        k = key(item)
        if k in groups:
            groups[k] = merge(groups[k], item)
        else:
            groups[k] = initial(item)
    return groups
