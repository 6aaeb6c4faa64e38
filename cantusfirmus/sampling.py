"""Random selection helpers."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def select_random_items(items: Sequence[T], count: int) -> list[T]:
    """Pick ``count`` items at random from ``items`` using reservoir sampling.

    A non-positive count or an empty input gives an empty list; a count at
    least as large as the input gives a copy of the whole input.
    """
    if count <= 0 or not items:
        return []
    if count >= len(items):
        return list(items)

    reservoir = list(items[:count])
    for position, item in enumerate(items[count:], start=count):
        slot = random.randrange(position + 1)
        if slot < count:
            reservoir[slot] = item
    return reservoir