"""List Concatenation — flatten any number of sequences into one new list."""

from itertools import chain
from typing import Iterable, TypeVar

T = TypeVar("T")


def concatenate_arrays(*arrays: Iterable[T]) -> list[T]:
    """Concatenate in argument order. Always returns a new list (never an input)."""
    return list(chain.from_iterable(arrays))
