from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence


class TerminalAccessor(Generic[T]):
    """
    materializes a sequence into a concrete container.
    every method consumes what it returns; `count=None` drains the whole sequence,
    which never finishes on an unbounded one.
    """

    def __init__(self, sequence_instance: 'LazySequence[T]'):
        self._sequence = sequence_instance

    def _take(self, count: Optional[int]) -> List[T]:
        if count is None: return self._sequence.all()
        return self._sequence.next(count)

    def list(self, count: Optional[int] = None) -> List[T]:
        """convert to list"""
        return self._take(count)

    def tuple(self, count: Optional[int] = None) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._take(count))

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None,
             count: Optional[int] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._take(count)}

    def array(self, count: Optional[int] = None) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._take(count))

    def pandas(self, count: Optional[int] = None) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._take(count))

    def df(self, count: Optional[int] = None) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._take(count))

    def count(self, limit: Optional[int] = None) -> int:
        """count (and consume) the remaining items, up to limit"""
        return len(self._take(limit))
