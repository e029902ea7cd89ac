from __future__ import annotations
import logging
import typing
from itertools import takewhile
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import LazySequence

logger = logging.getLogger(__name__)

# marks an omitted reduce seed, so that None stays a usable seed
_MISSING = object()


def _chain_step(parts: List['LazySequence[T]']) -> Tuple[List['LazySequence[T]'], List[T]]:
    """generator for concatenated sequences: drains the head part, then moves on"""
    while parts:
        batch = parts[0]._pull()
        if batch:
            return parts, batch
        logger.debug("concatenated part exhausted, %d left", len(parts) - 1)
        parts = parts[1:]
    return parts, []


class _CoreOperations(Generic[T]):
    def map(self: 'LazySequence[T]', transform: Expander[T, U]) -> 'LazySequence[U]':
        """
        flat-map: transform turns each item into an iterable of zero, one or many items.
        a step whose items all map to nothing is skipped rather than ending the sequence;
        only an exhausted source ends it.
        note that a str result is iterated character by character.
        """
        from ..sequence import LazySequence

        def map_step(source):
            while True:
                batch = source._pull()
                if not batch:
                    return source, []
                mapped = [out for item in batch for out in transform(item)]
                if mapped:
                    return source, mapped

        return LazySequence(map_step, self._fork())

    def select(self: 'LazySequence[T]', selector: Selector[T, U]) -> 'LazySequence[U]':
        """project each item to exactly one new item"""
        return self.map(lambda item: [selector(item)])

    def filter(self: 'LazySequence[T]', predicate: Predicate[T]) -> 'LazySequence[T]':
        """keep the items satisfying a predicate"""
        return self.map(lambda item: [item] if predicate(item) else [])

    grep = filter
    where = filter

    def spy(self: 'LazySequence[T]', action: Action[T]) -> 'LazySequence[T]':
        """
        calls action on every item as it passes through, leaving the sequence unchanged.
        handy for logging or debugging a pipeline.
        """
        def tap(item):
            action(item)
            return [item]
        return self.map(tap)

    def until(self: 'LazySequence[T]', condition: Predicate[T]) -> 'LazySequence[T]':
        """
        ends the sequence at the first item satisfying condition.
        that boundary item is dropped, not emitted.
        """
        from ..sequence import LazySequence

        def until_step(state):
            source, stopped = state
            if stopped:
                return state, []
            batch = source._pull()
            # takewhile stops calling condition at the boundary
            prefix = list(takewhile(lambda item: not condition(item), batch))
            stopped = len(prefix) < len(batch)
            if stopped:
                logger.debug("until boundary reached at %r", batch[len(prefix)])
            return (source, stopped), prefix

        return LazySequence(until_step, (self._fork(), False))

    def append(self: 'LazySequence[T]', *others: 'LazySequence[T]') -> 'LazySequence[T]':
        """this sequence followed by each of the others, in argument order"""
        return self._concat([self, *others])

    def prepend(self: 'LazySequence[T]', *others: 'LazySequence[T]') -> 'LazySequence[T]':
        """the others, in argument order, followed by this sequence"""
        return self._concat([*others, self])

    def _concat(self: 'LazySequence[T]', parts: List['LazySequence[T]']) -> 'LazySequence[T]':
        from ..sequence import LazySequence
        for part in parts:
            if not isinstance(part, LazySequence):
                raise TypeError(f"can only concatenate lazy sequences, got {type(part).__name__}")
        return LazySequence(_chain_step, [part._fork() for part in parts])

    def reduce(self: 'LazySequence[T]', reducer: Accumulator[U, T], initial: Any = _MISSING) -> U:
        """
        left fold over the remaining items, consuming the sequence.
        without initial, the first item seeds the accumulator.
        """
        if initial is _MISSING:
            first = self.next(1)
            if not first:
                raise ValueError("cannot reduce empty sequence without initial value")
            accumulated = first[0]
        else:
            accumulated = initial

        for item in self:
            accumulated = reducer(accumulated, item)
        return accumulated
