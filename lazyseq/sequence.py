from __future__ import annotations

import logging
from collections import deque
from copy import deepcopy
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)


def clone_state(state: S) -> S:
    """structural copy of a sequence state; the deepcopy memo keeps cyclic states intact"""
    return deepcopy(state)


def _check_count(count: Any) -> None:
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"count must be an int, got {type(count).__name__}")
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")


# --- base sequence implementation ---

class _BaseSequence(Generic[T]):
    def __init__(self, generator: Step, state: Any = None):
        """init with a step function and its initial state"""
        if not callable(generator):
            raise TypeError("generator must be callable")
        self._generator = generator
        self._state = state
        self._buffer: deque = deque()
        self._done = False

    def _step(self) -> List[T]:
        """run the generator once, store its state and return the produced items"""
        outcome = self._generator(self._state)
        try:
            state, items = outcome
        except (TypeError, ValueError):
            raise TypeError(f"generator must return a (state, items) pair, got {outcome!r}") from None

        self._state = state
        produced = list(items) if items is not None else []
        if not produced:
            logger.debug("generator %r signalled exhaustion", self._generator)
            self._done = True
        return produced

    def _generate_next(self) -> None:
        self._buffer.extend(self._step())

    def _pull(self) -> List[T]:
        """
        one raw batch: everything pending in the buffer, or else a single generator step.
        an empty batch means the sequence is exhausted.
        """
        if self._buffer:
            batch = list(self._buffer)
            self._buffer.clear()
            return batch
        if self._done:
            return []
        return self._step()

    def _fork(self) -> 'LazySequence[T]':
        """independent copy sharing the generator, with cloned state and pending items"""
        return clone_state(self)

    def __deepcopy__(self, memo: Dict[int, Any]) -> '_BaseSequence[T]':
        # the generator is shared by reference, only state and pending items are cloned.
        # this also holds for forks nested inside the state of a derived sequence.
        cls = self.__class__
        twin = cls.__new__(cls)
        memo[id(self)] = twin
        cls.__init__(twin, self._generator, deepcopy(self._state, memo))
        twin._buffer.extend(deepcopy(list(self._buffer), memo))
        twin._done = self._done
        return twin

    def next(self, count: int = 1) -> List[T]:
        """
        returns up to `count` items in production order.
        fewer items (possibly none) come back once the sequence is exhausted.
        """
        _check_count(count)
        result: List[T] = []
        while len(result) < count:
            if not self._buffer:
                if self._done:
                    break
                self._generate_next()
                continue
            result.append(self._buffer.popleft())
        return result

    def next_one(self, default: Optional[T] = None) -> Optional[T]:
        """returns the next item, or `default` when the sequence is exhausted"""
        items = self.next(1)
        return items[0] if items else default

    def is_done(self) -> bool:
        return self._done

    def all(self) -> List[T]:
        """
        drains the sequence and returns every remaining item.
        never returns for an unbounded sequence; bound it first (until, next).
        """
        result = list(self._buffer)
        self._buffer.clear()
        while not self._done:
            result.extend(self._step())
        return result

    def __iter__(self) -> Iterator[T]:
        # consuming iteration; items handed out are gone from the sequence
        while True:
            items = self.next(1)
            if not items:
                return
            yield items[0]

    def __repr__(self) -> str:
        return f"LazySequence(buffered={len(self._buffer)}, done={self._done})"


# --- main sequence class ---

class LazySequence(
    _BaseSequence[T],
    _CoreOperations[T]
):
    """a lazily generated, possibly unbounded sequence with chainable combinators."""
    def __init__(self, generator: Step, state: Any = None):
        super().__init__(generator, state)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)
