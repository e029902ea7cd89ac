import numbers
import typing
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import LazySequence


def _no_more(state):
    return state, []


def generator_sequence(generator: Step, state: Any = None) -> 'LazySequence[T]':
    """create a sequence from a step function `state -> (new_state, items)`"""
    from .sequence import LazySequence
    return LazySequence(generator, state)


def range_sequence(start: T, stop: Optional[T] = None,
                   step: Union[numbers.Number, StepFunction[T]] = 1) -> 'LazySequence[T]':
    """
    create a sequence counting from start, ending once the value exceeds stop.
    stop=None never ends. step is either an increment or a function that receives
    the previous value and returns the next one, for non-arithmetic progressions.
    """
    if callable(step):
        advance = step
    elif isinstance(step, numbers.Number):
        advance = lambda previous: previous + step
    else:
        raise TypeError(f"step must be a number or a callable, got {type(step).__name__}")

    def range_step(cursor):
        if stop is not None and cursor > stop:
            return cursor, []
        # emit the current value before moving the cursor on
        return advance(cursor), [cursor]

    return generator_sequence(range_step, start)


def fixed_sequence(items: Iterable[T]) -> 'LazySequence[T]':
    """create a sequence over a known, finite collection"""
    from .sequence import LazySequence
    sequence = LazySequence(_no_more)
    sequence._buffer.extend(items)
    return sequence


def empty() -> 'LazySequence[Any]':
    """create empty sequence"""
    return fixed_sequence([])

# --- aliases ---
lazy_list = generator_sequence
lazy_range = range_sequence
