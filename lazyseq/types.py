from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple
)

T = TypeVar('T')
U = TypeVar('U')
S = TypeVar('S')
K = TypeVar('K')
V = TypeVar('V')

# a generator step receives the current state and returns (new_state, items)
Step = Callable[[S], Tuple[S, Optional[Iterable[T]]]]

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
Expander = Callable[[T], Iterable[U]]
KeySelector = Callable[[T], K]
Action = Callable[[T], Any]
Accumulator = Callable[[U, T], U]
StepFunction = Callable[[T], T]
