r"""
'   _
'  | | __ _ _____   _ ___  ___  __ _
'  | |/ _` |_  / | | / __|/ _ \/ _` |
'  | | (_| |/ /| |_| \__ \  __/ (_| |
'  |_|\__,_/___|\__, |___/\___|\__, |
'               |___/             |_|
"""

import logging

# expose the main class
from .sequence import LazySequence

# expose the factory functions
from .factories import (
    generator_sequence,
    range_sequence,
    fixed_sequence,
    empty,
    # aliases
    lazy_list,
    lazy_range
)

# the library only emits debug records; handlers are the application's business
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "LazySequence",
    "generator_sequence",
    "range_sequence",
    "fixed_sequence",
    "empty",
    "lazy_list",
    "lazy_range"
]
