from typing import (Callable,
                    List,
                    Sequence,
                    TypeVar)

from lz.functional import compose

from ringmatch.hints import Coordinate
from ringmatch.utils import close

T = TypeVar('T')

to_closed_reversed: Callable[[Sequence[Coordinate]],
                             List[Coordinate]] = compose(close, list, reversed)


def swap(sequence: Sequence[T], index: int, other_index: int) -> List[T]:
    result = list(sequence)
    result[index], result[other_index] = result[other_index], result[index]
    return result
