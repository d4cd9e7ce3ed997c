from numbers import Real
from typing import (Protocol,
                    Sequence,
                    Tuple)

Coordinate = Tuple[Real, Real]
Ring = Sequence[Coordinate]


class RingMatcher(Protocol):
    def __call__(self, ring: Ring, other: Ring) -> bool:
        ...
