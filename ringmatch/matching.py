from typing import (Iterator,
                    List,
                    Optional,
                    Sequence,
                    Tuple)

from ringmatch.hints import (Coordinate,
                             Ring)
from ringmatch.utils import (coordinates_count,
                             is_closed,
                             rotations,
                             to_coordinates)

MIN_RING_SIZE = 2


def is_cyclic_match(ring: Ring, other: Ring) -> bool:
    """
    Checks if the other ring is a rotation of the ring,
    i.e. both rings are closed and have the same coordinates
    going in the same direction, possibly from a different start.
    Reversed rings are not considered matching.
    Coordinates are compared exactly.
    """
    return cyclic_offset(ring, other) is not None


def cyclic_offset(ring: Ring, other: Ring) -> Optional[int]:
    """
    Returns the smallest index of the other ring's coordinate
    that the ring starts from when both rings are cyclic matches,
    otherwise returns None.
    """
    cycles = _to_cycles(ring, other)
    if cycles is None:
        return None
    cycle, other_cycle = cycles
    return next((offset
                 for offset, rotation in enumerate(rotations(other_cycle))
                 if rotation == cycle),
                None)


def is_cyclic_match_linear(ring: Ring, other: Ring) -> bool:
    """
    Same as `is_cyclic_match` but runs in linear time
    by searching the ring's coordinates
    in the doubled coordinates of the other ring.
    """
    cycles = _to_cycles(ring, other)
    if cycles is None:
        return False
    cycle, other_cycle = cycles
    doubled = [*other_cycle, *other_cycle[:-1]]
    return next(_find_occurrences(cycle, doubled), None) is not None


def _to_cycles(ring: Ring,
               other: Ring
               ) -> Optional[Tuple[List[Coordinate], List[Coordinate]]]:
    """
    Returns coordinates of both rings without the closing ones
    if the rings can be matched at all.
    """
    coordinates = to_coordinates(ring)
    other_coordinates = to_coordinates(other)
    if not (is_closed(coordinates) and is_closed(other_coordinates)):
        return None
    count = coordinates_count(coordinates)
    if count != coordinates_count(other_coordinates) or count < MIN_RING_SIZE:
        return None
    return coordinates[:-1], other_coordinates[:-1]


def _find_occurrences(pattern: Sequence[Coordinate],
                      text: Sequence[Coordinate]) -> Iterator[int]:
    """Yields start indices of the pattern in the text (Knuth-Morris-Pratt)"""
    prefixes = _to_prefix_function(pattern)
    matched = 0
    for index, element in enumerate(text):
        while matched and element != pattern[matched]:
            matched = prefixes[matched - 1]
        if element == pattern[matched]:
            matched += 1
        if matched == len(pattern):
            yield index - matched + 1
            matched = prefixes[matched - 1]


def _to_prefix_function(pattern: Sequence[Coordinate]) -> List[int]:
    result = [0] * len(pattern)
    matched = 0
    for index in range(1, len(pattern)):
        while matched and pattern[index] != pattern[matched]:
            matched = result[matched - 1]
        if pattern[index] == pattern[matched]:
            matched += 1
        result[index] = matched
    return result
