from collections.abc import Iterable
from functools import singledispatch
from typing import (Any,
                    Iterator,
                    List,
                    Sequence,
                    TypeVar)

from gon.base import Contour
from shapely.geometry import (LineString,
                              Polygon)

from ringmatch.hints import (Coordinate,
                             Ring)

T = TypeVar('T')


@singledispatch
def to_coordinates(ring: Any) -> List[Coordinate]:
    """
    Returns coordinates of the given ring as a list of pairs.
    Closing coordinate is kept if the input has it.
    """
    raise TypeError(f"Unsupported type: {type(ring)}")


@to_coordinates.register(Iterable)
def _(ring: Iterable) -> List[Coordinate]:
    return [tuple(coordinate) for coordinate in ring]


@to_coordinates.register
def _(ring: LineString) -> List[Coordinate]:
    return list(ring.coords)


@to_coordinates.register
def _(ring: Polygon) -> List[Coordinate]:
    return list(ring.exterior.coords)


@to_coordinates.register
def _(ring: Contour) -> List[Coordinate]:
    """Contours are implicitly closed"""
    return close([(vertex.x, vertex.y) for vertex in ring.vertices])


def is_closed(coordinates: Ring) -> bool:
    return bool(coordinates) and coordinates[0] == coordinates[-1]


def close(coordinates: Ring) -> List[Coordinate]:
    if not coordinates or is_closed(coordinates):
        return list(coordinates)
    return [*coordinates, coordinates[0]]


def coordinates_count(coordinates: Ring) -> int:
    return len(coordinates)


def rotate(sequence: Sequence[T], index: int) -> List[T]:
    return [*sequence[index:], *sequence[:index]]


def rotations(sequence: Sequence[T]) -> Iterator[List[T]]:
    """Yields all cyclic shifts of the sequence starting from itself"""
    yield from (rotate(sequence, index) for index in range(len(sequence)))
