"""Cyclic matching of closed rings"""
__version__ = '0.1.0-alpha'

from .hints import (Coordinate,
                    Ring)
from .matching import (cyclic_offset,
                       is_cyclic_match,
                       is_cyclic_match_linear)
from .utils import (close,
                    is_closed,
                    to_coordinates)
