from .base import (coordinates,
                   cycles,
                   matchers,
                   open_rings,
                   reversible_cycles,
                   rings,
                   shapely_cycles)
from .composite import (contours,
                        contours_and_rotations,
                        rings_and_rotations,
                        rings_and_swapped,
                        rings_of_different_sizes,
                        rings_pairs,
                        rotated_rings_pairs)
