from functools import partial

from hypothesis.strategies import (floats,
                                   integers)

to_finite_floats = partial(floats,
                           allow_infinity=False,
                           allow_nan=False)
coordinates_values_factories = {int: integers,
                                float: to_finite_floats}
