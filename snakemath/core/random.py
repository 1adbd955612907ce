"""
Random source handling.

Every random operation in SnakeMath takes `seed=`, which may be None
(fresh OS entropy), an int, or an existing numpy Generator. Passing the
same Generator through several calls draws one reproducible stream;
there is no module-level RNG state.
"""

from typing import Union

import numpy as np

RandomSource = Union[int, np.random.Generator, None]


def as_generator(seed: RandomSource = None) -> np.random.Generator:
    """
    Return a numpy Generator for the given seed.

    A Generator passed in is returned unchanged (numpy's default_rng
    passes it through), so callers control the stream.
    """
    if isinstance(seed, (bool, float)):
        raise TypeError(f"seed must be None, an int or a numpy Generator, got {seed!r}")
    return np.random.default_rng(seed)
