from __future__ import annotations
import numpy as np
from typing import Optional, Union
from sklearn.utils import check_random_state

RandomStateLike = Optional[Union[int, np.random.RandomState]]


def make_rng(random_state: RandomStateLike = None) -> np.random.RandomState:
    """Create a RandomState from a seed, or pass an existing one through."""
    return check_random_state(random_state)
