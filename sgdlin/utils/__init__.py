from .rng import make_rng
from .validation import as_2d, as_column, assert_row_vector

__all__ = ["make_rng", "as_2d", "as_column", "assert_row_vector"]
