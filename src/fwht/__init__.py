import logging

from .errors import FWHTError, InvalidLength, NotContiguous
from .core import SupportsButterfly, fwht_inplace, is_valid_length, next_power_of_two
from .capability import WalshHadamard
from .containers import BorrowedView, FixedArray, HadamardList
from .ndarray import HadamardArray
from .functions import as_mutable_view, transform_copy, transform_mut
from .hadamard import hadamard_matrix

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
	"FWHTError",
	"InvalidLength",
	"NotContiguous",
	"SupportsButterfly",
	"fwht_inplace",
	"is_valid_length",
	"next_power_of_two",
	"WalshHadamard",
	"HadamardList",
	"FixedArray",
	"BorrowedView",
	"HadamardArray",
	"as_mutable_view",
	"transform_mut",
	"transform_copy",
	"hadamard_matrix",
]
