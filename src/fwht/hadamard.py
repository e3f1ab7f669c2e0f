import numpy as np
from numpy.typing import DTypeLike

from .errors import InvalidLength


def hadamard_matrix(n: int, dtype: DTypeLike = np.int64) -> np.ndarray:
	"""Generate the Sylvester-type Hadamard matrix of order n.

	Entries are +1 and -1. Rows are in natural order, so for any vector x
	of length n, ``hadamard_matrix(n) @ x`` equals its FWHT. n must be a
	power of two and > 0.
	"""
	if n <= 0 or (n & (n - 1)) != 0:
		raise InvalidLength(n)
	H = np.ones((1, 1), dtype=dtype)
	while H.shape[0] < n:
		H = np.block([[H, H], [H, -H]])
	return H
