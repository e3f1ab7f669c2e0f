import logging
import operator
from typing import MutableSequence, Protocol, TypeVar

import numpy as np

from .errors import InvalidLength

log = logging.getLogger(__name__)

T = TypeVar("T", bound="SupportsButterfly")


class SupportsButterfly(Protocol):
	"""Element type the butterfly needs: closed under + and -."""

	def __add__(self: T, other: T) -> T: ...
	def __sub__(self: T, other: T) -> T: ...


def is_valid_length(n: int) -> bool:
	"""True if n is 0 or an exact power of two."""
	n = operator.index(n)
	return n == 0 or (n > 0 and (n & (n - 1)) == 0)


def next_power_of_two(n: int) -> int:
	"""Smallest power of two >= n. Returns 1 for n <= 1."""
	n = operator.index(n)
	if n <= 1:
		return 1
	return 1 << (n - 1).bit_length()


def fwht_inplace(a: MutableSequence[T]) -> None:
	"""In-place Fast Walsh-Hadamard Transform (FWHT).

	Unnormalized and in natural (Hadamard) order, so applying it twice
	scales every element by len(a). Works on any indexable, mutable
	sequence whose elements support + and -. numpy arrays must be
	one-dimensional.

	The length is checked before any element is touched: on
	InvalidLength the input is left exactly as it was. An empty input is
	a no-op.

	Fixed-width numpy integers wrap on overflow without warning.

	The caller must hold exclusive access to ``a`` for the duration of
	the call.
	"""
	if isinstance(a, np.ndarray) and a.ndim != 1:
		raise ValueError(f"FWHT requires a one-dimensional array, got ndim={a.ndim}")
	n = len(a)
	if n == 0:
		return
	if not is_valid_length(n):
		log.debug("rejecting FWHT input of length %d", n)
		raise InvalidLength(n)
	with np.errstate(over="ignore"):
		h = 1
		while h < n:
			for i in range(0, n, h * 2):
				for j in range(i, i + h):
					x = a[j]
					y = a[j + h]
					a[j] = x + y
					a[j + h] = x - y
			h *= 2
