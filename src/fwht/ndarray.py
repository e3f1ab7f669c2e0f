import logging

import numpy as np
from numpy.typing import ArrayLike, DTypeLike

from .capability import WalshHadamard
from .errors import NotContiguous

log = logging.getLogger(__name__)


def check_contiguous(x: np.ndarray) -> None:
	"""Raise unless x is a one-dimensional, C-contiguous array.

	A strided x raises NotContiguous rather than being transformed
	element by element across the gaps.
	"""
	if x.ndim != 1:
		raise ValueError(f"FWHT requires a one-dimensional array, got ndim={x.ndim}")
	if not x.flags.c_contiguous:
		log.debug("rejecting non-contiguous array with strides %s", x.strides)
		raise NotContiguous()


def array_view(x: np.ndarray) -> np.ndarray:
	"""Return a plain ndarray view of x that the engine can write through."""
	check_contiguous(x)
	if not x.flags.writeable:
		raise ValueError("FWHT requires a writeable array")
	return x.view(np.ndarray)


def buffer_view(data) -> np.ndarray:
	"""numpy view over a writeable buffer (array.array, bytearray, memoryview).

	Writes go through numpy's fixed-width arithmetic, so out-of-range
	results wrap instead of failing partway through the transform.
	"""
	mv = memoryview(data)
	if mv.ndim != 1:
		raise ValueError(f"FWHT requires a one-dimensional buffer, got ndim={mv.ndim}")
	if not mv.contiguous:
		log.debug("rejecting non-contiguous buffer with strides %s", mv.strides)
		raise NotContiguous("Buffer must be contiguous for FWHT")
	if mv.readonly:
		raise ValueError("FWHT requires a writeable buffer")
	return np.asarray(mv)


class HadamardArray(np.ndarray, WalshHadamard):
	"""One-dimensional numpy array with in-place and copying FWHT.

	The dtype is kept as given, so integer arrays stay integer (and wrap
	on overflow) and float32 stays float32.
	"""

	def __new__(cls, values: ArrayLike, dtype: DTypeLike = None):
		a = np.array(values, dtype=dtype)
		if a.ndim != 1:
			raise ValueError("HadamardArray must be one-dimensional")
		return a.view(cls)

	def _elements(self) -> np.ndarray:
		return array_view(self)

	def _duplicate(self) -> "HadamardArray":
		check_contiguous(self)
		result = self.copy()
		assert not np.shares_memory(result, self), "copy aliases its source"
		return result
