"""Free-function forms of the FWHT operations.

These accept raw buffers as well as ``WalshHadamard`` containers, for
call sites that hold a list, ``array.array``, numpy array or memoryview
rather than one of the container types.
"""
import array
import copy
from collections.abc import MutableSequence

import numpy as np

from .capability import WalshHadamard
from .core import fwht_inplace
from .ndarray import array_view, buffer_view, check_contiguous


def as_mutable_view(data):
	"""Resolve data to the element view the engine mutates.

	Raises TypeError for objects that cannot expose one, and
	NotContiguous for strided numpy arrays or memoryviews.
	"""
	if isinstance(data, WalshHadamard):
		return data._elements()
	if isinstance(data, np.ndarray):
		return array_view(data)
	if isinstance(data, (memoryview, array.array, bytearray)):
		return buffer_view(data)
	if isinstance(data, MutableSequence):
		return data
	raise TypeError(f"cannot apply FWHT to object of type {type(data).__name__}")


def transform_mut(data) -> None:
	"""Transform data in place. See ``fwht_inplace`` for the contract."""
	fwht_inplace(as_mutable_view(data))


def transform_copy(data):
	"""Return a transformed copy of data, of the same type.

	data itself is never modified, including when the transform fails.
	"""
	if isinstance(data, WalshHadamard):
		return data.transform_and_copy()
	if isinstance(data, memoryview):
		raise TypeError("memoryview cannot be duplicated; transform a copy of its exporter instead")
	if isinstance(data, np.ndarray):
		check_contiguous(data)
		result = data.copy()
	else:
		as_mutable_view(data)
		result = copy.deepcopy(data)
	transform_mut(result)
	return result
