import array
from typing import Iterable, MutableSequence, Optional

import numpy as np

from .capability import WalshHadamard
from .ndarray import array_view, buffer_view


class HadamardList(list, WalshHadamard):
	"""Growable list with in-place and copying FWHT.

	>>> data = HadamardList([1.0, 1.0, 1.0, 0.0])
	>>> data.transform_in_place()
	>>> data
	HadamardList([3.0, 1.0, 1.0, -1.0])
	"""

	def _elements(self) -> MutableSequence:
		return self

	def _duplicate(self) -> "HadamardList":
		return HadamardList(self)

	def __repr__(self) -> str:
		return f"HadamardList({list.__repr__(self)})"


class FixedArray(WalshHadamard):
	"""Array whose length is fixed when it is built.

	Elements can be read and assigned by index, but the array never
	grows or shrinks. Copies are flat element-wise copies.
	"""

	__slots__ = ("_items",)

	def __init__(self, values: Iterable):
		self._items = list(values)

	def __len__(self) -> int:
		return len(self._items)

	def __getitem__(self, index):
		return self._items[index]

	def __setitem__(self, index, value):
		if isinstance(index, slice):
			values = list(value)
			if len(range(*index.indices(len(self._items)))) != len(values):
				raise ValueError("FixedArray slice assignment cannot change its length")
			self._items[index] = values
			return
		self._items[index] = value

	def __iter__(self):
		return iter(self._items)

	def __eq__(self, other):
		if isinstance(other, FixedArray):
			return self._items == other._items
		return NotImplemented

	def __repr__(self) -> str:
		return f"FixedArray({self._items!r})"

	def tolist(self) -> list:
		return list(self._items)

	def _elements(self) -> MutableSequence:
		return self._items

	def _duplicate(self) -> "FixedArray":
		return FixedArray(self._items)


class BorrowedView(WalshHadamard):
	"""Window ``[start, stop)`` into a larger mutable sequence.

	Indices are relative to ``start`` and checked against the window, so
	transforming the view never touches the base outside it.

	>>> buffer = [1.0, 1.0, 1.0, 0.0, 0.0, 0.0, 0.0, 0.0]
	>>> BorrowedView(buffer, 0, 4).transform_in_place()
	>>> buffer
	[3.0, 1.0, 1.0, -1.0, 0.0, 0.0, 0.0, 0.0]
	"""

	__slots__ = ("base", "start", "stop")

	def __init__(self, base: MutableSequence, start: int = 0, stop: Optional[int] = None):
		size = len(base)
		if stop is None:
			stop = size
		if not 0 <= start <= stop <= size:
			raise IndexError(f"view bounds [{start}, {stop}) outside sequence of length {size}")
		self.base = base
		self.start = start
		self.stop = stop

	def __len__(self) -> int:
		return self.stop - self.start

	def _offset(self, index: int) -> int:
		n = len(self)
		if index < 0:
			index += n
		if not 0 <= index < n:
			raise IndexError("BorrowedView index out of range")
		return self.start + index

	def __getitem__(self, index: int):
		return self.base[self._offset(index)]

	def __setitem__(self, index: int, value) -> None:
		self.base[self._offset(index)] = value

	def __iter__(self):
		for i in range(self.start, self.stop):
			yield self.base[i]

	def __repr__(self) -> str:
		return f"BorrowedView({self.tolist()!r})"

	def tolist(self) -> list:
		return list(self)

	def _elements(self) -> MutableSequence:
		# numpy and buffer bases are sliced as arrays so fixed-width writes wrap
		if isinstance(self.base, np.ndarray):
			return array_view(self.base[self.start:self.stop])
		if isinstance(self.base, (memoryview, array.array, bytearray)):
			return buffer_view(self.base)[self.start:self.stop]
		return self

	def _duplicate(self) -> "BorrowedView":
		if isinstance(self.base, (np.ndarray, memoryview)):
			return BorrowedView(np.array(self.base[self.start:self.stop]))
		if isinstance(self.base, (array.array, bytearray)):
			return BorrowedView(self.base[self.start:self.stop])
		return BorrowedView(self.tolist())
