from abc import ABC, abstractmethod
from typing import MutableSequence

from .core import fwht_inplace


class WalshHadamard(ABC):
	"""Mixin giving a container the two FWHT operations.

	Subclasses expose their storage through ``_elements`` and an
	independent copy of themselves through ``_duplicate``. Both
	operations go through the single ``fwht_inplace`` engine.
	"""

	__slots__ = ()

	@abstractmethod
	def _elements(self) -> MutableSequence:
		"""Mutable element view over this container's own storage."""

	@abstractmethod
	def _duplicate(self) -> "WalshHadamard":
		"""Copy of this container that shares no storage with it."""

	def transform_in_place(self) -> None:
		"""Replace the contents with their Walsh-Hadamard transform."""
		fwht_inplace(self._elements())

	def transform_and_copy(self) -> "WalshHadamard":
		"""Return a transformed copy, leaving this container untouched."""
		result = self._duplicate()
		result.transform_in_place()
		return result
