class FWHTError(ValueError):
	"""Base class for errors raised on input the transform cannot accept."""


class InvalidLength(FWHTError):
	"""Sequence length is neither zero nor a power of two."""

	def __init__(self, length: int):
		self.length = length
		super().__init__(f"Input length must be a power of 2, got {length}")


class NotContiguous(FWHTError):
	"""Array storage cannot be viewed as a single contiguous run."""

	def __init__(self, message: str = "Array must be contiguous for FWHT"):
		super().__init__(message)
