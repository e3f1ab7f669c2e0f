import array
from collections.abc import MutableSequence

import numpy as np
import pytest

from fwht import (
	BorrowedView,
	FixedArray,
	HadamardArray,
	HadamardList,
	InvalidLength,
	NotContiguous,
	transform_copy,
	transform_mut,
)


def test_transform_mut_list():
	data = [1.0, 1.0, 1.0, 0.0]
	transform_mut(data)
	assert data == [3.0, 1.0, 1.0, -1.0]


def test_transform_copy_list():
	data = [1.0, 1.0, 1.0, 0.0]
	result = transform_copy(data)
	assert result == [3.0, 1.0, 1.0, -1.0]
	assert data == [1.0, 1.0, 1.0, 0.0]


def test_transform_integers():
	assert transform_copy([1, 2, 3, 4]) == [10, -2, -4, 0]


def test_transform_empty():
	data = []
	transform_mut(data)
	assert data == []
	assert transform_copy(data) == []


def test_transform_array_module():
	data = array.array("d", [1.0, 1.0, 1.0, 1.0, 0.0, 0.0, 0.0, 0.0])
	result = transform_copy(data)
	assert isinstance(result, array.array)
	assert result.tolist() == [4.0, 0.0, 0.0, 0.0, 4.0, 0.0, 0.0, 0.0]
	assert data.tolist() == [1.0, 1.0, 1.0, 1.0, 0.0, 0.0, 0.0, 0.0]


def test_transform_mut_memoryview_slice():
	buffer = array.array("d", [1.0, 1.0, 1.0, 0.0, 0.0, 0.0, 0.0, 0.0])
	transform_mut(memoryview(buffer)[0:4])
	assert buffer.tolist() == [3.0, 1.0, 1.0, -1.0, 0.0, 0.0, 0.0, 0.0]


def test_strided_memoryview_is_rejected():
	buffer = array.array("d", [1.0, 2.0, 3.0, 4.0])
	with pytest.raises(NotContiguous):
		transform_mut(memoryview(buffer)[::2])
	assert buffer.tolist() == [1.0, 2.0, 3.0, 4.0]


def test_read_only_memoryview_is_rejected():
	with pytest.raises(ValueError, match="writeable"):
		transform_mut(memoryview(bytes(4)))


def test_memoryview_cannot_be_copied():
	buffer = array.array("d", [1.0, 2.0])
	with pytest.raises(TypeError):
		transform_copy(memoryview(buffer))


def test_transform_plain_ndarray():
	data = np.array([3.0, 5.0])
	result = transform_copy(data)
	assert type(result) is np.ndarray
	assert np.array_equal(result, [8.0, -2.0])
	assert np.array_equal(data, [3.0, 5.0])
	transform_mut(data)
	assert np.array_equal(data, [8.0, -2.0])


def test_non_contiguous_ndarray_is_rejected():
	data = np.arange(16.0).reshape(4, 4)[:, 0]
	with pytest.raises(NotContiguous):
		transform_mut(data)
	with pytest.raises(NotContiguous):
		transform_copy(data)
	assert np.array_equal(data, [0.0, 4.0, 8.0, 12.0])


def test_two_dimensional_ndarray_is_rejected():
	with pytest.raises(ValueError):
		transform_mut(np.zeros((2, 2)))


def test_bad_length_leaves_input_unchanged():
	data = [1.0, 2.0, 3.0]
	with pytest.raises(InvalidLength):
		transform_mut(data)
	with pytest.raises(InvalidLength):
		transform_copy(data)
	assert data == [1.0, 2.0, 3.0]


@pytest.mark.parametrize("data", [(1.0, 2.0), {0: 1.0, 1: 2.0}, "ab", 4.0])
def test_unsupported_types(data):
	with pytest.raises(TypeError):
		transform_mut(data)
	with pytest.raises(TypeError):
		transform_copy(data)


def test_function_and_method_forms_agree():
	values = [1.0, 2.0, 3.0, 4.0]
	expected = transform_copy(list(values))
	for container in (HadamardList(values), FixedArray(values), BorrowedView(list(values)), HadamardArray(values)):
		assert list(transform_copy(container)) == expected
		assert list(container.transform_and_copy()) == expected
		transform_mut(container)
		assert list(container) == expected


def test_different_containers_same_result():
	from_list = transform_copy([1.0, 1.0, 0.0, 0.0])
	from_array = transform_copy(np.array([1.0, 1.0, 0.0, 0.0]))
	assert from_list == [2.0, 0.0, 2.0, 0.0]
	assert from_array.tolist() == from_list


def test_signed_byte_array_wraps_instead_of_failing():
	data = array.array("b", [1, 2, 100, 100])
	transform_mut(data)
	# exact result [203, -1, -197, -1] reduced to signed 8-bit
	assert data.tolist() == [-53, -1, 59, -1]


def test_bytearray_wraps_instead_of_failing():
	data = bytearray([1, 2])
	transform_mut(data)
	assert list(data) == [3, 255]
	original = bytearray([10, 20, 30, 40])
	result = transform_copy(original)
	assert isinstance(result, bytearray)
	assert list(result) == [100, 236, 216, 0]
	assert list(original) == [10, 20, 30, 40]


def test_unsigned_byte_memoryview_wraps():
	buffer = bytearray([10, 20, 30, 40])
	transform_mut(memoryview(buffer))
	assert list(buffer) == [100, 236, 216, 0]


def test_buffer_bad_length_leaves_input_unchanged():
	data = array.array("b", [100, 100, 100])
	with pytest.raises(InvalidLength):
		transform_mut(data)
	assert data.tolist() == [100, 100, 100]


class Wrapped(MutableSequence):
	def __init__(self, values):
		self._xs = list(values)

	def __len__(self):
		return len(self._xs)

	def __getitem__(self, i):
		return self._xs[i]

	def __setitem__(self, i, value):
		self._xs[i] = value

	def __delitem__(self, i):
		del self._xs[i]

	def insert(self, i, value):
		self._xs.insert(i, value)


def test_transform_copy_of_wrapping_sequence_does_not_share_storage():
	data = Wrapped([1.0, 1.0, 1.0, 0.0])
	result = transform_copy(data)
	assert isinstance(result, Wrapped)
	assert list(result) == [3.0, 1.0, 1.0, -1.0]
	assert list(data) == [1.0, 1.0, 1.0, 0.0]
