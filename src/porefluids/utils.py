import operator
import typing

import numba
import numpy as np
import numpy.typing as npt

from porefluids._precision import get_dtype
from porefluids.errors import DomainError
from porefluids.types import FloatOrArray


__all__ = ["clip", "clip_scalar", "as_precision", "as_array", "check_index"]


@numba.vectorize(cache=True)
def clip(val, min_, max_):
    return np.maximum(np.minimum(val, max_), min_)


@numba.njit(cache=True)
def clip_scalar(value: float, min_val: float, max_val: float) -> float:
    if value < min_val:
        return min_val
    elif value > max_val:
        return max_val
    return value


def as_array(value: typing.Any) -> npt.NDArray:
    """
    Convert a scalar or array-like to an array of the active precision.

    :param value: Scalar or array-like input.
    :return: Array (0-d for scalar input) with dtype `get_dtype()`.
    """
    return np.asarray(value, dtype=get_dtype())


def as_precision(value: typing.Any) -> FloatOrArray:
    """
    Cast a result to the active precision, keeping scalars scalar.

    :param value: Scalar or array result.
    :return: A numpy scalar of the active dtype for 0-d input, an array otherwise.
    """
    dtype = np.dtype(get_dtype())
    if np.ndim(value) == 0:
        return dtype.type(value)
    return np.asarray(value, dtype=dtype)


def check_index(idx: typing.Any, size: int, kind: str) -> int:
    """
    Validate a phase or component index.

    :param idx: Index to validate, an `int` or `IntEnum` member.
    :param size: Number of defined indices.
    :param kind: Name of the index kind, used in the error message.
    :return: The index as a plain `int`.
    :raises DomainError: If `idx` is not an integer in `[0, size)`.
    """
    if isinstance(idx, bool):
        raise DomainError(f"Invalid {kind} index {idx!r}")
    try:
        i = operator.index(idx)
    except TypeError:
        raise DomainError(f"Invalid {kind} index {idx!r}") from None
    if not 0 <= i < size:
        raise DomainError(f"Invalid {kind} index {idx!r}, must be in [0, {size - 1}]")
    return i
