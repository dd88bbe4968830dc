from contextlib import contextmanager
from contextvars import ContextVar

import numpy as np
import numpy.typing as npt


__all__ = [
    "get_dtype",
    "set_dtype",
    "with_precision",
    "use_64bit_precision",
    "use_32bit_precision",
    "get_floating_point_info",
]

_scalar_dtype: ContextVar[npt.DTypeLike] = ContextVar(
    "_scalar_dtype", default=np.float64
)


def get_dtype() -> npt.DTypeLike:
    """
    Get the floating point type used for all constitutive relation results.

    This is the "scalar" of the library. Material laws and fluid system
    queries cast their results to it.

    :return: The current data type.
    """
    return _scalar_dtype.get()


def set_dtype(dtype: npt.DTypeLike) -> None:
    """
    Set the floating point type used for constitutive relation results.

    The setting is local to the current context (thread or task).

    :param dtype: The data type to set as default.
    """
    _scalar_dtype.set(dtype)


@contextmanager
def with_precision(dtype: npt.DTypeLike):
    """
    Context manager to temporarily evaluate constitutive relations in another precision.

    :param dtype: The data type to use within the context.
    """
    token = _scalar_dtype.set(dtype)
    try:
        yield
    finally:
        _scalar_dtype.reset(token)


def use_64bit_precision() -> None:
    """
    Set the default data type to float64.

    Default precision for porefluids.
    """
    set_dtype(np.float64)


def use_32bit_precision() -> None:
    """
    Set the default data type to float32.
    """
    set_dtype(np.float32)


def get_floating_point_info() -> np.finfo:
    """
    Get the floating point information for the active data type.

    :return: The floating point information.
    """
    return np.finfo(get_dtype())  # type: ignore
