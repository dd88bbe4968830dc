"""
Brooks-Corey capillary pressure <-> saturation relations and their derivatives.

Brooks-Corey (1964) relations in effective wetting phase saturation `Swe`:

    pc(Swe)      = pe * Swe^(-1/α)
    Swe(pc)      = clamp((pc / pe)^(-α), 0, 1)
    dpc/dSwe     = -(pe / α) * Swe^(-1/α - 1)
    dSwe/dpc     = -(α / pe) * (pc / pe)^(-α - 1)

`Swe = 0` is the pole of the capillary pressure curve. It is reported as an
infinity by every function of the family: pc(0) = +inf, dpc/dSwe(0) = -inf and
dSwe/dpc(0) = -inf. Swe(pc=0) is clamped to 1.

Conversion between absolute and effective saturations is left to the caller
(see `porefluids.material_laws.EffectiveToAbsoluteLaw`).
"""

import numba
import numpy as np
import numpy.typing as npt

from porefluids.errors import PreconditionViolation
from porefluids.types import FloatOrArray
from porefluids.utils import as_array, as_precision, clip_scalar


__all__ = [
    "validate_saturation",
    "validate_capillary_pressure",
    "validate_brooks_corey_parameters",
    "compute_brooks_corey_capillary_pressure",
    "compute_brooks_corey_saturation",
    "compute_brooks_corey_dpc_dsw",
    "compute_brooks_corey_dsw_dpc",
]


def validate_saturation(saturation: npt.NDArray, name: str = "saturation") -> None:
    """
    Check that saturation(s) lie in [0, 1].

    :param saturation: Saturation(s) as an array (0-d for scalars).
    :param name: Name of the argument, used in the error message.
    :raises PreconditionViolation: If any value is outside [0, 1] or NaN.
    """
    invalid = ~((saturation >= 0.0) & (saturation <= 1.0))
    if np.any(invalid):
        raise PreconditionViolation(
            f"`{name}` must lie in [0, 1]. Got {np.atleast_1d(saturation)[np.atleast_1d(invalid)]}"
        )


def validate_capillary_pressure(capillary_pressure: npt.NDArray) -> None:
    """
    Check that capillary pressure(s) are non-negative.

    :param capillary_pressure: Capillary pressure(s) in Pa as an array.
    :raises PreconditionViolation: If any value is negative or NaN.
    """
    invalid = ~(capillary_pressure >= 0.0)
    if np.any(invalid):
        raise PreconditionViolation(
            "`capillary_pressure` must be non-negative. "
            f"Got {np.atleast_1d(capillary_pressure)[np.atleast_1d(invalid)]}"
        )


def validate_brooks_corey_parameters(
    entry_pressure: float, pore_size_distribution_index: float
) -> None:
    """
    Check that the Brooks-Corey parameters are strictly positive.

    :raises PreconditionViolation: If `pe <= 0` or `α <= 0`.
    """
    if not (np.isfinite(entry_pressure) and entry_pressure > 0.0):
        raise PreconditionViolation(
            f"Entry pressure must be strictly positive. Got {entry_pressure!r}"
        )
    if not (np.isfinite(pore_size_distribution_index) and pore_size_distribution_index > 0.0):
        raise PreconditionViolation(
            "Pore size distribution index must be strictly positive. "
            f"Got {pore_size_distribution_index!r}"
        )


@numba.vectorize(cache=True)
def _brooks_corey_capillary_pressure(swe, pe, alpha):
    if swe == 0.0:
        return np.inf
    return pe * swe ** (-1.0 / alpha)


@numba.vectorize(cache=True)
def _brooks_corey_saturation(pc, pe, alpha):
    if pc == 0.0:
        return 1.0
    return clip_scalar((pc / pe) ** (-alpha), 0.0, 1.0)


@numba.vectorize(cache=True)
def _brooks_corey_dpc_dsw(swe, pe, alpha):
    if swe == 0.0:
        return -np.inf
    return -pe / alpha * swe ** (-1.0 / alpha - 1.0)


@numba.vectorize(cache=True)
def _brooks_corey_dsw_dpc(pc, pe, alpha):
    if pc == 0.0:
        return -np.inf
    return -alpha / pe * (pc / pe) ** (-alpha - 1.0)


def compute_brooks_corey_capillary_pressure(
    effective_wetting_saturation: FloatOrArray,
    entry_pressure: float,
    pore_size_distribution_index: float,
) -> FloatOrArray:
    """
    Computes the capillary pressure from the effective wetting phase saturation.

        pc = pe * Swe^(-1/α)

    For 0 < Swe <= 1, pc >= pe with pc(1) = pe. pc(0) = +inf.

    Supports both scalar and array inputs.

    :param effective_wetting_saturation: Effective wetting phase saturation `Swe` in [0, 1].
    :param entry_pressure: Entry pressure `pe` (Pa).
    :param pore_size_distribution_index: Pore size distribution index `α`.
    :return: Capillary pressure (Pa), scalar or array matching the input.
    :raises PreconditionViolation: If `Swe` is outside [0, 1] or a parameter is not positive.
    """
    validate_brooks_corey_parameters(entry_pressure, pore_size_distribution_index)
    swe = as_array(effective_wetting_saturation)
    validate_saturation(swe, name="effective_wetting_saturation")
    return as_precision(
        _brooks_corey_capillary_pressure(
            swe, as_array(entry_pressure), as_array(pore_size_distribution_index)
        )
    )


def compute_brooks_corey_saturation(
    capillary_pressure: FloatOrArray,
    entry_pressure: float,
    pore_size_distribution_index: float,
) -> FloatOrArray:
    """
    Computes the effective wetting phase saturation from the capillary pressure.

    This is the inverse of the capillary pressure curve, clamped to [0, 1]:

        Swe = min(max((pc / pe)^(-α), 0), 1)

    Non-increasing in `pc`. Below the entry pressure the medium is saturated (Swe = 1).

    :param capillary_pressure: Capillary pressure `pc` >= 0 (Pa), scalar or array.
    :param entry_pressure: Entry pressure `pe` (Pa).
    :param pore_size_distribution_index: Pore size distribution index `α`.
    :return: Effective wetting phase saturation, scalar or array matching the input.
    :raises PreconditionViolation: If `pc` is negative or a parameter is not positive.
    """
    validate_brooks_corey_parameters(entry_pressure, pore_size_distribution_index)
    pc = as_array(capillary_pressure)
    validate_capillary_pressure(pc)
    return as_precision(
        _brooks_corey_saturation(
            pc, as_array(entry_pressure), as_array(pore_size_distribution_index)
        )
    )


def compute_brooks_corey_dpc_dsw(
    effective_wetting_saturation: FloatOrArray,
    entry_pressure: float,
    pore_size_distribution_index: float,
) -> FloatOrArray:
    """
    Computes the partial derivative of the capillary pressure w.r.t. the effective saturation.

        dpc/dSwe = -(pe / α) * Swe^(-1/α - 1)

    Strictly negative on (0, 1]. -inf at Swe = 0.

    :param effective_wetting_saturation: Effective wetting phase saturation `Swe` in [0, 1].
    :param entry_pressure: Entry pressure `pe` (Pa).
    :param pore_size_distribution_index: Pore size distribution index `α`.
    :return: dpc/dSwe (Pa), scalar or array matching the input.
    :raises PreconditionViolation: If `Swe` is outside [0, 1] or a parameter is not positive.
    """
    validate_brooks_corey_parameters(entry_pressure, pore_size_distribution_index)
    swe = as_array(effective_wetting_saturation)
    validate_saturation(swe, name="effective_wetting_saturation")
    return as_precision(
        _brooks_corey_dpc_dsw(
            swe, as_array(entry_pressure), as_array(pore_size_distribution_index)
        )
    )


def compute_brooks_corey_dsw_dpc(
    capillary_pressure: FloatOrArray,
    entry_pressure: float,
    pore_size_distribution_index: float,
) -> FloatOrArray:
    """
    Computes the partial derivative of the effective saturation w.r.t. the capillary pressure.

        dSwe/dpc = -(α / pe) * (pc / pe)^(-α - 1)

    This is the derivative of the *unclamped* inverse curve. In the saturated
    region (pc <= pe, where `compute_brooks_corey_saturation` returns 1) callers
    must treat the derivative as zero themselves.

    Strictly negative on (0, inf). -inf at pc = 0.

    :param capillary_pressure: Capillary pressure `pc` >= 0 (Pa), scalar or array.
    :param entry_pressure: Entry pressure `pe` (Pa).
    :param pore_size_distribution_index: Pore size distribution index `α`.
    :return: dSwe/dpc (1/Pa), scalar or array matching the input.
    :raises PreconditionViolation: If `pc` is negative or a parameter is not positive.
    """
    validate_brooks_corey_parameters(entry_pressure, pore_size_distribution_index)
    pc = as_array(capillary_pressure)
    validate_capillary_pressure(pc)
    return as_precision(
        _brooks_corey_dsw_dpc(
            pc, as_array(entry_pressure), as_array(pore_size_distribution_index)
        )
    )
