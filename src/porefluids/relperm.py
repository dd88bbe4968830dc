"""Brooks-Corey relative permeabilities of the wetting and non-wetting phases."""

import numba

from porefluids.capillary_pressures import (
    validate_brooks_corey_parameters,
    validate_saturation,
)
from porefluids.types import FloatOrArray
from porefluids.utils import as_array, as_precision


__all__ = [
    "compute_brooks_corey_wetting_relative_permeability",
    "compute_brooks_corey_non_wetting_relative_permeability",
]


@numba.vectorize(cache=True)
def _brooks_corey_krw(sw_mob, alpha):
    return sw_mob ** ((2.0 + 3.0 * alpha) / alpha)


@numba.vectorize(cache=True)
def _brooks_corey_krn(sw_mob, alpha):
    exponent = (2.0 + alpha) / alpha
    tmp = 1.0 - sw_mob
    return tmp * tmp * (1.0 - sw_mob**exponent)


def compute_brooks_corey_wetting_relative_permeability(
    mobile_wetting_saturation: FloatOrArray,
    pore_size_distribution_index: float,
) -> FloatOrArray:
    """
    Computes the wetting phase relative permeability implied by the Brooks-Corey parameterization.

        krw = Sw_mob^((2 + 3α) / α)

    Monotone non-decreasing with krw(0) = 0 and krw(1) = 1.

    :param mobile_wetting_saturation: Mobile (effective) wetting phase saturation in [0, 1].
    :param pore_size_distribution_index: Pore size distribution index `α`.
    :return: Wetting phase relative permeability, scalar or array matching the input.
    :raises PreconditionViolation: If the saturation is outside [0, 1] or `α` is not positive.
    """
    # The entry pressure does not enter the relative permeabilities
    validate_brooks_corey_parameters(1.0, pore_size_distribution_index)
    sw_mob = as_array(mobile_wetting_saturation)
    validate_saturation(sw_mob, name="mobile_wetting_saturation")
    return as_precision(
        _brooks_corey_krw(sw_mob, as_array(pore_size_distribution_index))
    )


def compute_brooks_corey_non_wetting_relative_permeability(
    mobile_wetting_saturation: FloatOrArray,
    pore_size_distribution_index: float,
) -> FloatOrArray:
    """
    Computes the non-wetting phase relative permeability implied by the Brooks-Corey parameterization.

        krn = (1 - Sw_mob)^2 * (1 - Sw_mob^((2 + α) / α))

    Monotone non-increasing with krn(0) = 1 and krn(1) = 0.

    :param mobile_wetting_saturation: Mobile (effective) wetting phase saturation in [0, 1].
    :param pore_size_distribution_index: Pore size distribution index `α`.
    :return: Non-wetting phase relative permeability, scalar or array matching the input.
    :raises PreconditionViolation: If the saturation is outside [0, 1] or `α` is not positive.
    """
    validate_brooks_corey_parameters(1.0, pore_size_distribution_index)
    sw_mob = as_array(mobile_wetting_saturation)
    validate_saturation(sw_mob, name="mobile_wetting_saturation")
    return as_precision(
        _brooks_corey_krn(sw_mob, as_array(pore_size_distribution_index))
    )
