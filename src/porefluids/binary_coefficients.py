"""Binary coefficients of pairs of chemical components."""

import math

import numba

from porefluids.constants import c
from porefluids.errors import ValidationError
from porefluids.iapws import compute_henry_coefficient


__all__ = ["H2O_N2", "compute_fuller_gas_diffusion_coefficient"]


@numba.njit(cache=True)
def _compute_fuller_gas_diffusion_coefficient(
    temperature: float,
    pressure: float,
    molar_mass_a: float,
    molar_mass_b: float,
    diffusion_volume_a: float,
    diffusion_volume_b: float,
) -> float:
    # Fuller works in g/mol, bar and cm²/s
    M_ab = 2.0 / (1.0 / (molar_mass_a * 1e3) + 1.0 / (molar_mass_b * 1e3))
    p_bar = pressure / 1e5
    sigma = diffusion_volume_a ** (1.0 / 3.0) + diffusion_volume_b ** (1.0 / 3.0)
    D_ab = 1.43e-3 * temperature**1.75 / (p_bar * math.sqrt(M_ab) * sigma * sigma)
    return D_ab * 1e-4


def compute_fuller_gas_diffusion_coefficient(
    temperature: float,
    pressure: float,
    molar_mass_a: float,
    molar_mass_b: float,
    diffusion_volume_a: float,
    diffusion_volume_b: float,
) -> float:
    """
    Computes the binary diffusion coefficient of two gases at low pressure
    using the method of Fuller, Schettler and Giddings.

        D_AB = 1.43e-3 T^1.75 / (p M_AB^0.5 (Σv_A^(1/3) + Σv_B^(1/3))²)

    with `D_AB` in cm²/s, `p` in bar and `M_AB = 2 / (1/M_A + 1/M_B)` in g/mol.

    References:
    B. E. Poling, J. M. Prausnitz, J. P. O'Connell: "The Properties of
    Gases and Liquids", 5th edition, McGraw-Hill, 2001, p. 11.10

    :param temperature: Temperature (K)
    :param pressure: Pressure (Pa)
    :param molar_mass_a: Molar mass of gas A (kg/mol)
    :param molar_mass_b: Molar mass of gas B (kg/mol)
    :param diffusion_volume_a: Atomic diffusion volume sum of gas A
    :param diffusion_volume_b: Atomic diffusion volume sum of gas B
    :return: Binary diffusion coefficient (m²/s)
    """
    if temperature <= 0.0:
        raise ValidationError(f"Temperature must be positive. Got {temperature} K")
    if pressure <= 0.0:
        raise ValidationError(f"Pressure must be positive. Got {pressure} Pa")
    return _compute_fuller_gas_diffusion_coefficient(
        float(temperature),
        float(pressure),
        molar_mass_a,
        molar_mass_b,
        diffusion_volume_a,
        diffusion_volume_b,
    )


class H2O_N2:
    """
    Binary coefficients for water and molecular nitrogen.
    """

    # Gas specific coefficients of the IAPWS Henry constant guideline
    HENRY_E = 2388.8777
    HENRY_F = -14.9593
    HENRY_G = 42.0179
    HENRY_H = -29.4396

    @classmethod
    def henry(cls, temperature: float) -> float:
        """
        Henry coefficient (Pa) of molecular nitrogen dissolved in liquid water.

        References:
        R. Fernández-Prini, J. L. Alvarez, A. H. Harvey: "Henry's Constants and
        Vapor-Liquid Distribution Constants for Gaseous Solutes in H2O and D2O at
        High Temperatures", Journal of Physical and Chemical Reference Data, 32,
        903-916, 2003
        """
        return compute_henry_coefficient(
            temperature, cls.HENRY_E, cls.HENRY_F, cls.HENRY_G, cls.HENRY_H
        )

    @staticmethod
    def gas_diff_coeff(temperature: float, pressure: float) -> float:
        """Binary diffusion coefficient (m²/s) of water vapor and nitrogen in the gas phase."""
        return compute_fuller_gas_diffusion_coefficient(
            temperature,
            pressure,
            c.MOLAR_MASS_H2O,
            c.MOLAR_MASS_N2,
            c.FULLER_DIFFUSION_VOLUME_H2O,
            c.FULLER_DIFFUSION_VOLUME_N2,
        )

    @staticmethod
    def liquid_diff_coeff(temperature: float, pressure: float) -> float:
        """
        Diffusion coefficient (m²/s) of molecular nitrogen in liquid water.

        Constant, a rough estimate for all temperatures and pressures.
        """
        return c.N2_IN_H2O_LIQUID_DIFFUSION_COEFFICIENT

    def __repr__(self) -> str:
        return "H2O_N2()"
