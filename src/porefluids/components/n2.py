import math
import warnings

import numba

from porefluids.components.base import BaseComponent
from porefluids.constants import c
from porefluids.ideal_gas import IdealGas


__all__ = ["N2"]

# Isobaric molar heat capacity of the gas, cp = A + B T + C T^2 + D T^3 in J/(mol K)
_CP_COEFFICIENTS = (31.15, -0.01357, 2.680e-5, -1.168e-8)


@numba.njit(cache=True)
def _compute_n2_vapor_pressure(
    temperature: float, critical_temperature: float, critical_pressure: float
) -> float:
    sigma = 1.0 - temperature / critical_temperature
    exponent = (
        critical_temperature
        / temperature
        * (
            -6.12445284 * sigma
            + 1.26327220 * sigma**1.5
            - 0.765910082 * sigma**2.5
            - 1.77570564 * sigma**5.0
        )
    )
    return math.exp(exponent) * critical_pressure


@numba.njit(cache=True)
def _compute_chung_gas_viscosity(
    temperature: float,
    critical_temperature: float,
    critical_molar_volume: float,
    acentric_factor: float,
    molar_mass: float,
) -> float:
    # Non-polar molecule, so the dipole moment correction vanishes
    Fc = 1.0 - 0.2756 * acentric_factor
    t_star = 1.2593 * temperature / critical_temperature
    omega_v = (
        1.16145 * t_star**-0.14874
        + 0.52487 * math.exp(-0.77320 * t_star)
        + 2.16178 * math.exp(-2.43787 * t_star)
    )
    # μP
    mu = (
        40.785
        * Fc
        * math.sqrt(molar_mass * 1e3 * temperature)
        / (critical_molar_volume ** (2.0 / 3.0) * omega_v)
    )
    return mu * 1e-7


class N2(BaseComponent):
    """
    Properties of pure molecular nitrogen.

    The gas phase is treated as an ideal gas. Liquid nitrogen properties are not
    provided.
    """

    @property
    def name(self) -> str:
        return "N2"

    @property
    def molar_mass(self) -> float:
        return c.MOLAR_MASS_N2

    def vapor_pressure(self, temperature: float) -> float:
        """
        Vapor pressure of liquid nitrogen (Pa) between the triple and the critical point.

        References:
        R. Span et al.: "A Reference Equation of State for the Thermodynamic
        Properties of Nitrogen for Temperatures from 63.151 to 1000 K and
        Pressures to 2200 MPa", Journal of Physical and Chemical Reference Data,
        29, 1361-1433, 2000
        """
        if temperature < c.N2_TRIPLE_TEMPERATURE or temperature > c.N2_CRITICAL_TEMPERATURE:
            warnings.warn(
                f"Temperature {temperature:.4f} K is outside the vapor pressure range of nitrogen "
                f"[{c.N2_TRIPLE_TEMPERATURE}, {c.N2_CRITICAL_TEMPERATURE}] K."
            )
        return _compute_n2_vapor_pressure(
            float(temperature), c.N2_CRITICAL_TEMPERATURE, c.N2_CRITICAL_PRESSURE
        )

    def gas_density(self, temperature: float, pressure: float) -> float:
        return IdealGas.density(self.molar_mass, temperature, pressure)

    def gas_pressure(self, temperature: float, density: float) -> float:
        return IdealGas.pressure(self.molar_mass, temperature, density)

    def gas_enthalpy(self, temperature: float, pressure: float) -> float:
        """
        Specific enthalpy of gaseous nitrogen (J/kg), the integral of the
        polynomial heat capacity from 0 K (Reid, Prausnitz & Poling, 1987).
        """
        A, B, C, D = _CP_COEFFICIENTS
        T = temperature
        return T * (A + T * (B / 2.0 + T * (C / 3.0 + T * (D / 4.0)))) / self.molar_mass

    def gas_viscosity(self, temperature: float, pressure: float) -> float:
        """
        Dynamic viscosity of gaseous nitrogen (Pa·s) using the method of Chung et al.

        References:
        B. E. Poling, J. M. Prausnitz, J. P. O'Connell: "The Properties of
        Gases and Liquids", 5th edition, McGraw-Hill, 2001, p. 9.7
        """
        return _compute_chung_gas_viscosity(
            float(temperature),
            c.N2_CRITICAL_TEMPERATURE,
            c.N2_CRITICAL_MOLAR_VOLUME,
            c.N2_ACENTRIC_FACTOR,
            self.molar_mass,
        )
