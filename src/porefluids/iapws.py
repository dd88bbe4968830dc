"""IAPWS correlations for water and for gases dissolved in water."""

import math
import warnings

import numba

from porefluids.constants import c
from porefluids.errors import ValidationError


__all__ = ["compute_water_vapor_pressure", "compute_henry_coefficient"]


_REGION4_COEFFICIENTS = (
    0.11670521452767e4,
    -0.72421316703206e6,
    -0.17073846940092e2,
    0.12020824702470e5,
    -0.32325550322333e7,
    0.14915108613530e2,
    -0.48232657361591e4,
    0.40511340542057e6,
    -0.23855557567849,
    0.65017534844798e3,
)

_HENRY_C = (1.99274064, 1.09965342, -0.510839303, -1.75493479, -45.5170352, -6.7469445e5)
_HENRY_D = (1.0 / 3.0, 2.0 / 3.0, 5.0 / 3.0, 16.0 / 3.0, 43.0 / 3.0, 110.0 / 3.0)
_HENRY_Q = -0.023767


@numba.njit(cache=True)
def _compute_water_vapor_pressure(temperature: float, n: tuple) -> float:
    sigma = temperature + n[8] / (temperature - n[9])
    A = (sigma + n[0]) * sigma + n[1]
    B = (n[2] * sigma + n[3]) * sigma + n[4]
    C = (n[5] * sigma + n[6]) * sigma + n[7]

    tmp = 2.0 * C / (math.sqrt(B * B - 4.0 * A * C) - B)
    tmp *= tmp
    tmp *= tmp
    return 1e6 * tmp


def compute_water_vapor_pressure(temperature: float) -> float:
    """
    Computes the vapor (saturation) pressure of water using the IAPWS-IF97 region 4 equation.

    Valid between the triple point (273.16 K) and the critical point (647.096 K).
    Outside this range a warning is issued and the equation is evaluated anyway.

    References:
    IAPWS: "Revised Release on the IAPWS Industrial Formulation 1997 for the
    Thermodynamic Properties of Water and Steam", http://www.iapws.org/relguide/IF97-Rev.pdf

    :param temperature: Temperature (K)
    :return: Vapor pressure (Pa)
    """
    if temperature <= 0.0:
        raise ValidationError(f"Temperature must be positive. Got {temperature} K")

    if temperature < c.H2O_TRIPLE_TEMPERATURE or temperature > c.H2O_CRITICAL_TEMPERATURE:
        warnings.warn(
            f"Temperature {temperature:.4f} K is outside the validity range of the "
            f"IAPWS-IF97 vapor pressure equation [{c.H2O_TRIPLE_TEMPERATURE}, {c.H2O_CRITICAL_TEMPERATURE}] K."
        )
    return _compute_water_vapor_pressure(float(temperature), _REGION4_COEFFICIENTS)


@numba.njit(cache=True)
def _compute_henry_exponent(
    temperature: float,
    critical_temperature: float,
    zero_celsius: float,
    E: float,
    F: float,
    G: float,
    H: float,
    c_coeffs: tuple,
    d_coeffs: tuple,
    q: float,
) -> float:
    tau = 1.0 - temperature / critical_temperature
    f = 0.0
    for i in range(6):
        f += c_coeffs[i] * tau ** d_coeffs[i]

    return (
        q * F
        + E / temperature * f
        + (F + G * tau ** (2.0 / 3.0) + H * tau) * math.exp((zero_celsius - temperature) / 100.0)
    )


def compute_henry_coefficient(
    temperature: float, E: float, F: float, G: float, H: float
) -> float:
    """
    Computes the Henry coefficient of a gas dissolved in liquid water.

    Uses the IAPWS guideline formulation (Fernández-Prini et al., 2003):

        ln(H / p_sat) = q F + E/T * f(τ) + (F + G τ^(2/3) + H τ) * exp((273.15 - T) / 100)

    where τ = 1 - T/Tc and f(τ) = Σ c_i τ^(d_i).

    References:
    IAPWS: "Guideline on the Henry's Constant and Vapor-Liquid Distribution
    Constant for Gases in H2O and D2O at High Temperatures",
    http://www.iapws.org/relguide/HenGuide.pdf

    :param temperature: Temperature (K), below the critical temperature of water.
    :param E: Gas specific coefficient E.
    :param F: Gas specific coefficient F.
    :param G: Gas specific coefficient G.
    :param H: Gas specific coefficient H.
    :return: Henry coefficient (Pa)
    """
    if temperature >= c.H2O_CRITICAL_TEMPERATURE:
        raise ValidationError(
            f"Henry coefficient is undefined above the critical temperature of water. Got {temperature} K"
        )
    exponent = _compute_henry_exponent(
        float(temperature),
        c.H2O_CRITICAL_TEMPERATURE,
        c.ZERO_CELSIUS,
        E,
        F,
        G,
        H,
        _HENRY_C,
        _HENRY_D,
        _HENRY_Q,
    )
    return math.exp(exponent) * compute_water_vapor_pressure(temperature)
