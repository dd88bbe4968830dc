import logging
import typing

from CoolProp.CoolProp import PropsSI  # type: ignore[import]

from porefluids.components.base import BaseComponent
from porefluids.constants import c
from porefluids.errors import ComputationError


logger = logging.getLogger(__name__)

__all__ = ["H2O", "clip_pressure", "clip_temperature"]

COOLPROP_FLUID = "Water"


def clip_pressure(pressure: float, fluid: str = COOLPROP_FLUID) -> float:
    """
    Clips pressure to be within CoolProp's valid pressure range for the given fluid.

    :param pressure: Pressure (Pa)
    :param fluid: CoolProp fluid name
    :return: Clipped pressure (Pa)
    """
    p_min = PropsSI("P_MIN", fluid)
    p_max = PropsSI("P_MAX", fluid)
    return min(max(pressure, p_min), p_max)


def clip_temperature(temperature: float, fluid: str = COOLPROP_FLUID) -> float:
    """
    Clips temperature to be within CoolProp's valid temperature range for the given fluid.

    :param temperature: Temperature (K)
    :param fluid: CoolProp fluid name
    :return: Clipped temperature (K)
    """
    t_min = PropsSI("T_MIN", fluid)
    t_max = PropsSI("T_MAX", fluid)
    return min(max(temperature, t_min), t_max)


class H2O(BaseComponent):
    """
    Water as described by the IAPWS-95 formulation, evaluated by CoolProp.

    The phase is imposed on every query, so liquid properties are returned for
    (possibly metastable) liquid water even where vapor is the stable phase and
    vice versa.
    """

    def __init__(self, fluid: str = COOLPROP_FLUID) -> None:
        self.fluid = fluid

    @property
    def name(self) -> str:
        return "H2O"

    @property
    def molar_mass(self) -> float:
        return c.MOLAR_MASS_H2O

    def _props(self, output: str, *inputs: typing.Any) -> float:
        try:
            return float(PropsSI(output, *inputs, self.fluid))
        except ValueError as exc:
            logger.debug(f"CoolProp query {output}{inputs} failed for {self.fluid}: {exc}")
            raise ComputationError(
                f"CoolProp failed to evaluate '{output}' for {self.fluid} at {inputs}: {exc}"
            ) from exc

    def _state_props(self, output: str, temperature: float, pressure: float, phase: str) -> float:
        return self._props(
            output,
            "T",
            clip_temperature(temperature, self.fluid),
            f"P|{phase}",
            clip_pressure(pressure, self.fluid),
        )

    def vapor_pressure(self, temperature: float) -> float:
        return self._props("P", "T", temperature, "Q", 0)

    def liquid_density(self, temperature: float, pressure: float) -> float:
        return self._state_props("D", temperature, pressure, "liquid")

    def liquid_viscosity(self, temperature: float, pressure: float) -> float:
        return self._state_props("V", temperature, pressure, "liquid")

    def liquid_enthalpy(self, temperature: float, pressure: float) -> float:
        return self._state_props("H", temperature, pressure, "liquid")

    def liquid_pressure(self, temperature: float, density: float) -> float:
        return self._props("P", "T", temperature, "D", density)

    def gas_density(self, temperature: float, pressure: float) -> float:
        return self._state_props("D", temperature, pressure, "gas")

    def gas_viscosity(self, temperature: float, pressure: float) -> float:
        return self._state_props("V", temperature, pressure, "gas")

    def gas_enthalpy(self, temperature: float, pressure: float) -> float:
        return self._state_props("H", temperature, pressure, "gas")

    def gas_pressure(self, temperature: float, density: float) -> float:
        return self._props("P", "T", temperature, "D", density)

    def __repr__(self) -> str:
        return f"H2O(fluid={self.fluid!r})"
