from porefluids.components.base import BaseComponent
from porefluids.constants import c
from porefluids.errors import UnsupportedPropertyError
from porefluids.iapws import compute_water_vapor_pressure
from porefluids.ideal_gas import IdealGas


__all__ = ["SimpleH2O"]


class SimpleH2O(BaseComponent):
    """
    A simplistic water component.

    Liquid water is incompressible with constant viscosity, water vapor is an
    ideal gas. Enthalpies use constant heat capacities with the liquid at 0°C
    as reference state. The vapor pressure follows IAPWS-IF97 region 4.
    """

    @property
    def name(self) -> str:
        return "H2O"

    @property
    def molar_mass(self) -> float:
        return c.MOLAR_MASS_H2O

    def vapor_pressure(self, temperature: float) -> float:
        return compute_water_vapor_pressure(temperature)

    def liquid_density(self, temperature: float, pressure: float) -> float:
        return c.H2O_LIQUID_DENSITY

    def liquid_viscosity(self, temperature: float, pressure: float) -> float:
        return c.H2O_LIQUID_VISCOSITY

    def liquid_enthalpy(self, temperature: float, pressure: float) -> float:
        return c.H2O_LIQUID_HEAT_CAPACITY * (temperature - c.ZERO_CELSIUS)

    def liquid_pressure(self, temperature: float, density: float) -> float:
        raise UnsupportedPropertyError(
            "Liquid pressure cannot be computed from the density of incompressible water"
        )

    def gas_density(self, temperature: float, pressure: float) -> float:
        return IdealGas.density(self.molar_mass, temperature, pressure)

    def gas_viscosity(self, temperature: float, pressure: float) -> float:
        return c.H2O_GAS_VISCOSITY

    def gas_enthalpy(self, temperature: float, pressure: float) -> float:
        """
        Specific enthalpy of water vapor (J/kg).

        Liquid enthalpy at the normal boiling point, plus the enthalpy of
        vaporization, plus sensible heat of the vapor.
        """
        boiling_temperature = c.H2O_NORMAL_BOILING_TEMPERATURE
        return (
            self.liquid_enthalpy(boiling_temperature, pressure)
            + c.H2O_VAPORIZATION_ENTHALPY
            + c.H2O_VAPOR_HEAT_CAPACITY * (temperature - boiling_temperature)
        )

    def gas_pressure(self, temperature: float, density: float) -> float:
        return IdealGas.pressure(self.molar_mass, temperature, density)
