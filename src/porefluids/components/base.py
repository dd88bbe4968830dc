import typing

from porefluids.errors import UnsupportedPropertyError


__all__ = ["BaseComponent"]


class BaseComponent:
    """
    Base class for the pure-substance property providers of chemical components.

    Every query raises `UnsupportedPropertyError` unless a subclass provides it.
    Temperatures are in K, pressures in Pa, densities in kg/m³, viscosities
    in Pa·s and specific enthalpies in J/kg.
    """

    def init(self, *args: typing.Any, **kwargs: typing.Any) -> None:
        """Initialize the provider. No-op for closed-form providers."""
        return None

    @property
    def name(self) -> str:
        """Human readable name of the component."""
        raise self._unsupported("name")

    @property
    def molar_mass(self) -> float:
        """Molar mass of the component (kg/mol)."""
        raise self._unsupported("molar_mass")

    def vapor_pressure(self, temperature: float) -> float:
        """Vapor pressure of the pure component (Pa)."""
        raise self._unsupported("vapor_pressure")

    def liquid_density(self, temperature: float, pressure: float) -> float:
        """Density of the liquid (kg/m³)."""
        raise self._unsupported("liquid_density")

    def liquid_viscosity(self, temperature: float, pressure: float) -> float:
        """Dynamic viscosity of the liquid (Pa·s)."""
        raise self._unsupported("liquid_viscosity")

    def liquid_enthalpy(self, temperature: float, pressure: float) -> float:
        """Specific enthalpy of the liquid (J/kg)."""
        raise self._unsupported("liquid_enthalpy")

    def liquid_pressure(self, temperature: float, density: float) -> float:
        """Pressure of the liquid at given density (Pa)."""
        raise self._unsupported("liquid_pressure")

    def gas_density(self, temperature: float, pressure: float) -> float:
        """Density of the gas (kg/m³)."""
        raise self._unsupported("gas_density")

    def gas_viscosity(self, temperature: float, pressure: float) -> float:
        """Dynamic viscosity of the gas (Pa·s)."""
        raise self._unsupported("gas_viscosity")

    def gas_enthalpy(self, temperature: float, pressure: float) -> float:
        """Specific enthalpy of the gas (J/kg)."""
        raise self._unsupported("gas_enthalpy")

    def gas_pressure(self, temperature: float, density: float) -> float:
        """Pressure of the gas at given density (Pa)."""
        raise self._unsupported("gas_pressure")

    def _unsupported(self, prop: str) -> UnsupportedPropertyError:
        return UnsupportedPropertyError(
            f"Property '{prop}' is not available for component provider {type(self).__name__}"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
