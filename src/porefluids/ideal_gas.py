"""Relations for an ideal gas."""

from porefluids.constants import c
from porefluids.types import FloatOrArray
from porefluids.utils import as_precision


__all__ = ["IdealGas"]


class IdealGas:
    """
    Closed-form relations of the ideal gas law, `p = ρ R T / M`.

    `R` is the universal gas constant `c.UNIVERSAL_GAS_CONSTANT` in J/(mol·K),
    consistent with molar masses in kg/mol.
    """

    @staticmethod
    def density(
        avg_molar_mass: FloatOrArray, temperature: FloatOrArray, pressure: FloatOrArray
    ) -> FloatOrArray:
        """
        Mass density of an ideal gas.

            ρ = M * p / (R * T)

        :param avg_molar_mass: (Mean) molar mass of the gas (kg/mol).
        :param temperature: Temperature (K).
        :param pressure: Pressure (Pa).
        :return: Density (kg/m³).
        """
        return as_precision(
            avg_molar_mass * pressure / (c.UNIVERSAL_GAS_CONSTANT * temperature)
        )

    @staticmethod
    def pressure(
        avg_molar_mass: FloatOrArray, temperature: FloatOrArray, density: FloatOrArray
    ) -> FloatOrArray:
        """
        Pressure of an ideal gas of given density.

        :param avg_molar_mass: (Mean) molar mass of the gas (kg/mol).
        :param temperature: Temperature (K).
        :param density: Density (kg/m³).
        :return: Pressure (Pa).
        """
        return as_precision(
            density * c.UNIVERSAL_GAS_CONSTANT * temperature / avg_molar_mass
        )

    @staticmethod
    def molar_density(temperature: FloatOrArray, pressure: FloatOrArray) -> FloatOrArray:
        """
        Molar concentration of an ideal gas, `p / (R * T)` in mol/m³.
        """
        return as_precision(pressure / (c.UNIVERSAL_GAS_CONSTANT * temperature))
