import enum
import typing

import attrs
import numpy as np
import numpy.typing as npt
from typing_extensions import TypeAlias

from porefluids.errors import ValidationError


__all__ = [
    "FloatOrArray",
    "Phase",
    "Component",
    "Range",
    "FluidState",
    "ComponentProvider",
    "BinaryCoefficientProvider",
]

T = typing.TypeVar("T")

FloatOrArray: TypeAlias = typing.Union[float, npt.NDArray[np.floating]]
"""A scalar or an array of floating point values."""

PhaseIndex: TypeAlias = typing.Union["Phase", int]
ComponentIndex: TypeAlias = typing.Union["Component", int]


class Phase(enum.IntEnum):
    """
    Fluid phases of the two-phase system.

    The wetting phase is the liquid and the non-wetting phase is the gas,
    so `Phase.WETTING is Phase.LIQUID` and `Phase.NON_WETTING is Phase.GAS`.
    """

    LIQUID = 0
    GAS = 1
    WETTING = 0
    NON_WETTING = 1


class Component(enum.IntEnum):
    """Chemical components of the two-component system."""

    H2O = 0
    N2 = 1


@attrs.frozen(slots=True)
class Range:
    """
    Class representing minimum and maximum values.
    """

    min: float
    """Minimum value."""
    max: float
    """Maximum value."""

    def __attrs_post_init__(self) -> None:
        if self.min > self.max:
            raise ValidationError("Minimum value cannot be greater than maximum value.")

    def clip(self, value: T) -> T:
        """
        Clips the given value between the minimum and maximum values.

        :param value: The value to be clipped.
        :return: The clipped value.
        """
        from porefluids.utils import clip

        return clip(value, self.min, self.max)

    def __contains__(self, value: float) -> bool:
        return self.min <= value <= self.max

    def __iter__(self) -> typing.Iterator[float]:
        yield self.min
        yield self.max


@typing.runtime_checkable
class FluidState(typing.Protocol):
    """
    Protocol for the thermodynamic state a fluid system reads from.

    The fluid system only ever writes partial pressures to a state.
    """

    def mole_frac(self, phase_idx: PhaseIndex, comp_idx: ComponentIndex) -> float:
        """Mole fraction of a component in a phase, in [0, 1]."""
        ...

    def mass_frac(self, phase_idx: PhaseIndex, comp_idx: ComponentIndex) -> float:
        """Mass fraction of a component in a phase, in [0, 1]."""
        ...

    def partial_pressure(self, comp_idx: ComponentIndex) -> float:
        """Partial pressure of a component in the gas phase (Pa)."""
        ...

    def set_partial_pressure(self, comp_idx: ComponentIndex, value: float) -> None:
        """Set the partial pressure of a component in the gas phase (Pa)."""
        ...


@typing.runtime_checkable
class ComponentProvider(typing.Protocol):
    """
    Protocol for the pure-substance properties of a chemical component.

    Temperatures are in K, pressures in Pa and densities in kg/m³.
    """

    @property
    def name(self) -> str: ...

    @property
    def molar_mass(self) -> float: ...

    def liquid_density(self, temperature: float, pressure: float) -> float: ...

    def liquid_viscosity(self, temperature: float, pressure: float) -> float: ...

    def liquid_enthalpy(self, temperature: float, pressure: float) -> float: ...

    def liquid_pressure(self, temperature: float, density: float) -> float: ...

    def gas_density(self, temperature: float, pressure: float) -> float: ...

    def gas_viscosity(self, temperature: float, pressure: float) -> float: ...

    def gas_enthalpy(self, temperature: float, pressure: float) -> float: ...

    def gas_pressure(self, temperature: float, density: float) -> float: ...

    def vapor_pressure(self, temperature: float) -> float: ...


@typing.runtime_checkable
class BinaryCoefficientProvider(typing.Protocol):
    """
    Protocol for the binary coefficients of a solvent/solute pair.
    """

    def henry(self, temperature: float) -> float:
        """Henry coefficient of the solute in the solvent (Pa)."""
        ...

    def liquid_diff_coeff(self, temperature: float, pressure: float) -> float:
        """Binary diffusion coefficient in the liquid phase (m²/s)."""
        ...

    def gas_diff_coeff(self, temperature: float, pressure: float) -> float:
        """Binary diffusion coefficient in the gas phase (m²/s)."""
        ...
