import logging
import typing

import attrs
import numpy as np

from porefluids.errors import ValidationError
from porefluids.types import ComponentIndex, PhaseIndex
from porefluids.utils import check_index

logger = logging.getLogger(__name__)


__all__ = ["CompositionalFluidState"]

_FRACTION_SUM_TOLERANCE = 1e-6


def _as_float_array(value: typing.Any) -> np.ndarray:
    return np.array(value, dtype=np.float64)


def _check_fraction(value: float, name: str) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValidationError(f"{name} must be in [0, 1]. Got {value}")


@attrs.define(eq=False)
class CompositionalFluidState:
    """
    Thermodynamic state of a multi-phase, multi-component fluid.

    Holds the mole fractions of every component in every phase and the partial
    pressures of the components in the gas phase. Mass fractions are derived
    from the mole fractions and the component molar masses.
    """

    mole_fractions: np.ndarray = attrs.field(converter=_as_float_array)
    """Mole fractions, shape (num_phases, num_components)."""
    molar_masses: np.ndarray = attrs.field(converter=_as_float_array)
    """Molar masses of the components (kg/mol), shape (num_components,)."""
    partial_pressures: np.ndarray = attrs.field(
        default=None, converter=attrs.converters.optional(_as_float_array)
    )
    """Partial pressures of the components in the gas phase (Pa), shape (num_components,)."""

    def __attrs_post_init__(self) -> None:
        if self.mole_fractions.ndim != 2:
            raise ValidationError(
                f"Mole fractions must be a (num_phases, num_components) matrix. "
                f"Got shape {self.mole_fractions.shape}"
            )
        num_components = self.mole_fractions.shape[1]
        if self.molar_masses.shape != (num_components,):
            raise ValidationError(
                f"Expected {num_components} molar masses. Got shape {self.molar_masses.shape}"
            )
        if np.any(self.molar_masses <= 0.0):
            raise ValidationError("Molar masses must be positive.")
        if np.any((self.mole_fractions < 0.0) | (self.mole_fractions > 1.0)):
            raise ValidationError("Mole fractions must be in [0, 1].")

        if self.partial_pressures is None:
            self.partial_pressures = np.zeros(num_components)
        elif self.partial_pressures.shape != (num_components,):
            raise ValidationError(
                f"Expected {num_components} partial pressures. "
                f"Got shape {self.partial_pressures.shape}"
            )

        sums = self.mole_fractions.sum(axis=1)
        for phase_idx, total in enumerate(sums):
            if abs(total - 1.0) > _FRACTION_SUM_TOLERANCE:
                logger.warning(
                    f"Mole fractions of phase {phase_idx} sum to {total:.6f}, not 1"
                )

    @classmethod
    def from_fluid_system(
        cls, fluid_system: typing.Any, mole_fractions: typing.Any
    ) -> "CompositionalFluidState":
        """
        Create a state for the components of a fluid system.

        :param fluid_system: Fluid system providing `num_components` and `molar_mass(comp_idx)`.
        :param mole_fractions: Mole fractions, shape (num_phases, num_components).
        :return: A new `CompositionalFluidState`.
        """
        molar_masses = [
            fluid_system.molar_mass(comp_idx)
            for comp_idx in range(fluid_system.num_components)
        ]
        return cls(mole_fractions=mole_fractions, molar_masses=molar_masses)

    @property
    def num_phases(self) -> int:
        return self.mole_fractions.shape[0]

    @property
    def num_components(self) -> int:
        return self.mole_fractions.shape[1]

    def _phase(self, phase_idx: PhaseIndex) -> int:
        return check_index(phase_idx, self.num_phases, "phase")

    def _component(self, comp_idx: ComponentIndex) -> int:
        return check_index(comp_idx, self.num_components, "component")

    def mole_frac(self, phase_idx: PhaseIndex, comp_idx: ComponentIndex) -> float:
        return float(self.mole_fractions[self._phase(phase_idx), self._component(comp_idx)])

    def set_mole_frac(
        self, phase_idx: PhaseIndex, comp_idx: ComponentIndex, value: float
    ) -> None:
        _check_fraction(value, "Mole fraction")
        self.mole_fractions[self._phase(phase_idx), self._component(comp_idx)] = value

    def average_molar_mass(self, phase_idx: PhaseIndex) -> float:
        """Mole-fraction weighted molar mass of a phase (kg/mol)."""
        return float(self.mole_fractions[self._phase(phase_idx)] @ self.molar_masses)

    def mass_frac(self, phase_idx: PhaseIndex, comp_idx: ComponentIndex) -> float:
        """
        Mass fraction of a component in a phase.

            X_i = x_i M_i / Σ_j x_j M_j
        """
        phase = self._phase(phase_idx)
        comp = self._component(comp_idx)
        mean_molar_mass = self.mole_fractions[phase] @ self.molar_masses
        if mean_molar_mass == 0.0:
            return 0.0
        return float(
            self.mole_fractions[phase, comp] * self.molar_masses[comp] / mean_molar_mass
        )

    def partial_pressure(self, comp_idx: ComponentIndex) -> float:
        return float(self.partial_pressures[self._component(comp_idx)])

    def set_partial_pressure(self, comp_idx: ComponentIndex, value: float) -> None:
        self.partial_pressures[self._component(comp_idx)] = value
