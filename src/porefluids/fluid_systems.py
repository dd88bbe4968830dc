"""Fluid system for two-phase flow of water and nitrogen."""

import logging
import typing

import attrs

from porefluids.binary_coefficients import H2O_N2
from porefluids.components.n2 import N2
from porefluids.components.simple_h2o import SimpleH2O
from porefluids.config import Config
from porefluids.constants import c
from porefluids.errors import DomainError
from porefluids.ideal_gas import IdealGas
from porefluids.types import (
    BinaryCoefficientProvider,
    Component,
    ComponentIndex,
    ComponentProvider,
    FluidState,
    Phase,
    PhaseIndex,
)
from porefluids.utils import as_precision, check_index

logger = logging.getLogger(__name__)


__all__ = ["H2ON2FluidSystem"]


def _check_provider(instance: typing.Any, attribute: attrs.Attribute, value: typing.Any) -> None:
    if not isinstance(value, ComponentProvider):
        raise TypeError(
            f"'{attribute.name}' must provide the component properties. Got {type(value).__name__}"
        )


@attrs.frozen
class H2ON2FluidSystem:
    """
    Two-phase fluid system with water (H2O) and molecular nitrogen (N2) as components.

    The liquid phase is the wetting phase and the gas phase is the non-wetting phase.
    The liquid is treated as pure water, the gas as an ideal mixture of ideal gases.

    The fluid system only dispatches property queries to its component and binary
    coefficient providers. It holds no state besides the providers.

    Example:
    ```python
    fluid_system = H2ON2FluidSystem()
    fluid_system.init()

    state = CompositionalFluidState.from_fluid_system(
        fluid_system, mole_fractions=[[1.0, 0.0], [0.02, 0.98]]
    )
    rho_g = fluid_system.phase_density(Phase.GAS, 300.0, 1e5, state)
    ```
    """

    h2o: ComponentProvider = attrs.field(factory=SimpleH2O, validator=_check_provider)
    """Property provider of water."""
    n2: ComponentProvider = attrs.field(factory=N2, validator=_check_provider)
    """Property provider of nitrogen."""
    binary: BinaryCoefficientProvider = attrs.field(factory=H2O_N2)
    """Binary coefficients of water and nitrogen."""

    num_phases: typing.ClassVar[int] = 2
    num_components: typing.ClassVar[int] = 2

    liquid_phase_idx: typing.ClassVar[Phase] = Phase.LIQUID
    gas_phase_idx: typing.ClassVar[Phase] = Phase.GAS
    wetting_phase_idx: typing.ClassVar[Phase] = Phase.WETTING
    non_wetting_phase_idx: typing.ClassVar[Phase] = Phase.NON_WETTING

    h2o_idx: typing.ClassVar[Component] = Component.H2O
    n2_idx: typing.ClassVar[Component] = Component.N2

    def init(self, config: typing.Optional[Config] = None) -> None:
        """
        Initialize the component providers, e.g. build the tables of tabulated providers.

        Must be called before any property query if a provider needs it. Providers
        initialize only once, later calls are no-ops.

        :param config: Initialization parameters passed on to the providers.
        """
        config = config or Config()
        for provider in (self.h2o, self.n2):
            initializer = getattr(provider, "init", None)
            if initializer is None:
                continue
            logger.debug(f"Initializing component provider {provider!r}")
            initializer(config)

    @classmethod
    def _phase(cls, phase_idx: PhaseIndex) -> Phase:
        return Phase(check_index(phase_idx, cls.num_phases, "phase"))

    @classmethod
    def _component(cls, comp_idx: ComponentIndex) -> Component:
        return Component(check_index(comp_idx, cls.num_components, "component"))

    def _provider(self, comp_idx: ComponentIndex) -> ComponentProvider:
        if self._component(comp_idx) == Component.H2O:
            return self.h2o
        return self.n2

    @classmethod
    def phase_name(cls, phase_idx: PhaseIndex) -> str:
        """Human readable name of a phase."""
        return "liquid" if cls._phase(phase_idx) == Phase.LIQUID else "gas"

    def component_name(self, comp_idx: ComponentIndex) -> str:
        """Human readable name of a component."""
        return self._provider(comp_idx).name

    def molar_mass(self, comp_idx: ComponentIndex) -> float:
        """Molar mass of a component (kg/mol)."""
        return self._provider(comp_idx).molar_mass

    def mean_molar_mass(self, phase_idx: PhaseIndex, fluid_state: FluidState) -> float:
        """
        Mole-fraction weighted molar mass of a phase (kg/mol).

            M̄ = Σ_k x_k M_k
        """
        phase = self._phase(phase_idx)
        return sum(
            fluid_state.mole_frac(phase, comp) * self.molar_mass(comp)
            for comp in Component
        )

    def compute_partial_pressures(
        self, temperature: float, gas_pressure: float, fluid_state: FluidState
    ) -> None:
        """
        Set the partial pressures of all components in the gas phase of `fluid_state`.

        Dalton's law for a mixture of ideal gases, `p_k = x_k p_g`.

        :param temperature: Temperature (K)
        :param gas_pressure: Pressure of the gas phase (Pa)
        :param fluid_state: State to read gas mole fractions from and write partial pressures to.
        """
        for comp in Component:
            fluid_state.set_partial_pressure(
                comp, gas_pressure * fluid_state.mole_frac(Phase.GAS, comp)
            )

    def phase_density(
        self,
        phase_idx: PhaseIndex,
        temperature: float,
        pressure: float,
        fluid_state: FluidState,
    ) -> float:
        """
        Density of a fluid phase (kg/m³).

        The liquid is pure water, the gas an ideal gas of the phase's mean molar mass.

        :param phase_idx: Phase index
        :param temperature: Temperature (K)
        :param pressure: Phase pressure (Pa)
        :param fluid_state: Fluid state holding the phase composition
        :return: Density (kg/m³)
        """
        if self._phase(phase_idx) == Phase.LIQUID:
            return self.h2o.liquid_density(temperature, pressure)

        return IdealGas.density(
            self.mean_molar_mass(Phase.GAS, fluid_state), temperature, pressure
        )

    def phase_viscosity(
        self,
        phase_idx: PhaseIndex,
        temperature: float,
        pressure: float,
        fluid_state: FluidState,
    ) -> float:
        """
        Dynamic viscosity of a fluid phase (Pa·s).

        Liquid is pure water and gas is pure nitrogen. Trace components are ignored.
        """
        if self._phase(phase_idx) == Phase.LIQUID:
            return self.h2o.liquid_viscosity(temperature, pressure)
        return self.n2.gas_viscosity(temperature, pressure)

    def degas_pressure(
        self, comp_idx: ComponentIndex, temperature: float, pressure: float
    ) -> float:
        """
        Partial pressure a component exerts per unit of its liquid mole fraction
        at infinite dilution (Pa).

        Raoult's law for water, the solvent, and Henry's law for nitrogen, the solute.

        :param comp_idx: Component index
        :param temperature: Temperature (K)
        :param pressure: Phase pressure (Pa)
        :return: Derivative of the gas partial pressure w.r.t. the liquid mole fraction (Pa)
        """
        if self._component(comp_idx) == Component.H2O:
            return self.h2o.vapor_pressure(temperature)
        return self.binary.henry(temperature)

    def component_density(
        self,
        phase_idx: PhaseIndex,
        comp_idx: ComponentIndex,
        temperature: float,
        pressure: float,
    ) -> float:
        """Density of a pure component in a given phase (kg/m³)."""
        phase = self._phase(phase_idx)
        provider = self._provider(comp_idx)
        if phase == Phase.LIQUID:
            return provider.liquid_density(temperature, pressure)
        return provider.gas_density(temperature, pressure)

    def component_pressure(
        self,
        phase_idx: PhaseIndex,
        comp_idx: ComponentIndex,
        temperature: float,
        density: float,
    ) -> float:
        """Pressure of a pure component in a given phase at given density (Pa)."""
        phase = self._phase(phase_idx)
        provider = self._provider(comp_idx)
        if phase == Phase.LIQUID:
            return provider.liquid_pressure(temperature, density)
        return provider.gas_pressure(temperature, density)

    def diff_coeff(
        self,
        phase_idx: PhaseIndex,
        comp_i_idx: ComponentIndex,
        comp_j_idx: ComponentIndex,
        temperature: float,
        pressure: float,
        fluid_state: FluidState,
    ) -> float:
        """
        Binary diffusion coefficient of two components in a phase (m²/s).

        Symmetric in the component indices. Only the water/nitrogen pair is defined.

        :raises DomainError: For identical component indices or an undefined pair.
        """
        phase = self._phase(phase_idx)
        i, j = sorted((self._component(comp_i_idx), self._component(comp_j_idx)))
        if (i, j) != (Component.H2O, Component.N2):
            raise DomainError(
                f"Binary diffusion coefficient of components ({i.name}, {j.name}) is undefined"
            )

        if phase == Phase.LIQUID:
            return self.binary.liquid_diff_coeff(temperature, pressure)
        return self.binary.gas_diff_coeff(temperature, pressure)

    def phase_enthalpy(
        self,
        phase_idx: PhaseIndex,
        temperature: float,
        pressure: float,
        fluid_state: FluidState,
    ) -> float:
        """
        Specific enthalpy of a fluid phase (J/kg).

        The liquid phase uses the enthalpy of pure water. The gas phase sums the
        component enthalpies at their partial pressures, weighted by mass fraction,
        so partial pressures must be set beforehand, e.g. with `compute_partial_pressures`.
        """
        if self._phase(phase_idx) == Phase.LIQUID:
            return self.h2o.liquid_enthalpy(temperature, pressure)

        enthalpy = 0.0
        for comp in Component:
            enthalpy += fluid_state.mass_frac(Phase.GAS, comp) * self._provider(
                comp
            ).gas_enthalpy(temperature, fluid_state.partial_pressure(comp))
        return as_precision(enthalpy)

    def phase_internal_energy(
        self,
        phase_idx: PhaseIndex,
        temperature: float,
        pressure: float,
        fluid_state: FluidState,
    ) -> float:
        """
        Specific internal energy of a fluid phase (J/kg).

            u = h - p / ρ

        For the ideal gas phase `p / ρ = R T / M̄`, with `M̄` the mean molar mass.
        """
        phase = self._phase(phase_idx)
        enthalpy = self.phase_enthalpy(phase, temperature, pressure, fluid_state)
        if phase == Phase.LIQUID:
            density = self.phase_density(phase, temperature, pressure, fluid_state)
            return as_precision(enthalpy - pressure / density)

        mean_molar_mass = self.mean_molar_mass(Phase.GAS, fluid_state)
        return as_precision(
            enthalpy - c.UNIVERSAL_GAS_CONSTANT * temperature / mean_molar_mass
        )
