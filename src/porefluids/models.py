"""Parameter records of the capillary pressure / relative permeability laws."""

import math
import typing

import attrs

from porefluids.errors import PreconditionViolation


__all__ = ["BrooksCoreyParams", "ResidualSaturations", "AbsoluteSaturationParams"]


def _strictly_positive(instance: typing.Any, attribute: attrs.Attribute, value: float) -> None:
    if not math.isfinite(value) or value <= 0.0:
        raise PreconditionViolation(
            f"`{attribute.name}` must be a finite, strictly positive number. Got {value!r}"
        )


def _saturation(instance: typing.Any, attribute: attrs.Attribute, value: float) -> None:
    if not (0.0 <= value < 1.0):
        raise PreconditionViolation(
            f"`{attribute.name}` must lie in [0, 1). Got {value!r}"
        )


@attrs.frozen(slots=True)
class BrooksCoreyParams:
    """
    Parameters of the Brooks-Corey capillary pressure / relative permeability law.

    One record is held per material region. The record is immutable, so it can be
    shared between solver threads.
    """

    entry_pressure: float = attrs.field(converter=float, validator=_strictly_positive)
    """Entry (displacement) pressure `pe` in Pa."""
    pore_size_distribution_index: float = attrs.field(
        converter=float, validator=_strictly_positive
    )
    """Pore size distribution index `α` (often written λ), dimensionless."""

    @property
    def pe(self) -> float:
        """Entry pressure in Pa."""
        return self.entry_pressure

    @property
    def alpha(self) -> float:
        """Pore size distribution index."""
        return self.pore_size_distribution_index


@attrs.frozen(slots=True)
class ResidualSaturations:
    """
    Residual saturations used to convert absolute to effective saturations.
    """

    wetting: float = attrs.field(default=0.0, converter=float, validator=_saturation)
    """Residual wetting phase saturation `Swr`."""
    non_wetting: float = attrs.field(default=0.0, converter=float, validator=_saturation)
    """Residual non-wetting phase saturation `Snr`."""

    def __attrs_post_init__(self) -> None:
        if self.wetting + self.non_wetting >= 1.0:
            raise PreconditionViolation(
                "Sum of residual saturations must be less than 1. "
                f"Got Swr={self.wetting}, Snr={self.non_wetting}"
            )

    @property
    def mobile_range(self) -> float:
        """Width of the mobile saturation range, `1 - Swr - Snr`."""
        return 1.0 - self.wetting - self.non_wetting


@attrs.frozen(slots=True)
class AbsoluteSaturationParams:
    """Brooks-Corey parameters together with the residual saturations of a region."""

    brooks_corey: BrooksCoreyParams
    residual_saturations: ResidualSaturations = attrs.field(factory=ResidualSaturations)
