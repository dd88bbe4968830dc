import attrs

from porefluids.constants import Constants
from porefluids.types import Range


__all__ = ["Config"]


@attrs.frozen
class Config:
    """Fluid system initialization parameters."""

    constants: Constants = attrs.field(factory=Constants)
    """
    Physical constants and substance data active while the fluid system is initialized.

    Tabulated providers sample their wrapped provider under these constants.
    """
    temperature_range: Range = attrs.field(default=Range(min=273.15, max=623.15))
    """Temperature range (K) covered by property tables."""
    num_temperature_points: int = attrs.field(
        default=100,
        validator=attrs.validators.and_(
            attrs.validators.ge(4), attrs.validators.le(10_000)
        ),
    )
    """
    Number of temperature samples in property tables.

    At least 4 samples are needed by the cubic splines used for interpolation.
    """
    pressure_range: Range = attrs.field(default=Range(min=-10.0, max=20e6))
    """
    Pressure range (Pa) covered by property tables.

    Negative pressures are admissible for liquids under tension.
    """
    num_pressure_points: int = attrs.field(
        default=200,
        validator=attrs.validators.and_(
            attrs.validators.ge(4), attrs.validators.le(10_000)
        ),
    )
    """Number of pressure samples in property tables."""
    warn_on_extrapolation: bool = False
    """Whether tabulated providers warn when queried outside their table range."""
