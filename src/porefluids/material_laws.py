"""Material laws bundling the capillary pressure and relative permeability curves."""

import typing

import attrs
import numpy as np

from porefluids.capillary_pressures import (
    compute_brooks_corey_capillary_pressure,
    compute_brooks_corey_dpc_dsw,
    compute_brooks_corey_dsw_dpc,
    compute_brooks_corey_saturation,
)
from porefluids.errors import PreconditionViolation
from porefluids.models import AbsoluteSaturationParams, BrooksCoreyParams
from porefluids.relperm import (
    compute_brooks_corey_non_wetting_relative_permeability,
    compute_brooks_corey_wetting_relative_permeability,
)
from porefluids.types import FloatOrArray
from porefluids.utils import as_array, as_precision, clip


__all__ = ["BrooksCorey", "EffectiveToAbsoluteLaw"]


class BrooksCorey:
    """
    Brooks-Corey capillary pressure <-> saturation law.

    Bundles the "raw" curves as static functions of a `BrooksCoreyParams`
    record. All saturations are effective saturations; converting from absolute
    saturations is done by `EffectiveToAbsoluteLaw`.

    Example:
    ```python
    params = BrooksCoreyParams(entry_pressure=1.0e4, pore_size_distribution_index=2.0)
    pc = BrooksCorey.pc(params, 0.5)        # 14142.13...
    swe = BrooksCorey.sw(params, pc)        # 0.5
    ```
    """

    @staticmethod
    def pc(params: BrooksCoreyParams, swe: FloatOrArray) -> FloatOrArray:
        """Capillary pressure (Pa) at effective wetting saturation `swe`."""
        return compute_brooks_corey_capillary_pressure(
            swe, params.entry_pressure, params.pore_size_distribution_index
        )

    @staticmethod
    def sw(params: BrooksCoreyParams, pc: FloatOrArray) -> FloatOrArray:
        """Effective wetting saturation at capillary pressure `pc` (Pa)."""
        return compute_brooks_corey_saturation(
            pc, params.entry_pressure, params.pore_size_distribution_index
        )

    @staticmethod
    def dpc_dsw(params: BrooksCoreyParams, swe: FloatOrArray) -> FloatOrArray:
        """Derivative of the capillary pressure w.r.t. the effective wetting saturation."""
        return compute_brooks_corey_dpc_dsw(
            swe, params.entry_pressure, params.pore_size_distribution_index
        )

    @staticmethod
    def dsw_dpc(params: BrooksCoreyParams, pc: FloatOrArray) -> FloatOrArray:
        """Derivative of the (unclamped) effective wetting saturation w.r.t. the capillary pressure."""
        return compute_brooks_corey_dsw_dpc(
            pc, params.entry_pressure, params.pore_size_distribution_index
        )

    @staticmethod
    def krw(params: BrooksCoreyParams, sw_mob: FloatOrArray) -> FloatOrArray:
        """Wetting phase relative permeability at mobile wetting saturation `sw_mob`."""
        return compute_brooks_corey_wetting_relative_permeability(
            sw_mob, params.pore_size_distribution_index
        )

    @staticmethod
    def krn(params: BrooksCoreyParams, sw_mob: FloatOrArray) -> FloatOrArray:
        """Non-wetting phase relative permeability at mobile wetting saturation `sw_mob`."""
        return compute_brooks_corey_non_wetting_relative_permeability(
            sw_mob, params.pore_size_distribution_index
        )


@attrs.frozen
class EffectiveToAbsoluteLaw:
    """
    Wraps an effective-saturation law so that it works with absolute saturations.

        Swe = (Sw - Swr) / (1 - Swr - Snr)

    Derivatives are rescaled with the chain rule. An absolute saturation
    outside [Swr, 1 - Snr] violates the precondition of the law. Saturations
    returned by `sw` always lie in that range.
    """

    law: typing.Type[BrooksCorey] = BrooksCorey
    """The effective-saturation law to wrap."""

    @staticmethod
    def sw_to_swe(params: AbsoluteSaturationParams, sw: FloatOrArray) -> FloatOrArray:
        """Convert an absolute wetting saturation to an effective one."""
        residual = params.residual_saturations
        return as_precision((as_array(sw) - residual.wetting) / residual.mobile_range)

    @staticmethod
    def swe_to_sw(params: AbsoluteSaturationParams, swe: FloatOrArray) -> FloatOrArray:
        """Convert an effective wetting saturation to an absolute one."""
        residual = params.residual_saturations
        return as_precision(as_array(swe) * residual.mobile_range + residual.wetting)

    def pc(self, params: AbsoluteSaturationParams, sw: FloatOrArray) -> FloatOrArray:
        """Capillary pressure (Pa) at absolute wetting saturation `sw`."""
        return self.law.pc(params.brooks_corey, self._effective_saturation(params, sw))

    def sw(self, params: AbsoluteSaturationParams, pc: FloatOrArray) -> FloatOrArray:
        """Absolute wetting saturation at capillary pressure `pc` (Pa)."""
        residual = params.residual_saturations
        sw = self.swe_to_sw(params, self.law.sw(params.brooks_corey, pc))
        return as_precision(clip(sw, residual.wetting, 1.0 - residual.non_wetting))

    def dpc_dsw(self, params: AbsoluteSaturationParams, sw: FloatOrArray) -> FloatOrArray:
        """Derivative of the capillary pressure w.r.t. the absolute wetting saturation."""
        dpc_dswe = self.law.dpc_dsw(
            params.brooks_corey, self._effective_saturation(params, sw)
        )
        return as_precision(dpc_dswe / params.residual_saturations.mobile_range)

    def dsw_dpc(self, params: AbsoluteSaturationParams, pc: FloatOrArray) -> FloatOrArray:
        """Derivative of the absolute wetting saturation w.r.t. the capillary pressure."""
        dswe_dpc = self.law.dsw_dpc(params.brooks_corey, pc)
        return as_precision(dswe_dpc * params.residual_saturations.mobile_range)

    def krw(self, params: AbsoluteSaturationParams, sw: FloatOrArray) -> FloatOrArray:
        """Wetting phase relative permeability at absolute wetting saturation `sw`."""
        return self.law.krw(params.brooks_corey, self._effective_saturation(params, sw))

    def krn(self, params: AbsoluteSaturationParams, sw: FloatOrArray) -> FloatOrArray:
        """Non-wetting phase relative permeability at absolute wetting saturation `sw`."""
        return self.law.krn(params.brooks_corey, self._effective_saturation(params, sw))

    def _effective_saturation(
        self, params: AbsoluteSaturationParams, sw: FloatOrArray
    ) -> FloatOrArray:
        residual = params.residual_saturations
        sw = as_array(sw)
        invalid = ~((sw >= residual.wetting) & (sw <= 1.0 - residual.non_wetting))
        if np.any(invalid):
            raise PreconditionViolation(
                f"`sw` must lie in [{residual.wetting}, {1.0 - residual.non_wetting}]. "
                f"Got {np.atleast_1d(sw)[np.atleast_1d(invalid)]}"
            )
        # Rounding can push the end points of the mobile range just outside [0, 1]
        return as_precision(clip(self.sw_to_swe(params, sw), 0.0, 1.0))
