"""Slippage configuration for the solver."""

from __future__ import annotations

from decimal import Decimal

import structlog
from pydantic import BaseModel, Field

from dexcore.dex.slippage import Limits
from dexcore.math.decimal_utils import decimal_to_wei

logger = structlog.get_logger()


class ConfigurationError(ValueError):
    """Invalid solver configuration. Raised at startup, never per trade."""

    pass


class SlippageConfig(BaseModel):
    """Slippage limits as configured for a solver.

    Attributes:
        relative_slippage: Fraction of the traded amount, in [0, 1] (default: 1%)
        absolute_slippage: Cap in ether (native currency), or None for no cap
    """

    relative_slippage: Decimal = Field(default=Decimal("0.01"), alias="relative-slippage")
    absolute_slippage: Decimal | None = Field(default=None, alias="absolute-slippage")

    model_config = {"populate_by_name": True, "frozen": True}

    def limits(self) -> Limits:
        """Build validated slippage limits.

        Raises:
            ConfigurationError: If the relative slippage is outside [0, 1] or the
                absolute slippage is not a non-negative whole amount of wei
        """
        absolute_wei: int | None = None
        if self.absolute_slippage is not None:
            absolute_wei = decimal_to_wei(self.absolute_slippage)
            if absolute_wei is None:
                raise ConfigurationError(
                    f"Invalid absolute slippage: {self.absolute_slippage} "
                    "(must be a non-negative ether amount with at most 18 decimals)"
                )

        limits = Limits.new(self.relative_slippage, absolute_wei)
        if limits is None:
            raise ConfigurationError(
                f"Invalid relative slippage: {self.relative_slippage} (must be within [0, 1])"
            )

        logger.debug(
            "slippage_limits_configured",
            relative=str(limits.relative),
            absolute_wei=limits.absolute,
        )
        return limits


# Default configuration instance
DEFAULT_SLIPPAGE_CONFIG = SlippageConfig()
