"""DEX swap helpers: slippage tolerance and its configuration."""

from dexcore.dex.config import DEFAULT_SLIPPAGE_CONFIG, ConfigurationError, SlippageConfig
from dexcore.dex.slippage import Limits, Prices, Slippage

__all__ = [
    "ConfigurationError",
    "DEFAULT_SLIPPAGE_CONFIG",
    "Limits",
    "Prices",
    "Slippage",
    "SlippageConfig",
]
