"""Trade bounds and liquidity pool identity for a CoW Protocol solver."""

__version__ = "0.1.0"
