"""Test helpers module for shared test utilities.

- constants: Token addresses, amounts and reference prices
- factories: Order and auction factory functions
"""

from tests.helpers.constants import (
    COW,
    DAI,
    GNO,
    GNO_RINKEBY,
    ONE_ETHER,
    REFERENCE_PRICES,
    USDC,
    WETH,
    WETH_RINKEBY,
)
from tests.helpers.factories import make_auction, make_order
from tests.helpers.fakes import FakeWeb3

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "GNO",
    "COW",
    "WETH_RINKEBY",
    "GNO_RINKEBY",
    "ONE_ETHER",
    "REFERENCE_PRICES",
    # Factories
    "make_auction",
    "make_order",
    # Fakes
    "FakeWeb3",
]
