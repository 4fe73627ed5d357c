"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from dexcore.dex.slippage import Limits, Prices
from tests.helpers.constants import REFERENCE_PRICES


@pytest.fixture
def reference_prices() -> Prices:
    """Reference prices for WETH, USDC and COW."""
    return Prices.new(REFERENCE_PRICES.items())


@pytest.fixture
def limits() -> Limits:
    """1% relative slippage, capped at 0.02 ETH."""
    return Limits(relative=Decimal("0.01"), absolute=2 * 10**16)
