"""Slippage tolerance computation for DEX swaps.

A swap is executed against on-chain liquidity, so the amount it actually
produces may differ from the quoted amount. The settlement carries a bound
(a minimum to receive or a maximum to pay) computed by applying a slippage
tolerance to the quoted amount.

The tolerance is bounded twice:
- relatively, as a fraction of the traded amount, and
- absolutely, as a value in native currency, so that large trades in a
  cheap token cannot absorb an unbounded value of slippage. The absolute
  cap only applies when the token has a reference price.

All arithmetic is exact: fractions are Decimals, amounts are integers and
absolute slippage amounts are rounded up.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

import structlog

from dexcore.math.decimal_utils import (
    as_bigint_and_exponent,
    decimal_div,
    decimal_mul,
    wei_to_decimal,
)
from dexcore.models.types import UINT256_MAX, normalize_address
from dexcore.safe_int import S

if TYPE_CHECKING:
    from dexcore.models.auction import AuctionInstance
    from dexcore.models.eth import Asset

logger = structlog.get_logger()


class Prices:
    """Token reference prices for an auction.

    Prices are in ether per whole token, i.e. the auction's reference price
    (wei per 1e18 token atoms) divided by 1e18. Lookups are case-insensitive.
    """

    __slots__ = ("_prices",)

    def __init__(self, prices: dict[str, Decimal] | None = None) -> None:
        self._prices: dict[str, Decimal] = dict(prices or {})

    @classmethod
    def new(cls, prices: Iterable[tuple[str, int]]) -> Prices:
        """Build a price table from (token, reference price in wei) pairs.

        Later entries for the same token replace earlier ones.

        Raises:
            ValueError: If a price is negative or exceeds uint256
        """
        table: dict[str, Decimal] = {}
        for token, price in prices:
            price = int(price)
            if not 0 <= price <= UINT256_MAX:
                raise ValueError(f"Reference price out of uint256 range for {token}: {price}")
            table[normalize_address(token)] = wei_to_decimal(price)
        return cls(table)

    @classmethod
    def for_auction(cls, auction: AuctionInstance) -> Prices:
        """Compute the set of reference prices for the specified auction."""
        return cls.new(auction.reference_prices())

    def get(self, token: str) -> Decimal | None:
        return self._prices.get(normalize_address(token))

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and normalize_address(token) in self._prices

    def __len__(self) -> int:
        return len(self._prices)

    def __iter__(self) -> Iterator[str]:
        return iter(self._prices)

    def __repr__(self) -> str:
        return f"Prices({len(self._prices)} tokens)"


@dataclass(frozen=True)
class Limits:
    """DEX swap slippage limits.

    The slippage used for a swap is bounded by a relative amount and an
    absolute native currency value. These limits determine the relative
    slippage to use for a particular asset (token and amount).

    Attributes:
        relative: Maximum fraction of the traded amount, in [0, 1]
        absolute: Maximum slippage value in wei, or None for no cap

    Use Limits.new to construct validated limits.
    """

    relative: Decimal
    absolute: int | None = None

    @classmethod
    def new(cls, relative: Decimal | int | str, absolute: int | None = None) -> Limits | None:
        """Create slippage limits.

        Returns None if the relative limit is outside the valid range [0, 1]
        (or is not a finite number), or if the absolute limit is not a
        uint256 amount.
        """
        try:
            relative = Decimal(relative)
        except (InvalidOperation, TypeError, ValueError):
            return None
        if not relative.is_finite() or not Decimal(0) <= relative <= Decimal(1):
            return None
        if absolute is not None and not 0 <= absolute <= UINT256_MAX:
            return None
        return cls(relative=relative, absolute=absolute)

    def relative_for(self, asset: Asset, prices: Prices) -> Slippage:
        """Compute the slippage tolerance to use for an asset.

        With an absolute limit and a known price for the asset's token, the
        tolerance is min(absolute / value, relative) where value is the
        asset amount converted to native currency. Otherwise the relative
        limit is used as is.
        """
        if self.absolute is None:
            return Slippage(self.relative)

        price = prices.get(asset.token)
        if price is None:
            logger.debug("slippage_no_reference_price", token=asset.token)
            return Slippage(self.relative)

        absolute = wei_to_decimal(self.absolute)
        value = decimal_mul(wei_to_decimal(asset.amount), price)
        if value == 0:
            # Nothing of value is traded, so no absolute cap can bind
            return Slippage(self.relative)

        max_relative = decimal_div(absolute, value)
        if max_relative < self.relative:
            logger.debug(
                "slippage_capped_by_absolute",
                token=asset.token,
                amount=asset.amount,
                relative=str(self.relative),
                capped=str(max_relative),
            )
            return Slippage(max_relative)
        return Slippage(self.relative)


class Slippage:
    """A relative slippage tolerance.

    Applying slippage has saturating semantics: if adding slippage to a
    token amount would overflow a uint256, then UINT256_MAX is returned
    instead, and subtracting never goes below zero.
    """

    __slots__ = ("_fraction",)

    def __init__(self, fraction: Decimal) -> None:
        if not fraction.is_finite() or fraction < 0:
            raise ValueError(f"Slippage fraction must be non-negative: {fraction}")
        self._fraction = fraction

    @property
    def fraction(self) -> Decimal:
        return self._fraction

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Slippage):
            return self._fraction == other._fraction
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._fraction)

    def __repr__(self) -> str:
        return f"Slippage({self._fraction})"

    def add(self, amount: int) -> int:
        """Add slippage to a token amount.

        Used for amounts that may come out higher than quoted, e.g. the
        maximum sell amount of a buy order swap.
        """
        return S(_check_amount(amount)).saturating_add(self.absolute(amount)).value

    def sub(self, amount: int) -> int:
        """Subtract slippage from a token amount.

        Used for amounts that may come out lower than quoted, e.g. the
        minimum buy amount of a sell order swap.
        """
        return S(_check_amount(amount)).saturating_sub(self.absolute(amount)).value

    def absolute(self, amount: int) -> int:
        """Return the absolute slippage amount for a token amount, rounded up."""
        amount = _check_amount(amount)
        unscaled, scale = as_bigint_and_exponent(self._fraction)

        numerator = S(amount) * unscaled
        if scale <= 0:
            abs_amount = numerator * S(10) ** (-scale)
        else:
            abs_amount = numerator.ceiling_div(S(10) ** scale)
        return abs_amount.to_uint256_saturating()


def _check_amount(amount: int) -> int:
    if not 0 <= amount <= UINT256_MAX:
        raise ValueError(f"Token amount out of uint256 range: {amount}")
    return amount
