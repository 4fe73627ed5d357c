"""Pydantic models for the auction data the bounds engine reads.

Based on the OpenAPI spec at:
https://github.com/cowprotocol/services/blob/main/crates/solvers/openapi.yml

Only the parts used for reference prices and trade assets are modelled;
unknown fields are ignored.
"""

from enum import Enum

from pydantic import BaseModel, Field

from dexcore.models.eth import Asset
from dexcore.models.types import Address, OrderUid, Uint256, normalize_address


class OrderKind(str, Enum):
    """Whether the order is a sell or buy order."""

    SELL = "sell"
    BUY = "buy"


class Token(BaseModel):
    """Token metadata included in the auction."""

    # Up to 77 decimals fit in a uint256
    decimals: int | None = Field(default=None, ge=0, le=77)
    symbol: str | None = None
    reference_price: Uint256 | None = Field(
        default=None,
        alias="referencePrice",
        description="Wei needed to buy 1e18 atoms of this token.",
    )
    available_balance: Uint256 = Field(default="0", alias="availableBalance")
    trusted: bool = False

    model_config = {"populate_by_name": True}


class Order(BaseModel):
    """An order in the auction batch."""

    uid: OrderUid
    sell_token: Address = Field(alias="sellToken")
    buy_token: Address = Field(alias="buyToken")
    sell_amount: Uint256 = Field(alias="sellAmount")
    buy_amount: Uint256 = Field(alias="buyAmount")
    kind: OrderKind

    model_config = {"populate_by_name": True}

    @property
    def sell(self) -> Asset:
        """The sell side of the order as an asset."""
        return Asset(token=self.sell_token, amount=int(self.sell_amount))

    @property
    def buy(self) -> Asset:
        """The buy side of the order as an asset."""
        return Asset(token=self.buy_token, amount=int(self.buy_amount))


class AuctionInstance(BaseModel):
    """The auction instance sent to the solver."""

    id: str | None = Field(default=None, description="Auction ID. Null for quote requests.")
    tokens: dict[Address, Token] = Field(default_factory=dict)
    orders: list[Order] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    def reference_prices(self) -> list[tuple[str, int]]:
        """Return (token, reference price in wei) for every priced token.

        Tokens without a reference price are skipped.
        """
        return [
            (normalize_address(address), int(token.reference_price))
            for address, token in self.tokens.items()
            if token.reference_price is not None
        ]
