"""Factory functions for creating test objects.

Usage:
    from tests.helpers import make_auction, make_order

    auction = make_auction(prices={WETH: 10**18}, orders=[make_order()])
"""

from dexcore.models.auction import AuctionInstance, Order, OrderKind, Token
from tests.helpers.constants import USDC, WETH


def make_order(
    sell_token: str = WETH,
    buy_token: str = USDC,
    sell_amount: str | int = "1000000000000000000",  # 1 WETH
    buy_amount: str | int = "2000000000",  # 2000 USDC
    kind: OrderKind | str = OrderKind.SELL,
    uid: str | None = None,
) -> Order:
    """Create a test order with sensible defaults."""
    if uid is None:
        uid = "0x" + "01" * 56

    kind_str = kind.value if isinstance(kind, OrderKind) else kind

    return Order(
        uid=uid,
        sellToken=sell_token,
        buyToken=buy_token,
        sellAmount=str(sell_amount),
        buyAmount=str(buy_amount),
        kind=kind_str,
    )


def make_auction(
    prices: dict[str, int | None] | None = None,
    orders: list[Order] | None = None,
    auction_id: str | None = "1",
) -> AuctionInstance:
    """Create an auction whose tokens carry the given reference prices.

    A price of None adds the token without a reference price.
    """
    tokens = {
        token: Token(
            referencePrice=str(price) if price is not None else None,
            availableBalance="0",
        )
        for token, price in (prices or {}).items()
    }
    return AuctionInstance(id=auction_id, tokens=tokens, orders=orders or [])
