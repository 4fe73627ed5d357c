"""Data models for auctions, assets and token pairs."""

from dexcore.models.auction import AuctionInstance, Order, OrderKind, Token
from dexcore.models.eth import Asset, TokenPair
from dexcore.models.types import Address, OrderUid, Uint256, normalize_address

__all__ = [
    # Types
    "Address",
    "OrderUid",
    "Uint256",
    "normalize_address",
    # Values
    "Asset",
    "TokenPair",
    # Auction models
    "AuctionInstance",
    "Order",
    "OrderKind",
    "Token",
]
