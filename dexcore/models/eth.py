"""Value types for on-chain token amounts and token pairs."""

from __future__ import annotations

from dataclasses import dataclass

from dexcore.models.types import UINT256_MAX, normalize_address


@dataclass(frozen=True)
class Asset:
    """An amount of a specific token, in the token's smallest unit.

    Attributes:
        token: Token address (normalized to lowercase)
        amount: uint256 token amount
    """

    token: str
    amount: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "token", normalize_address(self.token, validate=True))
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise TypeError(f"Asset amount must be int, got {type(self.amount).__name__}")
        if not 0 <= self.amount <= UINT256_MAX:
            raise ValueError(f"Asset amount out of uint256 range: {self.amount}")


@dataclass(frozen=True)
class TokenPair:
    """An unordered pair of distinct tokens.

    Tokens are stored in canonical order (token0 < token1), so (A, B) and
    (B, A) produce equal pairs. For lowercase 0x-prefixed addresses, string
    order is the same as numeric order.

    Use TokenPair.new to build a pair from tokens in any order; the
    constructor only accepts tokens that are already sorted.
    """

    token0: str
    token1: str

    def __post_init__(self) -> None:
        token0 = normalize_address(self.token0, validate=True)
        token1 = normalize_address(self.token1, validate=True)
        if not token0 < token1:
            raise ValueError(f"Token pair must be ordered token0 < token1: {token0}, {token1}")
        object.__setattr__(self, "token0", token0)
        object.__setattr__(self, "token1", token1)

    @classmethod
    def new(cls, token_a: str, token_b: str) -> TokenPair | None:
        """Create a canonically ordered pair, or None if both tokens are the same.

        Raises:
            ValueError: If either token is not a valid address
        """
        a = normalize_address(token_a, validate=True)
        b = normalize_address(token_b, validate=True)
        if a == b:
            return None
        if a < b:
            return cls(a, b)
        return cls(b, a)
