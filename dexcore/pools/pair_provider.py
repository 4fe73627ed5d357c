"""Deterministic pool address derivation for UniswapV2-style factories.

UniswapV2 factories deploy pairs with CREATE2, using
keccak256(abi.encodePacked(token0, token1)) as the salt. A pair's address is
therefore a pure function of the factory address, the pair bytecode hash and
the (canonically ordered) tokens:

    address = keccak256(0xff ++ factory ++ salt ++ init_code_digest)[12:]
"""

from __future__ import annotations

from dataclasses import dataclass

from eth_abi.packed import encode_packed
from eth_utils import keccak

from dexcore.models.eth import TokenPair
from dexcore.models.types import address_to_bytes, normalize_address

CREATE2_PREFIX = b"\xff"


def create2_address(deployer: str, salt: bytes, init_code_digest: bytes) -> str:
    """Compute the address of a contract deployed with CREATE2.

    Args:
        deployer: Address of the deploying contract
        salt: 32 byte salt
        init_code_digest: keccak256 of the contract creation code

    Returns:
        Lowercase 0x-prefixed contract address
    """
    if len(salt) != 32:
        raise ValueError(f"CREATE2 salt must be 32 bytes, got {len(salt)}")
    if len(init_code_digest) != 32:
        raise ValueError(f"Init code digest must be 32 bytes, got {len(init_code_digest)}")

    digest = keccak(CREATE2_PREFIX + address_to_bytes(deployer) + salt + init_code_digest)
    return "0x" + digest[12:].hex()


def pair_salt(pair: TokenPair) -> bytes:
    """CREATE2 salt of a pair: keccak256(abi.encodePacked(token0, token1))."""
    packed = encode_packed(
        ["address", "address"],
        [address_to_bytes(pair.token0), address_to_bytes(pair.token1)],
    )
    return keccak(packed)


@dataclass(frozen=True)
class PairProvider:
    """Computes pool addresses for a UniswapV2-style factory.

    Attributes:
        factory: Factory contract address (normalized to lowercase)
        init_code_digest: keccak256 of the pair contract creation code
    """

    factory: str
    init_code_digest: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "factory", normalize_address(self.factory, validate=True))
        if len(self.init_code_digest) != 32:
            raise ValueError(
                f"Init code digest must be 32 bytes, got {len(self.init_code_digest)}"
            )

    def pair_address(self, pair: TokenPair) -> str:
        """Return the address of the pool for a token pair."""
        return create2_address(self.factory, pair_salt(pair), self.init_code_digest)

    def pair_address_for(self, token_a: str, token_b: str) -> str:
        """Return the address of the pool for two tokens, in any order.

        Raises:
            ValueError: If the tokens are identical or not valid addresses
        """
        pair = TokenPair.new(token_a, token_b)
        if pair is None:
            raise ValueError(f"Pool tokens must be distinct: {token_a}")
        return self.pair_address(pair)


def resolve_pool_address(provider: PairProvider, token_a: str, token_b: str) -> str:
    """Resolve the pool address for two tokens; (A, B) and (B, A) give the same pool."""
    return provider.pair_address_for(token_a, token_b)
