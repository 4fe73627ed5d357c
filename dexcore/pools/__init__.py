"""Liquidity pool identity: deterministic pool addresses per exchange deployment."""

from dexcore.pools.pair_provider import (
    PairProvider,
    create2_address,
    pair_salt,
    resolve_pool_address,
)
from dexcore.pools.uniswap_v2 import (
    UNISWAP_V2,
    FactoryNotDeployed,
    UniswapV2Deployment,
    get_pair_provider,
    pair_provider_for_factory,
)

__all__ = [
    "FactoryNotDeployed",
    "PairProvider",
    "UNISWAP_V2",
    "UniswapV2Deployment",
    "create2_address",
    "get_pair_provider",
    "pair_provider_for_factory",
    "pair_salt",
    "resolve_pool_address",
]
