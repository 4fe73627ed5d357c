"""UniswapV2 baseline liquidity source: factory deployments and pair providers.

Creating a pair provider from a node needs the chain ID once at startup;
after that, every pool address is computed locally.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog

from dexcore.constants import UNISWAP_V2_DEPLOYMENTS, UNISWAP_V2_INIT_CODE_DIGEST
from dexcore.pools.pair_provider import PairProvider

logger = structlog.get_logger()

INIT_CODE_DIGEST = UNISWAP_V2_INIT_CODE_DIGEST


class FactoryNotDeployed(LookupError):
    """No factory contract is known for the connected chain."""

    def __init__(self, name: str, chain_id: int) -> None:
        super().__init__(f"{name} factory is not deployed on chain {chain_id}")
        self.name = name
        self.chain_id = chain_id


@dataclass(frozen=True)
class UniswapV2Deployment:
    """A UniswapV2 exchange: factory addresses by chain and pair bytecode hash."""

    name: str
    factories: dict[int, str]
    init_code_digest: bytes

    def factory_address(self, chain_id: int) -> str:
        """Return the factory address on a chain.

        Raises:
            FactoryNotDeployed: If the exchange is not deployed on the chain
        """
        factory = self.factories.get(chain_id)
        if factory is None:
            raise FactoryNotDeployed(self.name, chain_id)
        return factory

    def pair_provider_for_factory(self, factory_address: str) -> PairProvider:
        return PairProvider(factory=factory_address, init_code_digest=self.init_code_digest)

    def pair_provider_for_chain(self, chain_id: int) -> PairProvider:
        return self.pair_provider_for_factory(self.factory_address(chain_id))


UNISWAP_V2 = UniswapV2Deployment(
    name="UniswapV2",
    factories=UNISWAP_V2_DEPLOYMENTS,
    init_code_digest=UNISWAP_V2_INIT_CODE_DIGEST,
)


def pair_provider_for_factory(factory_address: str) -> PairProvider:
    """Return a UniswapV2 pair provider for the specified factory contract address."""
    return UNISWAP_V2.pair_provider_for_factory(factory_address)


async def get_pair_provider(web3: Any) -> PairProvider:
    """Create the UniswapV2 pair provider for the chain a web3 instance is connected to.

    Args:
        web3: Async web3 instance (anything with an awaitable eth.chain_id)

    Raises:
        FactoryNotDeployed: If UniswapV2 is not deployed on the connected chain

    Errors from the node connection are propagated unchanged.
    """
    chain_id = int(await web3.eth.chain_id)
    provider = UNISWAP_V2.pair_provider_for_chain(chain_id)
    logger.info(
        "pair_provider_created",
        exchange=UNISWAP_V2.name,
        chain_id=chain_id,
        factory=provider.factory,
    )
    return provider
