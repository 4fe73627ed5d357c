"""Protocol constants for the settlement bounds engine.

Centralizes chain IDs and the UniswapV2 liquidity source deployment.
"""

from dexcore.models.types import is_valid_address


def _validate_address(name: str, address: str) -> str:
    """Validate and return an address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# Chain IDs
MAINNET = 1
RINKEBY = 4
GOERLI = 5

# UniswapV2 factory, deployed at the same address on every supported chain
UNISWAP_V2_FACTORY = _validate_address(
    "UniswapV2Factory", "0x5c69bee701ef814a2b6a3edd4b1652cb9cc5aa6f"
)
# keccak256 of the UniswapV2Pair creation code
UNISWAP_V2_INIT_CODE_DIGEST = bytes.fromhex(
    "96e8ac4277198ff8b6f785478aa9a39f403cb768dd02cbee326c3e7da348845f"
)

UNISWAP_V2_DEPLOYMENTS: dict[int, str] = {
    MAINNET: UNISWAP_V2_FACTORY,
    RINKEBY: UNISWAP_V2_FACTORY,
    GOERLI: UNISWAP_V2_FACTORY,
}
