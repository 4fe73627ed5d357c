"""Tests for deterministic pool address derivation."""

import pytest

from dexcore.constants import UNISWAP_V2_FACTORY
from dexcore.models.eth import TokenPair
from dexcore.pools.pair_provider import (
    PairProvider,
    create2_address,
    pair_salt,
    resolve_pool_address,
)
from dexcore.pools.uniswap_v2 import INIT_CODE_DIGEST, pair_provider_for_factory
from tests.helpers import DAI, GNO, GNO_RINKEBY, USDC, WETH, WETH_RINKEBY


@pytest.fixture
def provider() -> PairProvider:
    return pair_provider_for_factory(UNISWAP_V2_FACTORY)


class TestPairAddress:
    """Tests for UniswapV2 pair addresses."""

    def test_create2_mainnet(self, provider):
        # https://info.uniswap.org/pair/0x3e8468f66d30fc99f745481d4b383f89861702c6
        pair = TokenPair.new(GNO, WETH)
        assert pair is not None
        assert provider.pair_address(pair) == "0x3e8468f66d30fc99f745481d4b383f89861702c6"

    def test_create2_mainnet_usdc_weth(self, provider):
        assert (
            provider.pair_address_for(USDC, WETH) == "0xb4e16d0168e52d35cacd2c6185b44281ec28c9dc"
        )

    def test_create2_rinkeby(self, provider):
        assert (
            provider.pair_address_for(GNO_RINKEBY, WETH_RINKEBY)
            == "0x9b79462e2a47487856d5521963449c573e273e79"
        )

    def test_token_order_does_not_matter(self, provider):
        assert provider.pair_address_for(GNO, WETH) == provider.pair_address_for(WETH, GNO)
        assert resolve_pool_address(provider, DAI, USDC) == resolve_pool_address(
            provider, USDC, DAI
        )

    def test_checksummed_input(self, provider):
        assert (
            provider.pair_address_for(
                "0x6810e776880C02933D47DB1b9fc05908e5386b96",
                "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
            )
            == "0x3e8468f66d30fc99f745481d4b383f89861702c6"
        )

    def test_unsorted_pair_rejected(self, provider):
        """A pair built in the wrong order cannot reach a nonexistent pool."""
        with pytest.raises(ValueError, match="token0 < token1"):
            provider.pair_address(TokenPair(WETH, GNO))
        assert (
            provider.pair_address(TokenPair(GNO, WETH))
            == "0x3e8468f66d30fc99f745481d4b383f89861702c6"
        )

    def test_different_pairs_have_different_addresses(self, provider):
        assert provider.pair_address_for(GNO, WETH) != provider.pair_address_for(DAI, WETH)

    def test_identical_tokens_rejected(self, provider):
        with pytest.raises(ValueError, match="distinct"):
            provider.pair_address_for(WETH, WETH.upper().replace("0X", "0x"))

    def test_invalid_token_rejected(self, provider):
        with pytest.raises(ValueError):
            provider.pair_address_for("0x1234", WETH)


class TestPairProvider:
    """Tests for PairProvider construction."""

    def test_factory_normalized(self):
        provider = PairProvider(
            factory="0x5C69bEe701ef814a2B6a3EDD4B1652CB9cc5aA6f",
            init_code_digest=INIT_CODE_DIGEST,
        )
        assert provider.factory == UNISWAP_V2_FACTORY

    def test_invalid_digest_length(self):
        with pytest.raises(ValueError, match="32 bytes"):
            PairProvider(factory=UNISWAP_V2_FACTORY, init_code_digest=b"\x00" * 31)

    def test_invalid_factory(self):
        with pytest.raises(ValueError):
            PairProvider(factory="0xnotanaddress", init_code_digest=INIT_CODE_DIGEST)

    def test_equal_providers(self):
        assert pair_provider_for_factory(UNISWAP_V2_FACTORY) == pair_provider_for_factory(
            UNISWAP_V2_FACTORY.upper().replace("0X", "0x")
        )


class TestCreate2:
    """Tests for the CREATE2 building blocks."""

    def test_salt_is_32_bytes(self):
        pair = TokenPair.new(GNO, WETH)
        assert pair is not None
        assert len(pair_salt(pair)) == 32

    def test_salt_depends_on_canonical_order_only(self):
        assert pair_salt(TokenPair.new(GNO, WETH)) == pair_salt(TokenPair.new(WETH, GNO))

    def test_create2_eip1014_example(self):
        """Example 0 from EIP-1014: zero deployer, zero salt, init code 0x00."""
        init_code_digest = bytes.fromhex(
            "bc36789e7a1e281436464229828f817d6612f7b477d66591ff96a9e064bcc98a"
        )
        assert (
            create2_address("0x" + "00" * 20, b"\x00" * 32, init_code_digest)
            == "0x4d1a2e2bb4f88f0250f26ffff098b0b30b26bf38"
        )

    def test_create2_rejects_bad_lengths(self):
        with pytest.raises(ValueError, match="salt"):
            create2_address(UNISWAP_V2_FACTORY, b"\x00" * 31, INIT_CODE_DIGEST)
        with pytest.raises(ValueError, match="digest"):
            create2_address(UNISWAP_V2_FACTORY, b"\x00" * 32, b"\x00")
