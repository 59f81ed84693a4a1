import pytest

from ethnode.core.errors import UnsupportedNetworkError
from ethnode.core.network import Network, check_network, parse_network


def test_parse_forms():
    assert parse_network(Network.TESTNET) is Network.TESTNET
    assert parse_network(2) is Network.SIMNET
    assert parse_network("Testnet") is Network.TESTNET
    assert parse_network("regtest") is Network.SIMNET
    assert parse_network("1") is Network.TESTNET


@pytest.mark.parametrize("net", [Network.TESTNET, Network.SIMNET, "simnet", 1])
def test_allowed(net):
    assert check_network(net) in (Network.TESTNET, Network.SIMNET)


def test_mainnet_rejected():
    with pytest.raises(UnsupportedNetworkError, match="mainnet"):
        check_network(Network.MAINNET)
    with pytest.raises(UnsupportedNetworkError):
        check_network("mainnet")


@pytest.mark.parametrize("net", [7, -1, "devnet", ""])
def test_unknown_rejected(net):
    with pytest.raises(UnsupportedNetworkError):
        check_network(net)
