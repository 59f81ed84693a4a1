# /ethnode/core/network.py
from enum import IntEnum

from ethnode.core.errors import UnsupportedNetworkError


class Network(IntEnum):
    MAINNET = 0
    TESTNET = 1
    SIMNET = 2
    REGTEST = 2  # alias

    def __str__(self) -> str:
        return self.name.lower()


def parse_network(value: "Network | int | str") -> Network:
    """Accepts a Network, its integer ID or a case-insensitive name."""
    if isinstance(value, Network):
        return value
    if isinstance(value, str):
        name = value.strip()
        if name.isdigit():
            return parse_network(int(name))
        try:
            return Network[name.upper()]
        except KeyError:
            raise UnsupportedNetworkError(f"unknown network: {value!r}") from None
    try:
        return Network(value)
    except ValueError:
        raise UnsupportedNetworkError(f"unknown network ID: {value}") from None


def check_network(value: "Network | int | str") -> Network:
    """Returns the network if eth may run on it. No filesystem access."""
    net = parse_network(value)
    if net == Network.MAINNET:
        # TODO: enable mainnet.
        raise UnsupportedNetworkError("eth cannot be used on mainnet")
    return net
