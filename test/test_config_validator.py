import os

import pytest

from ethnode.core import config_validator
from ethnode.core.config import settings
from ethnode.core.errors import MissingSecretError, UnsupportedNetworkError


def test_validate_legacy_default(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "ETH_NETWORK", "simnet")
    monkeypatch.setattr(settings, "ETH_CONFIG_PATH", "")
    monkeypatch.setattr(settings, "ETH_DATA_DIR", str(tmp_path))
    cfg = config_validator.validate()
    assert cfg.addr == os.path.join(str(tmp_path), "geth", "geth.ipc")


def test_validate_remote_with_token_gases(monkeypatch, tmp_path):
    conf = tmp_path / "eth.conf"
    conf.write_text("addr=ws://10.0.0.1:8551\njwt=0xabcd\n[usdc.eth]\nswap=100\nredeem=50\n")
    monkeypatch.setattr(settings, "ETH_NETWORK", "testnet")
    monkeypatch.setattr(settings, "ETH_CONFIG_PATH", str(conf))
    monkeypatch.setattr(settings, "ETH_TOKEN_GAS_SECTION", "usdc.eth")
    cfg = config_validator.validate()
    assert cfg.jwt.get_secret_value() == "0xabcd"


def test_validate_reraises(monkeypatch, tmp_path):
    conf = tmp_path / "eth.conf"
    conf.write_text("addr=ws://10.0.0.1:8551\n")
    monkeypatch.setattr(settings, "ETH_NETWORK", "simnet")
    monkeypatch.setattr(settings, "ETH_CONFIG_PATH", str(conf))
    with pytest.raises(MissingSecretError):
        config_validator.validate()

    monkeypatch.setattr(settings, "ETH_NETWORK", "mainnet")
    with pytest.raises(UnsupportedNetworkError):
        config_validator.validate()
