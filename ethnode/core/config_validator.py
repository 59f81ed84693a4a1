# /ethnode/core/config_validator.py
# Run at startup to validate the eth node settings before anything connects.
from ethnode.core.config import settings
from ethnode.core.errors import ConfigError
from ethnode.core.logger import log
from ethnode.core.node_config import NodeConfig, load_config, load_token_gases
from ethnode.core.paths import DEFAULT_IPC, default_ipc_path


def validate() -> NodeConfig:
    log.info("--- ETH NODE CONFIG VALIDATION START ---")
    default_ipc = default_ipc_path(settings.ETH_DATA_DIR) if settings.ETH_DATA_DIR else DEFAULT_IPC

    try:
        cfg = load_config(settings.ETH_CONFIG_PATH, settings.ETH_NETWORK, log, default_ipc=default_ipc)
        if settings.ETH_TOKEN_GAS_SECTION:
            gases = load_token_gases(settings.ETH_CONFIG_PATH, settings.ETH_TOKEN_GAS_SECTION)
            log.info("TOKEN_GAS_OVERRIDES", section=settings.ETH_TOKEN_GAS_SECTION, swap=gases.swap, redeem=gases.redeem)
    except ConfigError as e:
        log.critical("ETH_NODE_CONFIG_INVALID", error=str(e), kind=type(e).__name__)
        raise

    log.info("--- ETH NODE CONFIG VALIDATION PASSED ---", network=str(cfg.network), target=cfg.target.kind, addr=cfg.addr)
    return cfg

if __name__ == "__main__":
    validate()
