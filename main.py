# /main.py
import sys

from ethnode.core.config_validator import validate as validate_config
from ethnode.core.errors import ConfigError
from ethnode.core.logger import configure_logging, get_logger


def main() -> int:
    configure_logging()
    log = get_logger("ethnode.System")
    try:
        cfg = validate_config()
    except ConfigError:
        return 1
    log.info("ETH_NODE_SETTINGS_READY", target=cfg.target.kind)
    return 0

if __name__ == "__main__":
    sys.exit(main())
