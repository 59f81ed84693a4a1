# /ethnode/core/config.py
from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Operational Settings
    LOG_LEVEL: str = "INFO"
    SENTRY_DSN: SecretStr | None = None

    # Node connection
    ETH_NETWORK: str = "simnet"
    # Path to the eth settings file. Empty, or a path ending in .ipc, is the
    # deprecated form where the value itself is the geth ipc location.
    ETH_CONFIG_PATH: str = ""
    # Overrides the OS application-data directory used for the default ipc.
    ETH_DATA_DIR: str | None = None
    # Section of ETH_CONFIG_PATH holding token gas overrides, if any.
    ETH_TOKEN_GAS_SECTION: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

try:
    settings = Settings()
except Exception as e:
    # Late import to avoid circular dependency only for logging the failure
    try:
        from ethnode.core.logger import get_logger, configure_logging
        configure_logging()
        log = get_logger("ethnode.Config")
        log.critical("FAILED_TO_LOAD_SETTINGS", error=str(e))
    except Exception:
        print("FAILED_TO_LOAD_SETTINGS", e)
    raise SystemExit(1)
