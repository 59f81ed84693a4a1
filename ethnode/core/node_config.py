# /ethnode/core/node_config.py
# Loads the settings needed to reach a geth full node, over ipc or over an
# authenticated websocket.
import configparser
import itertools
import os
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, SecretStr, ValidationError

from ethnode.core.errors import (
    ConfigError,
    ConfigParseError,
    InvalidSecretError,
    MissingAddressError,
    MissingSecretError,
    PathNotFoundError,
)
from ethnode.core.jwt import find_jwt_hex
from ethnode.core.logger import CONFIG_LOADS, get_logger
from ethnode.core.network import Network, check_network
from ethnode.core.paths import DEFAULT_IPC, clean_and_expand_path

log = get_logger(__name__)

IPC_SUFFIX = ".ipc"

EXAMPLE_CONF = """; ws://address:port of the authorized port or ipc filepath of local full geth node
addr=ws://123.123.123.123:12345 or ~/.geth/geth.ipc
; jwt hex secret shared with a geth full node when connecting remotely over websocket
; can also be a file path to the jwt secret. Not needed for ipc
jwt=0xabababababababababababababababababababababababababababababababab
"""

EX_CONF_STR = f"\n\nExample config contents:\n\n{EXAMPLE_CONF}\n"

# Keys before any section header, or in an explicit [Application Options].
_ROOT_SECTION = "Application Options"


class LocalTarget(BaseModel):
    """A geth node reached through its ipc socket file."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["ipc"] = "ipc"
    path: str


class RemoteTarget(BaseModel):
    """A geth node's authorized websocket port, guarded by a jwt secret."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["websocket"] = "websocket"
    endpoint: str
    secret: SecretStr


class NodeConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    network: Network
    target: Union[LocalTarget, RemoteTarget] = Field(discriminator="kind")

    @property
    def addr(self) -> str:
        if isinstance(self.target, LocalTarget):
            return self.target.path
        return self.target.endpoint

    @property
    def jwt(self) -> Optional[SecretStr]:
        if isinstance(self.target, RemoteTarget):
            return self.target.secret
        return None

    @property
    def is_ipc(self) -> bool:
        return isinstance(self.target, LocalTarget)


class _RawNodeConfig(BaseModel):
    # Unknown keys are ignored so a geth.conf or a config shared with other
    # clients can be read directly.
    model_config = ConfigDict(extra="ignore")

    addr: str = ""
    jwt: str = ""


class TokenGases(BaseModel):
    """Operator overrides for token swap and redeem gas. Zero means unset."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    swap: NonNegativeInt = 0
    redeem: NonNegativeInt = 0


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def _read_ini(config_path: str) -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        inline_comment_prefixes=(";",),
        interpolation=None,
        strict=False,
    )
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            parser.read_file(itertools.chain([f"[{_ROOT_SECTION}]\n"], f), source=config_path)
    except (OSError, UnicodeDecodeError, configparser.Error) as e:
        raise ConfigParseError(f"error parsing eth ini file: {e}") from e
    return parser


def _section_values(parser: configparser.ConfigParser, section: str) -> dict:
    return {k: _unquote(v) for k, v in parser.items(section)}


def _parse_config_file(config_path: str) -> _RawNodeConfig:
    if not os.path.exists(config_path):
        raise PathNotFoundError(f"no eth config file found at {config_path}", config_path)

    # Other sections belong to other clients sharing the file.
    parser = _read_ini(config_path)
    return _RawNodeConfig.model_validate(_section_values(parser, _ROOT_SECTION))


def _resolve_target(raw: _RawNodeConfig) -> Union[LocalTarget, RemoteTarget]:
    if not raw.addr:
        raise MissingAddressError(f"config missing addr: {EX_CONF_STR}")

    if raw.addr.endswith(IPC_SUFFIX):
        return LocalTarget(path=clean_and_expand_path(raw.addr))

    if not raw.jwt:
        raise MissingSecretError(f"config missing jwt secret: {EX_CONF_STR}")
    try:
        secret = find_jwt_hex(raw.jwt)
    except ConfigError as e:
        raise InvalidSecretError(f"problem with jwt hex: {e}: {EX_CONF_STR}", e) from e
    return RemoteTarget(endpoint=raw.addr, secret=SecretStr(secret))


def load_config(
    config_path: str,
    net: Union[Network, int, str],
    logger=None,
    default_ipc: str = DEFAULT_IPC,
) -> NodeConfig:
    """
    Resolves the geth connection settings for *net*.

    config_path normally names an ini file with ``addr`` and ``jwt`` keys.
    An empty path, or one ending in .ipc, is the deprecated form in which the
    value is itself the ipc location (default_ipc when empty); a warning is
    logged and no file is read.

    Raises a ConfigError subclass on any failure.
    """
    network = check_network(net)
    logger = logger or log

    # Deprecated: remove once deployments point at a settings file.
    if config_path == "" or config_path.endswith(IPC_SUFFIX):
        ipc = clean_and_expand_path(config_path) if config_path else default_ipc
        logger.warning(
            "LEGACY_IPC_CONFIG_PATH",
            ipc=ipc,
            message="The geth ipc location is set directly. It should be put in "
                    "a settings file and that file's location configured instead.",
            example=EXAMPLE_CONF,
        )
        CONFIG_LOADS.labels("legacy_ipc").inc()
        return NodeConfig(network=network, target=LocalTarget(path=ipc))

    raw = _parse_config_file(config_path)
    target = _resolve_target(raw)
    CONFIG_LOADS.labels(target.kind).inc()
    logger.debug("ETH_NODE_CONFIG_LOADED", network=str(network), target=target.kind, addr=raw.addr)
    return NodeConfig(network=network, target=target)


def load_token_gases(config_path: str, section: Optional[str] = None) -> TokenGases:
    """
    Reads token gas overrides (``swap`` and ``redeem``) from *section* of the
    settings file, or from keys outside any section when *section* is None.
    A legacy ipc path, or a missing section, yields no overrides.
    """
    if config_path == "" or config_path.endswith(IPC_SUFFIX):
        return TokenGases()
    if not os.path.exists(config_path):
        raise PathNotFoundError(f"no eth config file found at {config_path}", config_path)

    parser = _read_ini(config_path)
    section = section or _ROOT_SECTION
    if not parser.has_section(section):
        return TokenGases()
    try:
        return TokenGases.model_validate(_section_values(parser, section))
    except ValidationError as e:
        raise ConfigParseError(f"invalid token gas values in [{section}] of {config_path}: {e}") from e
