# /ethnode/core/jwt.py
# Resolves the jwt secret shared with a geth node's authenticated port.
import binascii
import os

from ethnode.core.errors import (
    InvalidHexContentError,
    PathNotFoundError,
    SecretFileReadError,
    SecretUnresolvableError,
)
from ethnode.core.paths import clean_and_expand_path


def decode_hex(hex_str) -> bytes:
    """Strict hex decode of str or bytes: even length, hex digits only, not empty."""
    if not hex_str:
        # unhexlify("") yields b""; rejected so a jwt secret is never blank.
        raise ValueError("empty hex string")
    return binascii.unhexlify(hex_str)


def find_jwt_hex(thing: str) -> str:
    """
    Returns the jwt hex held by *thing*, which is either the hex itself
    (optionally 0x-prefixed) or the path of a file containing it.

    Inline hex is returned exactly as given. Hex read from a file is returned
    without its 0x prefix and trailing line endings.
    """
    try:
        decode_hex(thing.removeprefix("0x"))
        return thing
    except ValueError as e:
        hex_err = e

    fp = clean_and_expand_path(thing)
    try:
        os.stat(fp)
    except FileNotFoundError:
        raise PathNotFoundError(f"file at {fp} does not exist", fp) from None
    except (OSError, ValueError) as e:
        raise SecretUnresolvableError(
            f"jwt does not appear to be hex or a file location: hex error: {hex_err}: file error: {e}"
        ) from e

    try:
        with open(fp, "rb") as f:
            contents = f.read()
    except OSError as e:
        raise SecretFileReadError(f"unable to read jwt file at {fp}: {e}") from e

    hex_bytes = contents.removeprefix(b"0x").rstrip(b"\r\n")
    try:
        decode_hex(hex_bytes)
    except ValueError as e:
        raise InvalidHexContentError(f"file at {fp} does not appear to contain jwt hex: {e}") from e
    return hex_bytes.decode("ascii")
