"""Checksum primitives for share links.

CRC-16/ARC over the UTF-8 bytes of the link body, carried in the link as the
base-58 encoding of the checksum's two big-endian bytes. Leading zero bytes
survive base-58 as `1` characters, so every checksum renders to a non-empty token.
"""

import base58
import crcmod.predefined

_crc16_arc = crcmod.predefined.mkCrcFun("crc-16")


def crc16(text: str) -> str:
    """Compute the CRC-16/ARC checksum of a string as 4 lowercase hex digits."""
    return f"{_crc16_arc(text.encode('utf-8')):04x}"


def encode_token(checksum_hex: str) -> str:
    """Render checksum hex digits as a base-58 token."""
    return base58.b58encode(bytes.fromhex(checksum_hex)).decode("ascii")


def decode_token(token: str) -> str:
    """Decode a base-58 token back to checksum hex digits.

    Raises:
        ValueError: If the token contains characters outside the base-58 alphabet.
    """
    return base58.b58decode(token).hex()
