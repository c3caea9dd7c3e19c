import re
import bech32
from core.errors import ValidationError

NPUB_HRP = "npub"
PUBKEY_LENGTH = 32
USERNAME_MAX_LENGTH = 64

_HEX_PUBKEY_RE = re.compile(r"^[0-9a-fA-F]{64}$")
_USERNAME_RE = re.compile(r"^[a-z0-9_.\-]+$")


def _decode_npub(npub: str) -> bytes:
    hrp, data = bech32.bech32_decode(npub)
    if hrp is None or data is None:
        raise ValueError("invalid bech32 string")
    if hrp != NPUB_HRP:
        raise ValueError(f"not an npub (prefix {hrp!r})")
    converted = bech32.convertbits(data, 5, 8, False)
    if converted is None:
        raise ValueError("invalid payload padding")
    if len(converted) != PUBKEY_LENGTH:
        raise ValueError(f"expected {PUBKEY_LENGTH} bytes, got {len(converted)}")
    return bytes(converted)


def convert_npub_to_hex(pubkey) -> str:
    """Normalize a public key given as 64-char hex or NIP-19 ``npub1...`` to lowercase hex."""
    if not isinstance(pubkey, str):
        raise ValidationError("Public key is required")

    pubkey = pubkey.strip()

    if _HEX_PUBKEY_RE.match(pubkey):
        return pubkey.lower()

    if pubkey.startswith(NPUB_HRP + "1"):
        try:
            return _decode_npub(pubkey).hex()
        except ValueError as e:
            raise ValidationError(f"Invalid npub format: {e}") from e

    raise ValidationError("Invalid public key format")


def convert_hex_to_npub(pubkey_hex: str) -> str:
    raw = bytes.fromhex(pubkey_hex)
    if len(raw) != PUBKEY_LENGTH:
        raise ValueError(f"Public key must be {PUBKEY_LENGTH} bytes")
    return bech32.bech32_encode(NPUB_HRP, bech32.convertbits(raw, 8, 5, True))


def normalize_username(username) -> str:
    if not username or not isinstance(username, str):
        raise ValidationError("Username is required")

    username = username.strip().lower()
    if not _USERNAME_RE.match(username):
        raise ValidationError(
            "Username can only contain lowercase letters, numbers, hyphens, underscores, and dots"
        )
    if len(username) > USERNAME_MAX_LENGTH:
        raise ValidationError(f"Username must be between 1 and {USERNAME_MAX_LENGTH} characters")
    return username
