import bech32
import pytest

from core.errors import ValidationError
from core.nostr import convert_hex_to_npub, convert_npub_to_hex, normalize_username
from tests.conftest import SAMPLE_HEX, SAMPLE_NPUB


def _encode(hrp: str, payload: bytes) -> str:
    return bech32.bech32_encode(hrp, bech32.convertbits(payload, 8, 5, True))


class TestConvertNpubToHex:
    @pytest.mark.parametrize(
        "value",
        [
            SAMPLE_HEX,
            SAMPLE_HEX.upper(),
            "7E7e9C42a91BFEF19fa929E5fda1b72e0ebc1a4c1141673E2794234d86ADDF4e",
        ],
    )
    def test_hex_is_lowercased(self, value):
        assert convert_npub_to_hex(value) == SAMPLE_HEX

    def test_hex_is_trimmed(self):
        assert convert_npub_to_hex(f"  {SAMPLE_HEX}\n") == SAMPLE_HEX

    def test_npub_decodes_to_hex(self):
        assert convert_npub_to_hex(SAMPLE_NPUB) == SAMPLE_HEX

    def test_npub_is_trimmed(self):
        assert convert_npub_to_hex(f" {SAMPLE_NPUB} ") == SAMPLE_HEX

    def test_npub_round_trip(self):
        raw = bytes(range(32))
        npub = convert_hex_to_npub(raw.hex())
        assert npub.startswith("npub1")
        assert convert_npub_to_hex(npub) == raw.hex()

    def test_hex_to_npub_matches_reference_vector(self):
        assert convert_hex_to_npub(SAMPLE_HEX) == SAMPLE_NPUB

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "abc",
            SAMPLE_HEX[:-1],
            SAMPLE_HEX + "0",
            "g" * 64,
            "nsec1vl029mgpspedva04g90vltkh6fvh240zqtv9k0t9af8935ke9laqsnlfe5",
            "NPUB10ELFCS4FR0L0R8AF98JLMGDH9C8TCXJVZ9QKW038JS35MP4DMA8QZVJPTG",
            "npub",
        ],
    )
    def test_other_formats_rejected(self, value):
        with pytest.raises(ValidationError, match="^Invalid public key format$"):
            convert_npub_to_hex(value)

    def test_bad_checksum_rejected(self):
        broken = SAMPLE_NPUB[:-1] + ("h" if SAMPLE_NPUB[-1] != "h" else "q")
        with pytest.raises(ValidationError, match="^Invalid npub format: "):
            convert_npub_to_hex(broken)

    def test_wrong_payload_type_rejected(self):
        value = _encode("npub1x", bytes.fromhex(SAMPLE_HEX))
        assert value.startswith("npub1")
        with pytest.raises(ValidationError, match="not an npub"):
            convert_npub_to_hex(value)

    def test_wrong_payload_length_rejected(self):
        value = _encode("npub", bytes(31))
        with pytest.raises(ValidationError, match="expected 32 bytes"):
            convert_npub_to_hex(value)

    @pytest.mark.parametrize("value", [None, 123, ["npub1"], {"hex": SAMPLE_HEX}])
    def test_non_string_rejected(self, value):
        with pytest.raises(ValidationError, match="Public key is required"):
            convert_npub_to_hex(value)


class TestNormalizeUsername:
    def test_trims_and_lowercases(self):
        assert normalize_username("  MyName.01_") == "myname.01_"

    @pytest.mark.parametrize("value", ["alice", "bob-smith", "a.b_c-d", "0", "_"])
    def test_valid_names(self, value):
        assert normalize_username(value) == value

    def test_exactly_64_characters_accepted(self):
        name = "a" * 64
        assert normalize_username(name) == name

    def test_65_characters_rejected(self):
        with pytest.raises(ValidationError, match="between 1 and 64 characters"):
            normalize_username("a" * 65)

    @pytest.mark.parametrize("value", ["bad user", "alice@example.com", "emoji😀", "tab\tname", "   "])
    def test_invalid_characters_rejected(self, value):
        with pytest.raises(ValidationError, match="can only contain lowercase letters"):
            normalize_username(value)

    @pytest.mark.parametrize("value", [None, "", 42, ["alice"]])
    def test_missing_or_non_string_rejected(self, value):
        with pytest.raises(ValidationError, match="Username is required"):
            normalize_username(value)
