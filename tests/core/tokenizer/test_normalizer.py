import unicodedata

import pytest

from unisim.core.tokenizer.normalizers import (
    LowercaseNormalizer,
    NFCNormalizer,
    NormalizedString,
    SequenceNormalizer,
    StripNormalizer,
    build_normalizer,
)


class TestStripNormalizer:
    @pytest.mark.parametrize(
        "input_str, expected_output",
        [
            (" hello world ", "hello world"),
            (" ", ""),
            ("", ""),
            (" one leading", "one leading"),
            ("one trailing ", "one trailing"),
            ("     Hello, World!  \r\n", "Hello, World!"),
            ("\t\n\r\f\v hello \t\n\r\f\v", "hello"),
            ("\u00a0hello\u00a0", "hello"),  # Non-breaking space
            ("\u3000hello\u3000", "hello"),  # Ideographic space
            ("hello", "hello"),
            (" 你好世界 ", "你好世界"),
        ],
    )
    def test_strip_normalizer(self, input_str, expected_output):
        output = StripNormalizer().normalize(NormalizedString.from_str(input_str))
        assert output.normalized == expected_output
        assert output.original == input_str

    def test_strip_one_side(self):
        assert StripNormalizer(strip_right=False)("  a  ") == "a  "
        assert StripNormalizer(strip_left=False)("  a  ") == "  a"

    def test_preserves_internal_whitespace(self):
        assert StripNormalizer()("  hello   world  test  ") == "hello   world  test"


class TestLowercaseNormalizer:
    @pytest.mark.parametrize(
        "input_str, expected_output",
        [
            ("HELLO", "hello"),
            ("HeLLo WoRLd", "hello world"),
            ("123ABC", "123abc"),
            ("МОСКВА", "москва"),
            ("STRAßE", "straße"),
            ("123!@#$%", "123!@#$%"),
        ],
    )
    def test_lowercase_normalizer(self, input_str, expected_output):
        assert LowercaseNormalizer()(input_str) == expected_output


class TestNFCNormalizer:
    @pytest.mark.parametrize(
        "input_str",
        ["hello", "e\u0301", "n\u0303", "a\u0300\u0327", "cafe\u0301 nai\u0308ve"],
    )
    def test_matches_unicodedata(self, input_str):
        assert NFCNormalizer()(input_str) == unicodedata.normalize("NFC", input_str)

    def test_idempotent(self):
        normalizer = NFCNormalizer()
        first_pass = normalizer.normalize(NormalizedString.from_str("e\u0301"))
        second_pass = normalizer.normalize(first_pass)
        assert first_pass == second_pass


class TestSequenceNormalizer:
    @pytest.mark.parametrize(
        "sequence",
        [
            [NFCNormalizer, LowercaseNormalizer, StripNormalizer],
            [StripNormalizer, NFCNormalizer, LowercaseNormalizer],
            [LowercaseNormalizer, StripNormalizer, NFCNormalizer],
        ],
    )
    def test_order_does_not_matter_here(self, sequence):
        normalizer = SequenceNormalizer([cls() for cls in sequence])
        assert normalizer(" E\u0301XAMPLE ") == "\u00e9xample"

    def test_empty_sequence_is_identity(self):
        assert SequenceNormalizer([])(" HELLO WORLD ") == " HELLO WORLD "

    def test_single_normalizer(self):
        assert SequenceNormalizer(LowercaseNormalizer())("HELLO") == "hello"


class TestBuildNormalizer:
    def test_builds_in_order(self):
        normalizer = build_normalizer(["strip", "lowercase", "nfc"])
        assert normalizer("  CAFE\u0301  ") == "caf\u00e9"

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown normalizers"):
            build_normalizer(["stem"])
