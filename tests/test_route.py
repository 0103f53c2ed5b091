"""Tests for the route transposition cipher engine."""

import pytest

from app.core.exceptions import (
    EmptyKeyError,
    EmptyTextError,
    InvalidCipherTextError,
    InvalidKeyError,
    NonPositiveKeyError,
)
from app.services.engines.transposition.route import RouteCipherEngine


class TestRouteKey:
    """Key validation, set_key and get_key."""

    def test_valid_key(self):
        engine = RouteCipherEngine("3")
        assert engine.columns == 3
        assert engine.get_key() == "3"

    def test_leading_zeros(self):
        """Leading zeros are digits like any other."""
        engine = RouteCipherEngine("007")
        assert engine.columns == 7
        assert engine.get_key() == "7"

    def test_empty_key(self):
        with pytest.raises(EmptyKeyError):
            RouteCipherEngine("")

    @pytest.mark.parametrize("key", ["3a", "-3", "+3", " 3", "3.0", "٣", "три"])
    def test_non_digit_key(self, key):
        with pytest.raises(InvalidKeyError):
            RouteCipherEngine(key)

    @pytest.mark.parametrize("key", ["0", "000"])
    def test_non_positive_key(self, key):
        with pytest.raises(NonPositiveKeyError):
            RouteCipherEngine(key)

    def test_non_positive_is_invalid_key(self):
        """Zero keys can be caught together with other invalid keys."""
        with pytest.raises(InvalidKeyError):
            RouteCipherEngine("0")

    def test_key_too_large_to_parse(self):
        """Digit strings past the int conversion limit are rejected, not crashed on."""
        with pytest.raises(InvalidKeyError) as exc_info:
            RouteCipherEngine("1" * 5000)
        assert exc_info.value.details == {"key_length": 5000}

    def test_set_key_replaces_columns(self):
        engine = RouteCipherEngine("3")
        engine.set_key("12")
        assert engine.columns == 12
        assert engine.get_key() == "12"

    def test_rejected_set_key_keeps_old_key(self):
        engine = RouteCipherEngine("3")
        with pytest.raises(NonPositiveKeyError):
            engine.set_key("0")
        with pytest.raises(EmptyKeyError):
            engine.set_key("")
        assert engine.get_key() == "3"


class TestRouteEncrypt:
    """Encryption."""

    def test_known_example(self):
        """Columns 2, 1, 0 read top to bottom."""
        engine = RouteCipherEngine("3")
        assert engine.encrypt("ПРИВЕТПРИВЕТ") == "ИТИТРЕРЕПВПВ"

    def test_incomplete_last_row(self):
        """Missing cells of the last row are skipped, not padded."""
        engine = RouteCipherEngine("4")
        assert engine.encrypt("ПРИВЕТМИР") == "ВИИМРТПЕР"

    def test_normalizes_open_text(self):
        engine = RouteCipherEngine("3")
        assert engine.encrypt("Hello, World!") == "LWLEORHLOD"

    def test_single_column_is_identity(self):
        engine = RouteCipherEngine("1")
        assert engine.encrypt("ПРИВЕТМИР") == "ПРИВЕТМИР"

    def test_columns_equal_to_length_reverses(self):
        engine = RouteCipherEngine("6")
        assert engine.encrypt("ПРИВЕТ") == "ТЕВИРП"

    def test_columns_longer_than_text_reverses(self):
        engine = RouteCipherEngine("5")
        assert engine.encrypt("АБВ") == "ВБА"

    def test_huge_key(self):
        engine = RouteCipherEngine("99999999999")
        assert engine.encrypt("АБВ") == "ВБА"

    def test_output_length_matches_normalized_text(self):
        engine = RouteCipherEngine("4")
        assert len(engine.encrypt("раз, два, три!")) == len("РАЗДВАТРИ")

    @pytest.mark.parametrize("text", ["", "123 456", " ,.!?"])
    def test_empty_text(self, text):
        engine = RouteCipherEngine("3")
        with pytest.raises(EmptyTextError):
            engine.encrypt(text)

    def test_encrypt_does_not_change_key(self):
        engine = RouteCipherEngine("3")
        engine.encrypt("ПРИВЕТ")
        assert engine.get_key() == "3"


class TestRouteDecrypt:
    """Decryption."""

    def test_known_example(self):
        engine = RouteCipherEngine("3")
        assert engine.decrypt("ИТИТРЕРЕПВПВ") == "ПРИВЕТПРИВЕТ"

    def test_incomplete_last_row(self):
        engine = RouteCipherEngine("4")
        assert engine.decrypt("ВИИМРТПЕР") == "ПРИВЕТМИР"

    def test_single_column_is_identity(self):
        engine = RouteCipherEngine("1")
        assert engine.decrypt("ПРИВЕТ") == "ПРИВЕТ"

    def test_any_uppercase_text_is_accepted(self):
        """Texts not produced by encrypt still get a permutation."""
        engine = RouteCipherEngine("5")
        assert engine.decrypt("АБВ") == "ВБА"

    def test_roundtrip(self):
        """Test that encrypt followed by decrypt returns original."""
        plaintext = "ШИФРМАРШРУТНОЙПЕРЕСТАНОВКИ"
        for columns in range(1, len(plaintext) + 3):
            engine = RouteCipherEngine(str(columns))
            assert engine.decrypt(engine.encrypt(plaintext)) == plaintext

    def test_empty_text(self):
        engine = RouteCipherEngine("3")
        with pytest.raises(EmptyTextError):
            engine.decrypt("")

    @pytest.mark.parametrize("text", ["ПРИВЕт", "ПРИВЕТ1", "ПРИВЕТ!", "ПРИВЕТ МИР", "hello"])
    def test_invalid_cipher_text(self, text):
        engine = RouteCipherEngine("3")
        with pytest.raises(InvalidCipherTextError):
            engine.decrypt(text)

    def test_invalid_cipher_text_details(self):
        engine = RouteCipherEngine("3")
        with pytest.raises(InvalidCipherTextError) as exc_info:
            engine.decrypt("ПРИВЕТ МИР")
        assert exc_info.value.details == {"character": " ", "position": 6}


class TestRouteExplain:
    def test_explain(self):
        engine = RouteCipherEngine("4")
        explanation = engine.explain("ПРИВЕТМИР")

        assert "4 column" in explanation
        assert "3 row" in explanation
