"""Tests for the built-in Gronsfeld self-test."""

from app.services.diagnostics.self_test import run_check, run_self_test


class TestRunCheck:
    def test_successful_check(self):
        result = run_check("ПРИВЕТ", "КЛЮЧ")

        assert result.ok
        assert result.cipher_text == "ЪЬЖЩПЮ"
        assert result.decrypted_text == "ПРИВЕТ"
        assert result.error is None

    def test_normalized_text_does_not_match(self):
        """Decryption returns the normalized text, so lowercase input fails the comparison."""
        result = run_check("привет", "КЛЮЧ")

        assert result.error is None
        assert result.decrypted_text == "ПРИВЕТ"
        assert not result.ok

    def test_errors_are_recorded(self):
        result = run_check("ПРИВЕТ", "ЭХО123")

        assert not result.ok
        assert result.error_type == "InvalidKeyError"
        assert result.cipher_text is None

    def test_corrupted_cipher_text(self):
        result = run_check("ПРИВЕТ", "КЛЮЧ", corrupt=True)

        assert not result.ok
        assert result.cipher_text == "ъЬЖЩПЮ"
        assert result.error_type == "InvalidCipherTextError"


class TestRunSelfTest:
    def test_builtin_checks(self):
        results = run_self_test("КЛЮЧ")

        assert [r.error_type for r in results] == [
            None,
            "InvalidKeyError",
            "EmptyKeyError",
            "EmptyTextError",
            "EmptyTextError",
            "InvalidCipherTextError",
        ]
        assert [r.ok for r in results] == [True, False, False, False, False, False]

    def test_invalid_user_key(self):
        """A bad user key makes every check report an error."""
        results = run_self_test("KEY")

        assert all(r.error is not None for r in results)
        assert results[0].error_type == "OutOfAlphabetError"
