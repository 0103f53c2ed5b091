from dataclasses import dataclass

from app.core.exceptions import EmptyTextError, InvalidCipherTextError


def upper_letter(char: str) -> str:
    """Uppercase a lowercase letter, keeping letters whose uppercase form is not one character."""
    if not char.islower():
        return char
    upper = char.upper()
    return upper if len(upper) == 1 else char


@dataclass
class NormalizedText:
    """Result of text normalization."""

    text: str
    original: str
    removed_chars: dict[str, int]


class TextNormalizer:
    """
    Prepares texts for the ciphers.

    Handles:
    - Open text: keep letters only, uppercase lowercase ones
    - Cipher text: accept uppercase letters only, no filtering

    Letter and case tests are Unicode-aware (``str.isalpha``, ``str.isupper``),
    so letters outside a cipher's working alphabet pass through here and are
    caught by the cipher itself.
    """

    def normalize(self, text: str) -> str:
        """
        Normalize an open text.

        Args:
            text: Raw input text

        Returns:
            Letters of the text, uppercased

        Raises:
            EmptyTextError: If no letters remain
        """
        return self.normalize_full(text).text

    def normalize_full(self, text: str) -> NormalizedText:
        """
        Normalize an open text and return detailed result.

        Args:
            text: Raw input text

        Returns:
            NormalizedText with counts of the discarded characters
        """
        removed_chars: dict[str, int] = {}
        result = []

        for char in text:
            if char.isalpha():
                result.append(upper_letter(char))
            else:
                removed_chars[char] = removed_chars.get(char, 0) + 1

        if not result:
            raise EmptyTextError("Empty open text", {"removed_chars": removed_chars})

        return NormalizedText(
            text="".join(result),
            original=text,
            removed_chars=removed_chars,
        )

    def validate_cipher_text(self, text: str) -> str:
        """
        Check that a cipher text is non-empty and made of uppercase letters.

        Returns:
            The text unchanged
        """
        if not text:
            raise EmptyTextError("Empty cipher text")

        for position, char in enumerate(text):
            if not char.isupper():
                raise InvalidCipherTextError(char, position)

        return text
