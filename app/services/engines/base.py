from abc import ABC, abstractmethod

from app.models.schemas import CipherFamily, CipherType
from app.services.preprocessing.normalizer import TextNormalizer


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    An engine is built with its key and validates it on construction.
    Each cipher implementation must provide:
    - encrypt(): Encrypt an open text
    - decrypt(): Decrypt a cipher text
    - get_key(): Current key in its textual form
    - explain(): Generate human-readable explanation
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str

    normalizer = TextNormalizer()

    @abstractmethod
    def __init__(self, key: str) -> None:
        """
        Validate the key and build the cipher state.

        Raises:
            KeyValidationError: If the key is malformed
        """

    @abstractmethod
    def encrypt(self, text: str) -> str:
        """
        Encrypt an open text.

        Args:
            text: Raw open text, normalized before use

        Returns:
            Ciphertext
        """
        pass

    @abstractmethod
    def decrypt(self, text: str) -> str:
        """
        Decrypt a cipher text.

        Args:
            text: Cipher text made of uppercase letters only

        Returns:
            Plaintext
        """
        pass

    @abstractmethod
    def get_key(self) -> str:
        """Return the key as a string."""
        pass

    @abstractmethod
    def explain(self, text: str) -> str:
        """
        Generate human-readable explanation of how a text is processed.

        Args:
            text: The text the cipher was applied to

        Returns:
            Explanation string
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.get_key()!r})"
