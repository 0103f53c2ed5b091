from typing import Any


class CipherError(Exception):
    """Base exception for all cipher errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CipherError):
    """Raised when input validation fails."""

    pass


class KeyValidationError(ValidationError):
    """Raised when a cipher key is malformed."""

    pass


class EmptyKeyError(KeyValidationError):
    """Raised when the key string is empty."""

    def __init__(self) -> None:
        super().__init__("Empty key")


class InvalidKeyError(KeyValidationError):
    """Raised when the key contains characters the cipher does not accept."""

    pass


class NonPositiveKeyError(InvalidKeyError):
    """Raised when a numeric key parses to zero."""

    def __init__(self, value: int):
        super().__init__(
            "Key must be greater than 0",
            {"value": value},
        )


class TextValidationError(ValidationError):
    """Raised when an open text or cipher text is malformed."""

    pass


class EmptyTextError(TextValidationError):
    """Raised when the text is empty, or empty after filtering to letters."""

    pass


class InvalidCipherTextError(TextValidationError):
    """Raised when cipher text contains anything but uppercase letters."""

    def __init__(self, character: str, position: int):
        super().__init__(
            "Invalid cipher text - must contain only uppercase letters",
            {"character": character, "position": position},
        )


class OutOfAlphabetError(ValidationError):
    """Raised when a letter is not part of the cipher's working alphabet."""

    def __init__(self, character: str, position: int, alphabet: str):
        super().__init__(
            f"Letter '{character}' at position {position} is not in the alphabet {alphabet}",
            {"character": character, "position": position, "alphabet": alphabet},
        )


class EngineError(CipherError):
    """Base exception for cipher engine errors."""

    pass


class EngineNotFoundError(EngineError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )
