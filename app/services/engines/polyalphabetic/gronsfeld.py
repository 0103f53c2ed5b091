from types import MappingProxyType
from typing import ClassVar, Mapping

from app.core.exceptions import EmptyKeyError, InvalidKeyError, OutOfAlphabetError
from app.models.schemas import CipherFamily, CipherType
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry
from app.services.preprocessing.normalizer import upper_letter

RUSSIAN_ALPHABET = "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ"


@EngineRegistry.register
class GronsfeldEngine(CipherEngine):
    """
    Gronsfeld cipher engine over the 33-letter Russian alphabet.

    A polyalphabetic substitution cipher: every keyword letter is replaced
    by its position in the alphabet, and that sequence of shifts is added
    to the text letter by letter, modulo 33, repeating as needed.

    Key "КЛЮЧ" gives shifts 11, 12, 31, 24:

    Text:   П  Р  И  В  Е  Т
            16 17 9  2  5  19
    Shift:  11 12 31 24 11 12
    Cipher: 27 29 7  26 16 31  ->  ЪЬЖЩПЮ
    """

    name = "Gronsfeld Cipher"
    cipher_type = CipherType.GRONSFELD
    cipher_family = CipherFamily.POLYALPHABETIC
    description = (
        "A polyalphabetic cipher where each letter is shifted by a number "
        "taken from a repeating key. The key is a word whose letters are "
        "turned into their positions in the 33-letter Russian alphabet."
    )

    ALPHABET: ClassVar[str] = RUSSIAN_ALPHABET
    LETTER_INDEX: ClassVar[Mapping[str, int]] = MappingProxyType(
        {letter: i for i, letter in enumerate(RUSSIAN_ALPHABET)}
    )

    def __init__(self, key: str) -> None:
        self._keyword = self._parse_key(key)
        self._key = tuple(self._to_indices(self._keyword))

    @property
    def key(self) -> tuple[int, ...]:
        return self._key

    def get_key(self) -> str:
        return self._keyword

    def encrypt(self, text: str) -> str:
        """Encrypt a text after filtering it to uppercase letters."""
        size = len(self.ALPHABET)
        work = self._to_indices(self.normalizer.normalize(text))
        return self._to_letters(
            (value + self._key[i % len(self._key)]) % size
            for i, value in enumerate(work)
        )

    def decrypt(self, text: str) -> str:
        """Decrypt a cipher text made of uppercase alphabet letters."""
        size = len(self.ALPHABET)
        work = self._to_indices(self.normalizer.validate_cipher_text(text))
        return self._to_letters(
            (value + size - self._key[i % len(self._key)]) % size
            for i, value in enumerate(work)
        )

    def explain(self, text: str) -> str:
        """Generate human-readable explanation."""
        shift_desc = ", ".join(
            f"{letter}={shift}" for letter, shift in zip(self._keyword, self._key)
        )
        return (
            f"Gronsfeld cipher with keyword '{self._keyword}' (length {len(self._key)}). "
            f"Letter shifts: {shift_desc}. "
            f"Each of the {len(text)} letter(s) is shifted by the corresponding "
            f"key number modulo {len(self.ALPHABET)}, the key repeating cyclically."
        )

    def _parse_key(self, key: str) -> str:
        """Check the keyword is made of letters and uppercase it."""
        if not key:
            raise EmptyKeyError()

        for position, char in enumerate(key):
            if not char.isalpha():
                raise InvalidKeyError(
                    "Invalid key - must contain only letters",
                    {"character": char, "position": position},
                )

        return "".join(upper_letter(c) for c in key)

    def _to_indices(self, text: str) -> list[int]:
        """Map letters to alphabet positions."""
        indices = []
        for position, char in enumerate(text):
            try:
                indices.append(self.LETTER_INDEX[char])
            except KeyError:
                raise OutOfAlphabetError(char, position, self.ALPHABET) from None
        return indices

    def _to_letters(self, indices) -> str:
        return "".join(self.ALPHABET[i] for i in indices)
