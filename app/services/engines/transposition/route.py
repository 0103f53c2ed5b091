import string
from collections.abc import Iterator

from app.core.exceptions import EmptyKeyError, InvalidKeyError, NonPositiveKeyError
from app.models.schemas import CipherFamily, CipherType
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class RouteCipherEngine(CipherEngine):
    """
    Route (table) transposition cipher engine.

    The text is written into a grid row by row, left to right, then read
    out column by column starting from the last column, top to bottom.
    Cells past the end of the text are absent, never padded.

    Example with 3 columns:

    Text:   ПРИВЕТПРИВЕТ
            ─────
            П Р И
            В Е Т
            П Р И
            В Е Т

    Read columns 2, 1, 0: ИТИТ РЕРЕ ПВПВ
    """

    name = "Route Transposition Cipher"
    cipher_type = CipherType.ROUTE
    cipher_family = CipherFamily.TRANSPOSITION
    description = (
        "A transposition cipher where the text is written into a table "
        "with a fixed number of columns by rows, then read out by columns "
        "from right to left, each column top to bottom."
    )

    def __init__(self, key: str) -> None:
        self._columns = self._parse_key(key)

    @property
    def columns(self) -> int:
        return self._columns

    def set_key(self, key: str) -> None:
        """Replace the column count. A rejected key leaves the old one in place."""
        self._columns = self._parse_key(key)

    def get_key(self) -> str:
        return str(self._columns)

    def encrypt(self, text: str) -> str:
        """Encrypt a text after filtering it to uppercase letters."""
        open_text = self.normalizer.normalize(text)
        return "".join(open_text[pos] for pos in self._route(len(open_text)))

    def decrypt(self, text: str) -> str:
        """
        Decrypt a cipher text.

        Characters are consumed in route order and put back at their grid
        positions. The length is not checked against the key, so any
        uppercase text yields some permutation.
        """
        cipher_text = self.normalizer.validate_cipher_text(text)
        result = [""] * len(cipher_text)
        for char, pos in zip(cipher_text, self._route(len(cipher_text))):
            result[pos] = char
        return "".join(result)

    def explain(self, text: str) -> str:
        """Describe the grid used for a text of this length."""
        n = len(text)
        rows = self._rows(n)
        return (
            f"Route transposition with {self._columns} column(s). "
            f"The {n} letter(s) fill {rows} row(s) left to right, top to bottom; "
            f"columns are read from the last to the first, each top to bottom."
        )

    def _rows(self, length: int) -> int:
        return (length + self._columns - 1) // self._columns

    def _route(self, length: int) -> Iterator[int]:
        """Yield grid positions in reading order for a text of ``length``."""
        columns = self._columns
        rows = self._rows(length)
        # Columns at or past ``length`` hold no cells
        for col in range(min(columns, length) - 1, -1, -1):
            for row in range(rows):
                pos = row * columns + col
                if pos < length:
                    yield pos

    @staticmethod
    def _parse_key(key: str) -> int:
        """Parse key to a positive column count."""
        if not key:
            raise EmptyKeyError()

        if not all(c in string.digits for c in key):
            raise InvalidKeyError(
                "Invalid key - must contain only digits",
                {"key": key},
            )

        try:
            columns = int(key)
        except ValueError:
            # More digits than int() will convert
            raise InvalidKeyError(
                "Invalid key - too large",
                {"key_length": len(key)},
            ) from None

        if columns <= 0:
            raise NonPositiveKeyError(columns)

        return columns
