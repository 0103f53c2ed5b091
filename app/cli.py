"""
Interactive cipher shell.

Usage:
    cipher-shell route [--key 4]
    cipher-shell gronsfeld [--key КЛЮЧ]
"""

import argparse
import logging
import sys
from typing import TextIO

from app.core.config import get_settings
from app.core.exceptions import CipherError
from app.core.logging import configure_logging
from app.models.schemas import CipherType
from app.services.diagnostics.self_test import CheckResult, run_self_test
from app.services.engines.base import CipherEngine
from app.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)

KEY_PROMPTS = {
    CipherType.ROUTE: "Enter key (number of columns): ",
    CipherType.GRONSFELD: "Enter key: ",
}


class CipherShell:
    """Menu-driven read-eval loop around one keyed cipher engine."""

    def __init__(
        self,
        cipher_type: CipherType,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ):
        self.cipher_type = cipher_type
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.registry = EngineRegistry()

    @property
    def has_self_test(self) -> bool:
        return self.cipher_type == CipherType.GRONSFELD

    def run(self, key: str | None = None) -> int:
        """
        Run the shell until the user exits or input ends.

        Returns:
            Process exit status: 1 if the key is rejected, 0 otherwise
        """
        if key is None:
            key = self._prompt(KEY_PROMPTS[self.cipher_type])
            if key is None:
                return 0
            if self.cipher_type == CipherType.ROUTE:
                key = key.strip()

        try:
            cipher = self.registry.create(self.cipher_type, key)
        except CipherError as e:
            self._error(f"Cipher initialization error: {e.message}")
            self._error("The program is terminated because of the key error.")
            return 1

        self._print(f"Key loaded: {cipher.get_key()}")
        logger.debug("Shell started with %r", cipher)

        while True:
            self._print_menu()
            choice = self._prompt("Choose an operation: ")
            if choice is None or choice.strip() == "0":
                self._print("Exiting.")
                return 0

            choice = choice.strip()
            if choice in ("1", "2"):
                self._process_text(cipher, choice == "1")
            elif choice == "3" and self.has_self_test:
                self._self_test(key)
            else:
                self._print(f"Invalid operation! Choose one of {self._valid_choices()}")

    def _process_text(self, cipher: CipherEngine, encrypt: bool) -> None:
        text = self._prompt("Enter text: ")
        if text is None:
            return

        try:
            if encrypt:
                result = cipher.encrypt(text)
                self._print(f"Source text: {text}")
                self._print(f"Encrypted text: {result}")
            else:
                result = cipher.decrypt(text)
                self._print(f"Source text: {text}")
                self._print(f"Decrypted text: {result}")
        except CipherError as e:
            logger.debug("Operation failed: %s", e.message)
            self._error(f"Text processing error: {e.message}")
            self._error("Please check the format of the entered text.")

    def _self_test(self, key: str) -> None:
        self._print("=== Self-test ===")
        for result in run_self_test(key):
            self._print_check(result)

    def _print_check(self, result: CheckResult) -> None:
        if result.error is not None:
            self._print(f"Error: {result.error}")
        else:
            self._print(f"key={result.key}")
            self._print(f"Text={result.text}")
            self._print(f"cipherText={result.cipher_text}")
            self._print(f"decryptedText={result.decrypted_text}")
            self._print("Ok" if result.ok else "Err")
        self._print("")

    def _print_menu(self) -> None:
        self._print("")
        self._print("=========== MENU ===========")
        self._print("1 - Encrypt text")
        self._print("2 - Decrypt text")
        if self.has_self_test:
            self._print("3 - Run built-in self-test")
        self._print("0 - Exit")

    def _valid_choices(self) -> str:
        return "0, 1, 2 or 3" if self.has_self_test else "0, 1 or 2"

    def _prompt(self, message: str) -> str | None:
        self.stdout.write(message)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\n")

    def _print(self, message: str) -> None:
        print(message, file=self.stdout)

    def _error(self, message: str) -> None:
        print(message, file=self.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cipher-shell",
        description="Interactive route / Gronsfeld cipher shell",
    )
    parser.add_argument(
        "cipher",
        choices=[cipher_type.value for cipher_type in EngineRegistry.list_registered()],
        help="Cipher to use",
    )
    parser.add_argument("-k", "--key", help="Cipher key (prompted for when omitted)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(get_settings().log_level)
    return CipherShell(CipherType(args.cipher)).run(args.key)


if __name__ == "__main__":
    sys.exit(main())
