from typing import Type

from app.core.exceptions import EngineNotFoundError
from app.models.schemas import CipherFamily, CipherType
from app.services.engines.base import CipherEngine


class EngineRegistry:
    """
    Registry for cipher engines.

    Manages available cipher engine classes and builds keyed instances.
    Engines hold their key, so unlike a stateless service every lookup
    through create() returns a fresh instance.
    """

    _engines: dict[CipherType, Type[CipherEngine]] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher engine class.

        Can be used as a decorator:
            @EngineRegistry.register
            class RouteCipherEngine(CipherEngine):
                ...

        Args:
            engine_class: The engine class to register

        Returns:
            The engine class (for decorator usage)
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    def get_engine_class(self, cipher_type: CipherType) -> Type[CipherEngine]:
        """
        Get the engine class for the specified cipher type.

        Raises:
            EngineNotFoundError: If no engine is registered for the type
        """
        try:
            return self._engines[cipher_type]
        except KeyError:
            raise EngineNotFoundError(str(cipher_type)) from None

    def create(self, cipher_type: CipherType, key: str) -> CipherEngine:
        """
        Build an engine instance keyed with ``key``.

        Args:
            cipher_type: The type of cipher
            key: The key string, validated by the engine

        Returns:
            Engine instance
        """
        return self.get_engine_class(cipher_type)(key)

    def get_engines_by_family(self, family: CipherFamily) -> list[Type[CipherEngine]]:
        """
        Get all engine classes belonging to a cipher family.

        Args:
            family: The cipher family

        Returns:
            List of engine classes
        """
        return [
            engine_class
            for engine_class in self._engines.values()
            if engine_class.cipher_family == family
        ]

    def get_all_engines(self) -> list[Type[CipherEngine]]:
        """
        Get all registered engine classes.

        Returns:
            List of all engine classes
        """
        return list(self._engines.values())

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """
        List all registered cipher types.

        Returns:
            List of registered cipher types
        """
        return list(cls._engines.keys())

    @classmethod
    def is_registered(cls, cipher_type: CipherType) -> bool:
        """
        Check if a cipher type is registered.

        Args:
            cipher_type: The cipher type to check

        Returns:
            True if registered
        """
        return cipher_type in cls._engines


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from app.services.engines.polyalphabetic import gronsfeld  # noqa: F401
    from app.services.engines.transposition import route  # noqa: F401


# Load engines when module is imported
_load_engines()
