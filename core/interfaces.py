"""Abstract base classes for dependency injection."""

from abc import ABC, abstractmethod


class EnrichmentProvider(ABC):
    """Abstract base class for the mnemonic/example text service."""

    @abstractmethod
    def get_mnemonic(self, char: str, romaji: str) -> tuple[dict, int]:
        """Get a mnemonic for a character.
        Returns ({mnemonic, examples: [{word, meaning}]}, elapsed_ms).
        Raises on transport errors or a malformed response."""
        pass


class StrokeDiagramProvider(ABC):
    """Abstract base class for stroke order diagrams."""

    @abstractmethod
    def get_diagram(self, char: str) -> str | None:
        """Get the stroke order SVG for a character. Returns None if not found."""
        pass
