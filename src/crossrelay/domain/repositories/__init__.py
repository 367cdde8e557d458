"""Domain repositories."""

from crossrelay.domain.repositories.memory_store import MemoryStore

__all__ = ["MemoryStore"]
