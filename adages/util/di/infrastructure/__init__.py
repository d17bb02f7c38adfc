"""Infrastructure providers."""

# Import base
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .persistence import MemoryPersistenceProvider  # noqa: F401
from .persistence import PostgresPersistenceProvider  # noqa: F401

__all__ = [
    "MemoryPersistenceProvider",
    "PersistenceProvider",
    "PostgresPersistenceProvider",
]
