"""Infrastructure providers."""

# Import bases
from .assistant import AssistantProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .assistant import ProdAssistantProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "AssistantProvider",
    "PersistenceProvider",
    "ProdAssistantProvider",
    "ProdPersistenceProvider",
]
