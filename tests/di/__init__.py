"""Mock providers for testing."""

from .assistant import MockAssistantProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockAssistantProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
