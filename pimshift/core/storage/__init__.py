from .base import CatalogRepositories, EntityManager, Repository
from .memory import InMemoryEntityManager, InMemoryRepository, build_in_memory_catalog

__all__ = [
    "CatalogRepositories",
    "EntityManager",
    "InMemoryEntityManager",
    "InMemoryRepository",
    "Repository",
    "build_in_memory_catalog",
]
