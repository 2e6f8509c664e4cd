"""Domain port definitions for adapters."""

from __future__ import annotations

from .errors import StoreError
from .persistence import (
    NameFinder,
    PerformerNameFinderCreator,
    PerformerNameFinderCreatorUpdater,
    TagNameFinderCreator,
)
from .unit_of_work import ImportRepositories, ImportUnitOfWork, RepositoryCollection, UnitOfWork

__all__ = [
    "ImportRepositories",
    "ImportUnitOfWork",
    "NameFinder",
    "PerformerNameFinderCreator",
    "PerformerNameFinderCreatorUpdater",
    "RepositoryCollection",
    "StoreError",
    "TagNameFinderCreator",
    "UnitOfWork",
]
