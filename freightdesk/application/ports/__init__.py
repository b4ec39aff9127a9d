"""Application ports package."""

from .database import DatabaseEnginePort
from .records_repository import RecordsRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "RecordsRepositoryPort",
]
