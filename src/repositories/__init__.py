"""Repositories package."""

from .snapshot_repository import BreedSnapshotRepository

__all__ = ["BreedSnapshotRepository"]
