"""Schemas package."""

from .breed_schema import BreedRecord

__all__ = ["BreedRecord"]
