"""Core data models for the CAH toolkit."""

from .models import Batch, Card, CardKind, Pack, PackFailure, RunTally

__all__ = [
    "Batch",
    "Card",
    "CardKind",
    "Pack",
    "PackFailure",
    "RunTally",
]
