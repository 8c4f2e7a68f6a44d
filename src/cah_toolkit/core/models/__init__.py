"""
Core Models Package

Data models shared by the loader, batcher, renderer and processor.

Cards, Packs and Batches are frozen dataclasses: a Batch is only a view
over a Pack's cards, so nothing downstream of parsing mutates a Card.
RunTally is the one mutable model and is passed around explicitly.
"""

from .cards import Card, CardKind, Pack
from .batches import Batch
from .tally import PackFailure, RunTally

__all__ = [
    "Card",
    "CardKind",
    "Pack",
    "Batch",
    "PackFailure",
    "RunTally",
]
