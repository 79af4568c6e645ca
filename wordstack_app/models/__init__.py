"""Database models package for WordStack."""

from ..core.extensions import db

from .word import Sentence, Word, WordDetail

__all__ = [
    'db',
    'Sentence',
    'Word',
    'WordDetail',
]
