from .base import BaseDatabase
from .challenge import ChallengeMixin
from .history import HistoryMixin
from .system import SystemMixin

__all__ = [
    "BaseDatabase",
    "ChallengeMixin",
    "HistoryMixin",
    "SystemMixin",
]
