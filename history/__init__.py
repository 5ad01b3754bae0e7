"""历史记录模块"""
from .store import HistoryStore

__all__ = ['HistoryStore']
