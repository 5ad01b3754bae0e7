"""history/store.py - 计算历史记录，CSV持久化"""
import logging
import os

import pandas as pd

from utils.formatting import format_result

logger = logging.getLogger(__name__)

HISTORY_COLUMNS = ['expression', 'result']


class HistoryStore:

    def __init__(self, max_entries=100):
        self.max_entries = max_entries
        self._entries = []  # [(expression, value), ...]，旧的在前

    def __len__(self):
        return len(self._entries)

    def add(self, expression, value):
        """追加一条记录，超过上限时丢弃最旧的"""
        self._entries.append((expression, float(value)))
        if len(self._entries) > self.max_entries:
            dropped = len(self._entries) - self.max_entries
            del self._entries[:dropped]
            logger.debug(f"History trimmed by {dropped} entries")

    @property
    def entries(self):
        return list(self._entries)

    def lines(self, precision=4):
        """渲染成 'expr = result' 文本行"""
        return [f"{expr} = {format_result(value, precision)}" for expr, value in self._entries]

    def clear(self):
        self._entries.clear()

    def to_frame(self):
        return pd.DataFrame(self._entries, columns=HISTORY_COLUMNS)

    def save(self, path):
        self.to_frame().to_csv(path, index=False)
        logger.info(f"Saved {len(self._entries)} history entries to {path}")

    @classmethod
    def load(cls, path, max_entries=100):
        """
        从CSV加载历史；文件不存在时返回空历史

        Parameters:
        - path: CSV文件路径
        - max_entries: 保留的最大条数

        Returns:
        - HistoryStore
        """
        store = cls(max_entries=max_entries)
        if not os.path.exists(path):
            logger.info(f"No history file at {path}, starting empty")
            return store

        df = pd.read_csv(path, dtype={'expression': str})
        missing = [col for col in HISTORY_COLUMNS if col not in df.columns]
        if missing:
            raise ValueError(f"History file {path} is missing columns: {missing}")

        values = pd.to_numeric(df['result'], errors='coerce')
        for expression, value in zip(df['expression'].fillna(''), values):
            store.add(expression, value)
        logger.info(f"Loaded {len(store)} history entries from {path}")
        return store
