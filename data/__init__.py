"""数据模块 - 表达式批量加载和计算"""
from .expression_loader import load_expressions, evaluate_expressions

__all__ = ['load_expressions', 'evaluate_expressions']
