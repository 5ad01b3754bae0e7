"""会话模块"""
from .calculator_session import CalculatorSession

__all__ = ['CalculatorSession']
