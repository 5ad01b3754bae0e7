"""表达式批量加载和计算模块"""
import logging

import numpy as np
import pandas as pd

from core.calculator import calculate

logger = logging.getLogger(__name__)


def load_expressions(file_path, column='expression'):
    """
    加载待计算的表达式。

    Parameters:
    - file_path: CSV文件（需包含column列）或纯文本文件（每行一个表达式）
    - column: CSV中的表达式列名, 默认为 'expression'

    Returns:
    - expressions: 表达式Series（已去掉空行）
    """
    logger.info(f"Loading expressions from {file_path}")

    if file_path.endswith('.csv'):
        df = pd.read_csv(file_path, dtype={column: str}, keep_default_na=False)
        # 确保表达式列存在
        if column not in df.columns:
            raise ValueError(f"Expression column '{column}' not found in {file_path}.")
        expressions = df[column]
    else:
        with open(file_path, 'r', encoding='utf-8') as f:
            expressions = pd.Series([line.rstrip('\n') for line in f], dtype=object)

    expressions = expressions[expressions.str.strip() != ''].reset_index(drop=True)
    expressions.name = 'expression'

    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def evaluate_expressions(expressions, is_degree_mode=True, right_associative_power=None):
    """
    逐个计算表达式，返回结果表

    Parameters:
    - expressions: 表达式序列（Series或list）
    - is_degree_mode: 三角函数是否按角度计算
    - right_associative_power: ^ 是否右结合，None 时取配置默认值

    Returns:
    - results: DataFrame，列为 expression / value（失败为NaN）/ error（成功为None）
    """
    rows = []
    for expression in expressions:
        result = calculate(expression, is_degree_mode, right_associative_power)
        rows.append({
            'expression': expression,
            'value': result.value if result.ok else np.nan,
            'error': result.error,
        })

    results = pd.DataFrame(rows, columns=['expression', 'value', 'error'])
    failed = results['error'].notna().sum()
    if failed:
        logger.warning(f"{failed} of {len(results)} expressions failed to evaluate")
    return results
