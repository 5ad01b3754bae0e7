"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 计算器参数
CALCULATOR_CONFIG = {
    "degree_mode": True,  # 启动时默认按角度计算三角函数
    "right_associative_power": False,  # False: 2^3^2 = (2^3)^2 = 64
    "display_precision": 4,  # 非整数结果保留4位小数
}

# 历史记录配置
HISTORY_CONFIG = {
    "history_path": "calculator_history.csv",
    "max_entries": 100,
}

# 批量计算配置
BATCH_CONFIG = {
    "expression_column": "expression",
    "output_path": "evaluated_expressions.csv",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert isinstance(CALCULATOR_CONFIG["degree_mode"], bool), "degree_mode必须是布尔值"
    assert isinstance(CALCULATOR_CONFIG["right_associative_power"], bool), "right_associative_power必须是布尔值"
    assert 0 <= CALCULATOR_CONFIG["display_precision"] <= 15, "display_precision应在0..15之间"
    assert HISTORY_CONFIG["max_entries"] > 0, "max_entries必须为正数"
    logger.info("Configuration validated successfully!")
