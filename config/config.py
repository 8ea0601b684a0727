"""配置文件"""
import math

# 求值参数
EVALUATOR_CONFIG = {
    "default_variable_value": 0.0,  # 未指定x时记录到变量表的值
    "variables": ["x", "y", "z"],
    "functions": ["sin", "cos", "tan"],
}

# 批量文件读写
IO_CONFIG = {
    "expression_column": "expression",
    "x_column": "x",
    "result_column": "result",
    "error_column": "error",
    "default_output_path": "expression_results.csv",
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    from core.token_system import OPERATOR_DEFINITIONS, VARIABLE_LITERALS, FUNCTION_LITERALS

    assert OPERATOR_DEFINITIONS['+'].precedence == 2, "'+' 优先级为2"
    assert OPERATOR_DEFINITIONS['*'].precedence == OPERATOR_DEFINITIONS['/'].precedence == 3
    assert OPERATOR_DEFINITIONS['^'].precedence == 4 and not OPERATOR_DEFINITIONS['^'].is_left_associative, \
        "'^' 为最高优先级且右结合"
    assert math.isfinite(EVALUATOR_CONFIG["default_variable_value"]), "默认变量值必须是有限数"
    assert tuple(EVALUATOR_CONFIG["variables"]) == VARIABLE_LITERALS
    assert tuple(EVALUATOR_CONFIG["functions"]) == FUNCTION_LITERALS

    columns = [IO_CONFIG[k] for k in ("expression_column", "x_column", "result_column", "error_column")]
    assert len(set(columns)) == len(columns), "列名不能重复"
    print("Configuration validated successfully!")
