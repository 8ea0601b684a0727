import logging
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd

from config.config import EVALUATOR_CONFIG, IO_CONFIG
from core import Tokenizer, ShuntingYard, RPNEvaluator, ExpressionError, tokens_to_string

logger = logging.getLogger(__name__)


class ExpressionEvaluator:
    """
    表达式求值入口：词法分析 -> 调度场 -> RPN求值
    每次求值都新建Token序列和栈，不保留任何中间状态
    """

    def __init__(self, x: Optional[float] = None):
        if x is None:
            x = EVALUATOR_CONFIG["default_variable_value"]
        # 变量绑定表；求值路径目前不读取它，变量按原样透传栈顶值
        self.variables: Dict[str, float] = {"x": float(x)}

    def postfix(self, expression: str) -> List:
        tokens = Tokenizer(expression).tokens()
        return ShuntingYard.to_postfix(tokens)

    def evaluate_strict(self, expression: str) -> float:
        """失败时抛出 ExpressionError"""
        return RPNEvaluator.evaluate(self.postfix(expression))

    def evaluate_detailed(self, expression: str) -> Tuple[Optional[float], Optional[str]]:
        """
        Returns:
            (result, None) 或失败时 (None, 错误描述)
        """
        try:
            return self.evaluate_strict(expression), None
        except ExpressionError as e:
            logger.debug(f"Failed to evaluate '{expression[:50]}': {e}")
            return None, str(e)

    def evaluate(self, expression: str) -> Optional[float]:
        result, _ = self.evaluate_detailed(expression)
        return result

    def evaluate_many(self, expressions: Iterable[str]) -> pd.Series:
        """
        批量求值
        Returns:
            以输入位置为索引的Series，失败处为NaN
        """
        expressions = list(expressions)
        results = [self.evaluate(expr) for expr in expressions]
        values = np.array([np.nan if r is None else r for r in results], dtype=float)
        return pd.Series(values, name=IO_CONFIG["result_column"])

    def describe(self, expression: str) -> str:
        """后缀形式的文本，失败时返回错误描述"""
        try:
            return tokens_to_string(self.postfix(expression))
        except ExpressionError as e:
            return f"<{e}>"


def evaluate(expression: str, x: Optional[float] = None) -> Optional[float]:
    """对单个表达式求值；任何表达式错误都只返回 None"""
    return ExpressionEvaluator(x).evaluate(expression)


def evaluate_many(expressions: Iterable[str], x: Optional[float] = None) -> pd.Series:
    return ExpressionEvaluator(x).evaluate_many(expressions)
