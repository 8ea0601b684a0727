"""表达式模块 - 对外的求值接口"""
from .evaluator import ExpressionEvaluator, evaluate, evaluate_many

__all__ = ['ExpressionEvaluator', 'evaluate', 'evaluate_many']
