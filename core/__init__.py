"""核心模块 - Token系统、词法分析、调度场转换、RPN评估器和操作符"""
from .token_system import (
    TokenType, Token, Variable, Function, Operator, OPERATOR_DEFINITIONS,
    TOKEN_DEFINITIONS, LEFT_PAREN, RIGHT_PAREN, NEGATE, tokens_to_string
)
from .errors import (
    ExpressionError, TokenizationError, MismatchedParenthesisError,
    MissingOperandError, StackSizeError
)
from .tokenizer import Tokenizer, tokenize, iter_tokens
from .shunting_yard import ShuntingYard, to_postfix
from .rpn_evaluator import RPNEvaluator
from .operators import Operators

__all__ = [
    'TokenType', 'Token', 'Variable', 'Function', 'Operator', 'OPERATOR_DEFINITIONS',
    'TOKEN_DEFINITIONS', 'LEFT_PAREN', 'RIGHT_PAREN', 'NEGATE', 'tokens_to_string',
    'ExpressionError', 'TokenizationError', 'MismatchedParenthesisError',
    'MissingOperandError', 'StackSizeError',
    'Tokenizer', 'tokenize', 'iter_tokens', 'ShuntingYard', 'to_postfix',
    'RPNEvaluator', 'Operators'
]
