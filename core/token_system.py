"""core/token_system.py"""
from enum import Enum
from typing import NamedTuple, Any

import numpy as np


class TokenType(Enum):
    NUMBER = "number"  # 数字
    VARIABLE = "variable"  # 变量 x/y/z
    OPERATOR = "operator"  # 二元操作符
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    NEGATE = "negate"  # 一元负号
    FUNCTION = "function"  # sin/cos/tan


class Variable(Enum):
    # 目前只允许 x, y, z
    X = "x"
    Y = "y"
    Z = "z"


class Function(Enum):
    SIN = "sin"
    COS = "cos"
    TAN = "tan"


class Operator(NamedTuple):
    """二元操作符的固定元数据；name 是 Operators 中归约方法的名字"""
    symbol: str
    precedence: int
    is_left_associative: bool
    name: str


class Token(NamedTuple):
    """
    不可变Token
    Args:
        type: TokenType
        value: NUMBER为float, VARIABLE为Variable, OPERATOR为Operator,
               FUNCTION为Function, 括号和负号为None
    """
    type: TokenType
    value: Any = None

    @staticmethod
    def number(value):
        return Token(TokenType.NUMBER, float(value))

    @staticmethod
    def variable(tag):
        return Token(TokenType.VARIABLE, Variable(tag))

    @staticmethod
    def function(tag):
        return Token(TokenType.FUNCTION, Function(tag))

    @staticmethod
    def operator(symbol):
        return Token(TokenType.OPERATOR, OPERATOR_DEFINITIONS[symbol])

    def to_string(self):
        if self.type == TokenType.NUMBER:
            return _format_number(self.value)
        if self.type in (TokenType.VARIABLE, TokenType.FUNCTION):
            return self.value.value
        if self.type == TokenType.OPERATOR:
            return self.value.symbol
        return _MARKER_SYMBOLS[self.type]


# 操作符表：符号 -> (优先级, 左结合, 归约方法)
OPERATOR_DEFINITIONS = {
    '+': Operator('+', 2, True, 'add'),
    '*': Operator('*', 3, True, 'mul'),
    '/': Operator('/', 3, True, 'div'),
    '^': Operator('^', 4, False, 'pow'),  # 右结合
}

LEFT_PAREN = Token(TokenType.LEFT_PAREN)
RIGHT_PAREN = Token(TokenType.RIGHT_PAREN)
NEGATE = Token(TokenType.NEGATE)

_MARKER_SYMBOLS = {
    TokenType.LEFT_PAREN: '(',
    TokenType.RIGHT_PAREN: ')',
    TokenType.NEGATE: '-',
}

# 固定字面量 -> Token（数字除外）
TOKEN_DEFINITIONS = {
    # 变量
    'x': Token.variable('x'),
    'y': Token.variable('y'),
    'z': Token.variable('z'),

    # 操作符和括号
    '+': Token.operator('+'),
    '*': Token.operator('*'),
    '/': Token.operator('/'),
    '^': Token.operator('^'),
    '(': LEFT_PAREN,
    ')': RIGHT_PAREN,
    '-': NEGATE,

    # 函数
    'sin': Token.function('sin'),
    'cos': Token.function('cos'),
    'tan': Token.function('tan'),
}

VARIABLE_LITERALS = tuple(v.value for v in Variable)
FUNCTION_LITERALS = tuple(f.value for f in Function)
OPERATOR_LITERALS = tuple(OPERATOR_DEFINITIONS) + ('(', ')')


def _format_number(value):
    """整数值不带小数部分输出"""
    if np.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def tokens_to_string(tokens):
    """把Token序列还原成以空格分隔的文本"""
    return ' '.join(token.to_string() for token in tokens)
