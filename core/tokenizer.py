"""词法分析器 - 把去掉空白的表达式文本切分成Token序列"""
import re
import logging

from core.token_system import (
    Token, TOKEN_DEFINITIONS, VARIABLE_LITERALS, FUNCTION_LITERALS, OPERATOR_LITERALS
)
from core.errors import TokenizationError

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r'[0-9.]+')


def _parse_number(text, pos):
    match = _NUMBER_RE.match(text, pos)
    if not match:
        return None
    try:
        value = float(match.group())
    except ValueError:
        # 例如 '1.2.3' 或单独的 '.'
        return None
    return Token.number(value), match.end()


def _parse_variable(text, pos):
    if text[pos] in VARIABLE_LITERALS:
        return TOKEN_DEFINITIONS[text[pos]], pos + 1
    return None


def _parse_operator(text, pos):
    char = text[pos]
    if char in OPERATOR_LITERALS:
        return TOKEN_DEFINITIONS[char], pos + 1
    if char == '-':
        # 向前看一个字符：'--' 不是合法的负号
        if text.startswith('-', pos + 1):
            return None
        return TOKEN_DEFINITIONS['-'], pos + 1
    return None


def _parse_function(text, pos):
    for literal in FUNCTION_LITERALS:
        if text.startswith(literal, pos):
            return TOKEN_DEFINITIONS[literal], pos + len(literal)
    return None


# 按固定优先级依次尝试
_RULES = (_parse_number, _parse_variable, _parse_operator, _parse_function)


def strip_whitespace(text):
    return ''.join(c for c in text if not c.isspace())


def iter_tokens(text):
    """
    惰性地产生Token
    Args:
        text: 已去掉空白的表达式
    Raises:
        TokenizationError: 当前位置没有任何规则匹配
    """
    pos = 0
    while pos < len(text):
        for rule in _RULES:
            parsed = rule(text, pos)
            if parsed is not None:
                token, pos = parsed
                yield token
                break
        else:
            raise TokenizationError(pos, text[pos:])


class Tokenizer:

    def __init__(self, text):
        self.input = strip_whitespace(text)

    def __iter__(self):
        return iter_tokens(self.input)

    def tokens(self):
        """完整地切分输入；任何未消费的剩余输入都视为失败"""
        tokens = list(iter_tokens(self.input))
        logger.debug(f"Tokenized '{self.input}' into {len(tokens)} tokens")
        return tokens


def tokenize(text):
    return Tokenizer(text).tokens()
