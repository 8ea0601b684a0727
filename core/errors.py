"""表达式处理过程中的错误类型"""


class ExpressionError(Exception):
    """所有可恢复的表达式错误的基类"""


class TokenizationError(ExpressionError):
    def __init__(self, position, remaining):
        self.position = position
        self.remaining = remaining
        super().__init__(f"Unrecognized input at position {position}: '{remaining}'")


class MismatchedParenthesisError(ExpressionError):
    def __init__(self, paren):
        self.paren = paren
        super().__init__(f"Mismatched '{paren}'")


class MissingOperandError(ExpressionError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"Missing operand for operator '{symbol}'")


class StackSizeError(ExpressionError):
    def __init__(self, size):
        self.size = size
        super().__init__(f"Expected 1 value on stack, found {size}")
