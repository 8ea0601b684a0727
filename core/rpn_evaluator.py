"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.token_system import TokenType, tokens_to_string
from core.operators import Operators
from core.errors import MissingOperandError, StackSizeError

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(postfix_tokens):
        """
        评估后缀Token序列
        Args:
            postfix_tokens: 后缀顺序的Token序列
        Returns:
            float结果
        Raises:
            MissingOperandError: 二元操作符的操作数不足
            StackSizeError: 结束时栈中不是恰好一个值
        """
        stack = []

        for token in postfix_tokens:
            if token.type == TokenType.NUMBER:
                stack.append(token.value)

            elif token.type == TokenType.VARIABLE:
                # 变量不做替换：原样弹出再压回栈顶的值
                if stack:
                    stack.append(stack.pop())

            elif token.type == TokenType.FUNCTION:
                # 栈空时静默跳过
                if stack:
                    stack.append(Operators.apply_function(token.value, stack.pop()))

            elif token.type == TokenType.NEGATE:
                if stack:
                    stack.append(Operators.neg(stack.pop()))

            elif token.type == TokenType.OPERATOR:
                operator = token.value
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {operator.symbol}")
                    raise MissingOperandError(operator.symbol)
                operand2 = stack.pop()
                operand1 = stack.pop()
                stack.append(Operators.apply(operator, operand1, operand2))

            else:
                raise AssertionError(f"Unexpected token {token} during calculation")

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluating "
                         f"'{tokens_to_string(postfix_tokens)}'")
            raise StackSizeError(len(stack))
        return float(stack[0])
