"""中缀 -> 后缀(RPN) 转换，调度场算法"""
import logging

from core.token_system import TokenType, LEFT_PAREN, tokens_to_string
from core.errors import MismatchedParenthesisError

logger = logging.getLogger(__name__)


class ShuntingYard:
    """把中缀Token序列重排为后缀顺序"""

    @staticmethod
    def _should_pop(top, operator):
        """
        栈顶是否要在当前二元操作符入栈前弹出
        - 函数和负号比任何二元操作符结合得更紧
        - 左括号挡住弹出
        """
        if top.type in (TokenType.FUNCTION, TokenType.NEGATE):
            return True
        if top.type == TokenType.LEFT_PAREN:
            return False
        assert top.type == TokenType.OPERATOR, f"Unexpected token on operator stack: {top}"

        p = top.value.precedence
        q = operator.precedence
        if top.value.is_left_associative:
            return p >= q
        return p > q

    @staticmethod
    def _pop_until_left_paren(operators, output):
        """弹出到输出直到遇到左括号（左括号丢弃）；返回是否找到"""
        while operators:
            token = operators.pop()
            if token == LEFT_PAREN:
                return True
            output.append(token)
        return False

    @staticmethod
    def to_postfix(tokens):
        """
        Args:
            tokens: 中缀顺序的Token序列
        Returns:
            后缀顺序的Token列表
        Raises:
            MismatchedParenthesisError
        """
        output = []
        operators = []

        for token in tokens:
            if token.type in (TokenType.NUMBER, TokenType.VARIABLE):
                output.append(token)

            elif token.type in (TokenType.LEFT_PAREN, TokenType.FUNCTION, TokenType.NEGATE):
                operators.append(token)

            elif token.type == TokenType.OPERATOR:
                while operators and ShuntingYard._should_pop(operators[-1], token.value):
                    output.append(operators.pop())
                operators.append(token)

            elif token.type == TokenType.RIGHT_PAREN:
                if not ShuntingYard._pop_until_left_paren(operators, output):
                    raise MismatchedParenthesisError(')')

        # 排空剩余的操作符；还能碰到左括号说明没有闭合
        if ShuntingYard._pop_until_left_paren(operators, output):
            raise MismatchedParenthesisError('(')

        assert not operators
        logger.debug(f"Postfix: {tokens_to_string(output)}")
        return output


def to_postfix(tokens):
    return ShuntingYard.to_postfix(tokens)
