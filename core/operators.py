"""core/operators.py"""
import numpy as np
import logging

logger = logging.getLogger(__name__)


class Operators:
    """所有操作符的静态方法集合（numpy float64，IEEE语义，不抛异常）"""

    # 二元操作符========================================
    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(all='ignore'):
            return np.float64(operand1) + np.float64(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(all='ignore'):
            return np.float64(operand1) * np.float64(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：除零得到 inf/nan 而不是异常"""
        with np.errstate(all='ignore'):
            return np.divide(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def pow(operand1, operand2):
        """幂运算：负数的非整数次幂为nan"""
        with np.errstate(all='ignore'):
            return np.power(np.float64(operand1), np.float64(operand2))

    # 一元操作符====================
    @staticmethod
    def neg(operand):
        return -np.float64(operand)

    @staticmethod
    def sin(operand):
        with np.errstate(all='ignore'):
            return np.sin(np.float64(operand))

    @staticmethod
    def cos(operand):
        with np.errstate(all='ignore'):
            return np.cos(np.float64(operand))

    @staticmethod
    def tan(operand):
        with np.errstate(all='ignore'):
            return np.tan(np.float64(operand))

    @staticmethod
    def apply(operator, operand1, operand2):
        """按操作符名字分派到对应的归约方法"""
        op_method = getattr(Operators, operator.name, None)
        assert op_method is not None, f"Unknown binary operator: {operator.symbol}"
        return op_method(operand1, operand2)

    @staticmethod
    def apply_function(function, operand):
        op_method = getattr(Operators, function.value)
        return op_method(operand)
