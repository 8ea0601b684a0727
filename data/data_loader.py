"""表达式批量数据的加载和保存"""
import pandas as pd
import numpy as np
import logging

from config.config import IO_CONFIG

logger = logging.getLogger(__name__)


def load_expressions(file_path, expression_column=None, x_column=None):
    """
    加载表达式批量文件。

    Parameters:
    - file_path: .csv 文件（需要包含表达式列，可选x列），或每行一个表达式的文本文件
    - expression_column: 表达式列名, 默认取 IO_CONFIG
    - x_column: x列名, 默认取 IO_CONFIG

    Returns:
    - DataFrame，列为 expression（以及存在时的 x）
    """
    expression_column = expression_column or IO_CONFIG['expression_column']
    x_column = x_column or IO_CONFIG['x_column']
    logger.info(f"Loading expressions from {file_path}")

    if str(file_path).lower().endswith('.csv'):
        # 全部按字符串读入，避免 '1.50' 之类的表达式被改写
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)

        # 确保表达式列存在
        if expression_column not in df.columns:
            raise ValueError(f"Expression column '{expression_column}' not found in {file_path}.")

        columns = [expression_column]
        if x_column in df.columns:
            columns.append(x_column)
        df = df[columns].copy()
        df[expression_column] = df[expression_column].fillna('')
        if x_column in df.columns:
            df[x_column] = pd.to_numeric(df[x_column], errors='coerce')
    else:
        with open(file_path, encoding='utf-8') as f:
            lines = [line.strip() for line in f]
        df = pd.DataFrame({expression_column: [line for line in lines if line]})

    df = df.rename(columns={expression_column: 'expression', x_column: 'x'})
    logger.info(f"Loaded {len(df)} expressions")
    return df


def apply_expressions(df, evaluator_factory):
    """
    对每一行求值，返回新增 result / error 两列的副本

    Parameters:
    - df: load_expressions 返回的 DataFrame
    - evaluator_factory: 以x值为参数创建 ExpressionEvaluator 的可调用对象
    """
    result_column = IO_CONFIG['result_column']
    error_column = IO_CONFIG['error_column']

    results = []
    errors = []
    for row in df.itertuples(index=False):
        x = getattr(row, 'x', None)
        if x is not None and np.isnan(x):
            x = None
        result, error = evaluator_factory(x).evaluate_detailed(row.expression)
        results.append(np.nan if result is None else result)
        errors.append(error or '')

    out = df.copy()
    out[result_column] = np.asarray(results, dtype=float)
    out[error_column] = errors

    failed = int((out[error_column] != '').sum())
    if failed:
        logger.warning(f"{failed} of {len(out)} expressions failed to evaluate")
    return out


def save_results(df, output_path=None):
    output_path = output_path or IO_CONFIG['default_output_path']
    logger.info(f"Saving results to {output_path}")
    df.to_csv(output_path, index=False)
    return output_path
