"""数据模块 - 表达式批量文件的读写"""
from .data_loader import load_expressions, apply_expressions, save_results

__all__ = ['load_expressions', 'apply_expressions', 'save_results']
