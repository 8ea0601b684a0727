"""工具模块"""
from .summary import summarize_results

__all__ = ['summarize_results']
