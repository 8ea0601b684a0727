"""utils/summary.py"""
import numpy as np


def summarize_results(results, failed_mask=None):
    """
    批量求值结果的统计；inf/nan不参与min/max/mean
    Args:
        results: 结果Series或数组
        failed_mask: 失败行的布尔掩码；缺省时把NaN视为失败
    """
    arr = np.asarray(getattr(results, 'values', results), dtype=float).ravel()

    if failed_mask is None:
        failed = np.isnan(arr)
    else:
        # 0/0 之类的合法结果也是NaN，只能靠调用方给出的错误信息区分
        failed = np.asarray(getattr(failed_mask, 'values', failed_mask), dtype=bool).ravel()
    finite = arr[np.isfinite(arr) & ~failed]

    summary = {
        'total': int(arr.size),
        'succeeded': int((~failed).sum()),
        'failed': int(failed.sum()),
    }
    if finite.size == 0:
        summary.update({'min': np.nan, 'max': np.nan, 'mean': np.nan})
    else:
        summary.update({
            'min': float(finite.min()),
            'max': float(finite.max()),
            'mean': float(finite.mean()),
        })
    return summary
