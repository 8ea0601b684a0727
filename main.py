"""主程序入口 - 命令行表达式计算器"""
import argparse
import logging
import sys

from config.config import *
from data.data_loader import load_expressions, apply_expressions, save_results
from expression.evaluator import ExpressionEvaluator
from utils.summary import summarize_results

logger = logging.getLogger(__name__)


def run_expressions(expressions, x=None, show_postfix=False):
    """逐个求值并打印；返回失败个数"""
    evaluator = ExpressionEvaluator(x)
    failures = 0
    for expr in expressions:
        if show_postfix:
            print(f"{expr}  ->  {evaluator.describe(expr)}")
        result, error = evaluator.evaluate_detailed(expr)
        if result is None:
            failures += 1
            print(f"{expr} = <{error}>")
        else:
            print(f"{expr} = {result}")
    return failures


def run_file(file_path, x=None, output_path=None):
    df = load_expressions(file_path)
    if x is not None:
        if 'x' in df.columns:
            df['x'] = df['x'].fillna(x)
        else:
            df['x'] = x

    results = apply_expressions(df, ExpressionEvaluator)

    summary = summarize_results(results[IO_CONFIG['result_column']],
                                failed_mask=results[IO_CONFIG['error_column']] != '')
    logger.info(f"Evaluated {summary['total']} expressions: "
                f"{summary['succeeded']} succeeded, {summary['failed']} failed")
    if summary['succeeded']:
        logger.info(f"min={summary['min']:.6g}, max={summary['max']:.6g}, mean={summary['mean']:.6g}")

    if output_path:
        save_results(results, output_path)
    else:
        print(results.to_string(index=False))
    return summary['failed']


def main(args):
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format=LOGGING_CONFIG['format']
    )

    if not args.expressions and not args.file:
        logger.error("No expressions given. Pass expressions or --file")
        return 2

    failures = 0
    if args.expressions:
        failures += run_expressions(args.expressions, x=args.x, show_postfix=args.postfix)
    if args.file:
        failures += run_file(args.file, x=args.x, output_path=args.output)

    if failures:
        logger.warning(f"{failures} expression(s) could not be evaluated")
    return 1 if failures else 0


def build_parser():
    parser = argparse.ArgumentParser(description="Arithmetic expression evaluator")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate, e.g. '4 + 2 * 3'"
    )
    parser.add_argument(
        "--x",
        type=float,
        default=None,
        help="Value recorded for the variable x"
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="CSV file with an 'expression' column, or a text file with one expression per line"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Where to save batch results (CSV)"
    )
    parser.add_argument(
        "--postfix",
        action="store_true",
        help="Also print the postfix (RPN) form of each expression"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        help="Logging level"
    )
    return parser


def cli():
    sys.exit(main(build_parser().parse_args()))


if __name__ == "__main__":
    cli()
