"""主程序入口 - 脚本模式与交互模式"""
import argparse
import logging
import sys

from config.config import *
from core import CalculatorError, evaluate
from repl import ReplSession, ResultHistory

logger = logging.getLogger(__name__)


def setup_logging(verbose=False):
    level = LOGGING_CONFIG["verbose_level"] if verbose else LOGGING_CONFIG["level"]
    logging.basicConfig(
        level=getattr(logging, level),
        format=LOGGING_CONFIG["format"]
    )


def run_script(expression_parts, stdout=None, stderr=None):
    """脚本模式：把剩余参数拼成一个表达式，输出结果或错误"""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    expression = ' '.join(expression_parts)
    logger.info(f"Script mode expression: {expression!r}")

    try:
        result = evaluate(expression)
    except CalculatorError as e:
        print(f"{CLI_CONFIG['error_prefix']}{e.message}", file=stderr)
        return CLI_CONFIG["error_exit_code"]

    print(result, file=stdout)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        description="Integer expression calculator (+ - * / and parentheses)"
    )
    parser.add_argument(
        "expression",
        nargs="*",
        help="Expression to evaluate; omit to start interactive mode"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every evaluation stage at DEBUG level"
    )
    parser.add_argument(
        "--history_size",
        type=int,
        default=REPL_CONFIG["history_size"],
        help="Number of results kept for $? and ${N} in interactive mode"
    )
    return parser


def main(args):
    validate_config()
    setup_logging(args.verbose)

    if args.expression:
        return run_script(args.expression)

    if args.history_size < 1:
        logger.error(f"Invalid history size: {args.history_size}")
        return CLI_CONFIG["error_exit_code"]

    session = ReplSession(history=ResultHistory(args.history_size))
    return session.run()


def cli():
    parser = build_parser()
    sys.exit(main(parser.parse_args()))


if __name__ == "__main__":
    cli()
