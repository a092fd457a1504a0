"""repl/session.py - 交互式 read-eval-print 循环"""
import logging
import sys

from config.config import REPL_CONFIG, CLI_CONFIG
from core import CalculatorError, evaluate
from repl.history import ResultHistory

logger = logging.getLogger(__name__)


class ReplSession:
    """逐行读取表达式，替换历史引用后求值，并把结果写入历史"""

    def __init__(self, history=None, read_line=input, stdout=None, stderr=None,
                 prompt=None, exit_commands=None):
        self.history = history if history is not None else ResultHistory(REPL_CONFIG["history_size"])
        self.read_line = read_line
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.prompt = prompt if prompt is not None else REPL_CONFIG["prompt"]
        self.exit_commands = set(exit_commands if exit_commands is not None
                                 else REPL_CONFIG["exit_commands"])

    def handle_line(self, line):
        """
        处理一行输入
        Returns:
            求值结果；输入有误时返回None（错误已输出）
        """
        try:
            expression = self.history.substitute(line)
            result = evaluate(expression)
        except CalculatorError as e:
            print(f"{CLI_CONFIG['error_prefix']}{e.message}", file=self.stderr)
            return None

        self.history.record(result)
        print(result, file=self.stdout)
        return result

    def run(self):
        """运行直到EOF或退出命令，返回退出码"""
        logger.info("Starting interactive session")
        while True:
            try:
                line = self.read_line(self.prompt)
            except (EOFError, KeyboardInterrupt):
                print(file=self.stdout)
                break

            line = line.strip()
            if not line:
                continue
            if line in self.exit_commands:
                break

            self.handle_line(line)

        logger.info(f"Interactive session finished with {len(self.history)} results in history")
        return 0
