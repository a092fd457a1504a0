"""repl/history.py - 交互模式的结果历史与 $? / ${N} 替换"""
import logging
import re
from collections import deque

from core.errors import CalculatorError

logger = logging.getLogger(__name__)

# $? 或 ${N}
REFERENCE_PATTERN = re.compile(r'\$\?|\$\{(\d+)\}')


class HistoryReferenceError(CalculatorError):
    def __init__(self, reference, available):
        self.reference = reference
        self.available = available
        super().__init__(
            f"history reference {reference} is not available ({available} results stored)"
        )


class ResultHistory:
    """
    保存最近的求值结果。
    ${1} 与 $? 都指最近一次结果，${2} 指再前一次，以此类推。
    """

    def __init__(self, history_size=100):
        self.history_size = history_size
        self._results = deque(maxlen=history_size)

    def __len__(self):
        return len(self._results)

    def record(self, result):
        self._results.append(result)

    def get(self, n):
        """返回倒数第n个结果（n从1开始）"""
        if n < 1 or n > len(self._results):
            raise HistoryReferenceError(f"${{{n}}}", len(self._results))
        return self._results[-n]

    @staticmethod
    def _format(value):
        # 不支持一元负号，负数写成 (0 - k)
        if value < 0:
            return f"(0 - {-value})"
        return str(value)

    def substitute(self, line):
        """把行内所有 $? / ${N} 替换为对应的历史结果"""

        def replace(match):
            if match.group(0) == '$?':
                if not self._results:
                    raise HistoryReferenceError('$?', 0)
                value = self._results[-1]
            else:
                value = self.get(int(match.group(1)))
            return self._format(value)

        substituted = REFERENCE_PATTERN.sub(replace, line)
        if substituted != line:
            logger.debug(f"History substitution: {line!r} -> {substituted!r}")
        return substituted
