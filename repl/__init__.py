"""交互模块 - 结果历史与REPL"""
from .history import ResultHistory, HistoryReferenceError
from .session import ReplSession

__all__ = ['ResultHistory', 'HistoryReferenceError', 'ReplSession']
