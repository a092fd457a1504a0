"""配置文件"""

# 交互模式参数
REPL_CONFIG = {
    "prompt": "calc> ",
    "history_size": 100,  # 保留最近100个结果，供 $? / ${N} 引用
    "exit_commands": ["exit", "quit"],
}

# 命令行参数
CLI_CONFIG = {
    "error_prefix": "Error: ",
    "error_exit_code": 1,
}

# 日志配置
LOGGING_CONFIG = {
    "level": "WARNING",
    "verbose_level": "DEBUG",  # --verbose 时使用
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert REPL_CONFIG["history_size"] >= 1, "history_size至少为1，否则$?无法引用"
    assert REPL_CONFIG["prompt"], "prompt不能为空"
    assert all(cmd == cmd.strip() and cmd for cmd in REPL_CONFIG["exit_commands"]), \
        "exit_commands不能包含空白"
    assert CLI_CONFIG["error_exit_code"] != 0, "错误退出码不能为0"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    assert LOGGING_CONFIG["verbose_level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
