# exceptions.py
"""
[V1.0] HoC 异常体系
- 所有计算错误都向上抛出，由 cli.run_cli() 统一处理并以状态码 1 退出
"""
from typing import Any, Dict, Optional


class HocError(Exception):
    """HoC 所有错误的基类"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigurationError(HocError):
    """环境变量 / .env 配置无效"""


class GitNotAvailableError(HocError):
    """找不到 git 可执行文件"""


class RepositoryNotFoundError(HocError):
    """指定路径不是 Git 仓库"""

    def __init__(self, repo_path: str):
        super().__init__("not a git repository", {"repo_path": repo_path})
        self.repo_path = repo_path


class HistoryError(HocError):
    """HEAD、提交、树或 diff 无法读取"""


class GitCommandError(HistoryError):
    """
    git 子进程失败。
    区分两种情况: 正常退出但状态码非 0，以及被信号终止 (returncode < 0)。
    """

    def __init__(self, command: str, returncode: int, stderr: str = ""):
        if returncode < 0:
            message = f"{command} killed by signal {-returncode}"
        else:
            message = f"{command} exited with status {returncode}"
        super().__init__(message, {"stderr": stderr.strip()} if stderr.strip() else None)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr

    @property
    def killed_by_signal(self) -> bool:
        return self.returncode < 0
