# data_sources/local_git.py
import logging
from typing import Iterator, Optional

from .base import HistorySource
from context import RunContext
from exceptions import GitNotAvailableError, RepositoryNotFoundError
from models import CommitStats
import git_utils

logger = logging.getLogger(__name__)


class LocalGitHistorySource(HistorySource):
    """
    本地 Git 数据源实现。
    通过调用 git 命令行工具读取本地仓库的提交历史。
    """

    def __init__(self, context: RunContext):
        self.context = context
        self.git_binary = context.global_config.GIT_BINARY
        self._head: Optional[str] = None

    def validate(self) -> None:
        if not git_utils.is_git_available(self.git_binary):
            raise GitNotAvailableError(
                "git executable not found", {"git_binary": self.git_binary}
            )
        if not git_utils.is_git_repository(self.context.repo_path, self.git_binary):
            logger.error(f"❌ 指定路径不是 Git 仓库: {self.context.repo_path}")
            raise RepositoryNotFoundError(self.context.repo_path)

    def has_commits(self) -> bool:
        self._head = git_utils.resolve_head(self.context.repo_path, self.git_binary)
        return self._head is not None

    def iter_commit_stats(self) -> Iterator[CommitStats]:
        args = git_utils.build_hoc_log_args(self.context)
        output = git_utils.run_git_command(
            args, self.context.repo_path, self.git_binary, "读取提交历史"
        )
        return git_utils.parse_numstat(output)
