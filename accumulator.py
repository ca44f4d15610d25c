# accumulator.py
"""
[V1.0] HoC 累加器
- 打开仓库 -> 遍历 HEAD 可达的提交 -> 逐提交 diff 统计 -> 累加
- 任一步骤失败都直接抛出，不返回部分结果
"""
import logging
from typing import Optional

from config import GlobalConfig
from context import RunContext
from data_sources.base import HistorySource
from data_sources.local_git import LocalGitHistorySource
from models import DiffStats

logger = logging.getLogger(__name__)


class HistoryAccumulator:
    """
    负责执行 HoC 计算的核心业务逻辑。
    """

    def __init__(self, context: RunContext, source: Optional[HistorySource] = None):
        self.context = context
        self.source = source or LocalGitHistorySource(context)

    def run(self) -> int:
        """
        执行核心业务流程，返回 files changed + insertions + deletions 的总和。
        """

        # --- 0. 验证数据源 ---
        self.source.validate()

        # --- 1. 空仓库 ---
        if not self.source.has_commits():
            logger.info("ℹ️ 仓库没有任何提交，HoC 为 0")
            return 0

        # --- 2. 逐提交累加 ---
        total = 0
        summary = DiffStats()
        commits = 0
        skipped = 0
        for commit in self.source.iter_commit_stats():
            commits += 1
            if commit.is_empty:
                # 合并提交、纯空白或仅子模块的修改
                skipped += 1
                logger.debug(f"{commit.sha[:10]}: 无统计，跳过")
                continue
            total += commit.total
            summary = summary + commit.stats
            logger.debug(
                f"{commit.sha[:10]}: {commit.stats.files_changed} files, "
                f"+{commit.stats.insertions} -{commit.stats.deletions}"
            )

        logger.info(
            f"✅ 共统计 {commits} 个提交 (其中 {skipped} 个无变更)，"
            f"{summary.files_changed} files, +{summary.insertions} -{summary.deletions}，"
            f"HoC = {total}"
        )
        return total


def hoc(
    find_renames_and_copies: bool,
    repo_path: str = ".",
    config: Optional[GlobalConfig] = None,
) -> int:
    """
    计算 repo_path 所在仓库的 hits-of-code。

    :param find_renames_and_copies: 是否启用重命名/复制检测 (较慢)
    :param repo_path: 仓库路径，默认为当前工作目录
    :param config: 全局配置，默认从环境变量加载
    """
    context = RunContext(
        repo_path=repo_path,
        find_renames_and_copies=find_renames_and_copies,
        global_config=config or GlobalConfig(),
    )
    return HistoryAccumulator(context).run()
