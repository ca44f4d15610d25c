# config.py
"""
[V1.0] 全局配置
- 从脚本目录的 .env (或 CWD 向上查找) 加载环境变量
- stdout 只用于输出 HoC 结果，这里不做任何 print
"""
import logging
import os
from typing import List, Optional

from dotenv import load_dotenv

from exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# --- 脚本基础路径 ---
SCRIPT_BASE_PATH = os.path.abspath(os.path.dirname(__file__))
env_path = os.path.join(SCRIPT_BASE_PATH, ".env")
if os.path.exists(env_path):
    load_dotenv(env_path)
    logger.debug(f"已从脚本目录加载 .env: {env_path}")
else:
    load_dotenv()


class GlobalConfig:
    """
    HoC 的全局应用配置。
    """

    # --- 环境变量 ---
    GIT_BINARY: str = os.getenv("HOC_GIT_BINARY", "git")
    LOG_LEVEL: str = os.getenv("HOC_LOG_LEVEL", "WARNING")
    SIMILARITY_THRESHOLD: str = os.getenv("HOC_SIMILARITY_THRESHOLD", "")

    # --- Git 命令参数 ---
    # 与 Ruby 版 hoc 的 git log 调用保持一致
    GIT_LOG_ARGS: List[str] = [
        "log",
        "--pretty=tformat:%H",
        "--numstat",
        "--ignore-space-change",
        "--ignore-all-space",
        "--ignore-submodules",
        "--no-color",
        "--no-ext-diff",
        "--no-textconv",
    ]
    # added, copied, deleted, modified
    DIFF_FILTER: str = "ACDM"
    # 根提交视为与空树的比较，不受用户 log.showRoot 设置影响；
    # 在子目录中运行时仍统计整个仓库，不受 diff.relative 影响
    GIT_CONFIG_OVERRIDES: List[str] = ["log.showRoot=true", "diff.relative=false"]

    def get_log_level(self) -> int:
        """将 LOG_LEVEL 名称解析为 logging 级别"""
        level = logging.getLevelName(self.LOG_LEVEL.strip().upper())
        if not isinstance(level, int):
            raise ConfigurationError(
                "invalid log level", {"HOC_LOG_LEVEL": self.LOG_LEVEL}
            )
        return level

    def get_similarity_threshold(self) -> Optional[int]:
        """
        解析重命名/复制检测的相似度阈值 (百分比)。
        未设置时返回 None，由 git 使用默认值 (50%)。
        """
        raw = self.SIMILARITY_THRESHOLD.strip().rstrip("%")
        if not raw:
            return None
        if not raw.isdigit() or int(raw) > 100:
            raise ConfigurationError(
                "similarity threshold must be an integer between 0 and 100",
                {"HOC_SIMILARITY_THRESHOLD": self.SIMILARITY_THRESHOLD},
            )
        return int(raw)
