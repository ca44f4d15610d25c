# context.py
"""
[V1.0] 运行时配置的数据模型
"""
from dataclasses import dataclass, field
from typing import Optional

from config import GlobalConfig


@dataclass
class RunContext:
    """
    封装一次运行所需的所有配置和状态。
    这是从 CLI 传递到 HistoryAccumulator 的唯一对象。
    """

    # --- 核心路径 ---
    repo_path: str = "."

    # --- 统计选项 ---
    # 显式传入，而不是从全局状态读取
    find_renames_and_copies: bool = False

    # --- 全局配置 ---
    # 包含 git 路径、日志级别和 .env 加载的数据
    global_config: GlobalConfig = field(default_factory=GlobalConfig)

    # 由 global_config 解析得到，构造时校验
    similarity_threshold: Optional[int] = field(init=False, default=None)

    def __post_init__(self):
        self.similarity_threshold = self.global_config.get_similarity_threshold()
