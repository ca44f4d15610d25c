# data_sources/base.py
from abc import ABC, abstractmethod
from typing import Iterator

from models import CommitStats


class HistorySource(ABC):
    """
    版本历史数据源抽象基类
    定义了 HistoryAccumulator 对版本控制层的全部依赖，
    屏蔽了底层是 git 命令行还是其他实现的差异。
    """

    @abstractmethod
    def validate(self) -> None:
        """
        验证数据源是否可用。
        例如：git 是否已安装，路径是否为 Git 仓库。
        不可用时抛出 HocError 的子类。
        """

    @abstractmethod
    def has_commits(self) -> bool:
        """HEAD 是否指向一个已存在的提交"""

    @abstractmethod
    def iter_commit_stats(self) -> Iterator[CommitStats]:
        """
        遍历 HEAD 可达的每个提交，返回其与唯一父提交 (或空树) 比较的统计。
        合并提交不做 diff，统计为 0。
        """
