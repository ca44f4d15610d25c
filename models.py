from dataclasses import dataclass, field


@dataclass(frozen=True)
class DiffStats:
    """一次 diff 的统计数据模型"""

    files_changed: int = 0
    insertions: int = 0
    deletions: int = 0

    @property
    def total(self) -> int:
        """该 diff 对 HoC 的贡献"""
        return self.files_changed + self.insertions + self.deletions

    def __add__(self, other: "DiffStats") -> "DiffStats":
        if not isinstance(other, DiffStats):
            return NotImplemented
        return DiffStats(
            files_changed=self.files_changed + other.files_changed,
            insertions=self.insertions + other.insertions,
            deletions=self.deletions + other.deletions,
        )


@dataclass
class CommitStats:
    """单个提交的变更统计"""

    sha: str
    stats: DiffStats = field(default_factory=DiffStats)

    @property
    def total(self) -> int:
        return self.stats.total

    @property
    def is_empty(self) -> bool:
        # 合并提交和纯空白修改的提交都没有统计行
        return self.total == 0
