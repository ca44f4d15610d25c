# git_utils.py
import logging
import os
import re
import shutil
import subprocess
from typing import Iterator, List, Optional

from context import RunContext
from exceptions import (
    GitCommandError,
    GitNotAvailableError,
    RepositoryNotFoundError,
)
from models import CommitStats, DiffStats

logger = logging.getLogger(__name__)

# SHA-1 (40) 或 SHA-256 (64) 对象 ID
COMMIT_LINE_RE = re.compile(r"^(?:[0-9a-f]{40}|[0-9a-f]{64})$")
NUMBER_RE = re.compile(r"[0-9]+")


def is_git_available(git_binary: str = "git") -> bool:
    return shutil.which(git_binary) is not None


def _run_git(
    args: List[str], repo_path: str, git_binary: str = "git"
) -> subprocess.CompletedProcess:
    """
    在 repo_path 下执行 git，不检查返回码。
    - git 不存在时抛出 GitNotAvailableError
    - 目录不存在时抛出 RepositoryNotFoundError
    """
    if not os.path.isdir(repo_path):
        raise RepositoryNotFoundError(repo_path)
    cmd = [git_binary, *args]
    logger.debug(f"在 {repo_path} 中执行命令: {' '.join(cmd)}")
    try:
        return subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            cwd=repo_path,
        )
    except FileNotFoundError as e:
        raise GitNotAvailableError(
            "git executable not found", {"git_binary": git_binary}
        ) from e


def run_git_command(
    args: List[str], repo_path: str, git_binary: str = "git", context: str = "执行Git命令"
) -> str:
    """
    统一的Git命令执行函数
    - 成功时返回 stdout
    - 失败时抛出 GitCommandError，不返回部分结果
    """
    result = _run_git(args, repo_path, git_binary)
    # "git -c k=v log" 对外只显示子命令
    subcommand = next((a for a in args if not a.startswith("-") and "=" not in a), "")
    if result.returncode != 0:
        error = GitCommandError(f"git {subcommand}".strip(), result.returncode, result.stderr)
        if error.killed_by_signal:
            logger.error(f"❌ {context}被信号 {-result.returncode} 终止")
        else:
            logger.error(f"❌ {context}失败: {result.stderr.strip()}")
        raise error
    logger.info(f"✅ {context}成功，输出 {len(result.stdout.splitlines())} 行")
    return result.stdout


def is_git_repository(repo_path: str, git_binary: str = "git") -> bool:
    """检查指定路径是否位于 Git 仓库中"""
    try:
        result = _run_git(["rev-parse", "--git-dir"], repo_path, git_binary)
    except RepositoryNotFoundError:
        return False
    return result.returncode == 0


def resolve_head(repo_path: str, git_binary: str = "git") -> Optional[str]:
    """
    解析 HEAD 指向的提交。
    - 仓库还没有任何提交 (unborn branch) 时返回 None
    - 其他解析失败抛出 GitCommandError
    """
    result = _run_git(
        ["rev-parse", "--verify", "--quiet", "HEAD^{commit}"], repo_path, git_binary
    )
    if result.returncode == 0:
        return result.stdout.strip()

    symbolic = _run_git(["symbolic-ref", "--quiet", "HEAD"], repo_path, git_binary)
    if symbolic.returncode == 0:
        logger.info(f"ℹ️ HEAD ({symbolic.stdout.strip()}) 尚无提交")
        return None

    raise GitCommandError("git rev-parse", result.returncode, result.stderr)


def build_hoc_log_args(context: RunContext) -> List[str]:
    """
    根据 RunContext 组装 git log 参数。
    重命名/复制检测关闭时显式传入 --no-renames，避免 diff.renames 配置的影响。
    """
    cfg = context.global_config
    args: List[str] = []
    for override in cfg.GIT_CONFIG_OVERRIDES:
        args.extend(["-c", override])
    args.extend(cfg.GIT_LOG_ARGS)

    if context.find_renames_and_copies:
        threshold = context.similarity_threshold
        if threshold is None:
            args.extend(["--find-renames", "--find-copies"])
        else:
            args.extend([f"--find-renames={threshold}%", f"--find-copies={threshold}%"])
        # 把未修改的文件也作为复制来源，代价很高
        args.append("--find-copies-harder")
    else:
        args.append("--no-renames")

    args.append(f"--diff-filter={cfg.DIFF_FILTER}")
    args.extend(["HEAD", "--"])
    return args


def _numeric(field: str) -> int:
    """numstat 字段转整数，'-' 等标记 (二进制文件) 记为 0"""
    field = field.strip()
    return int(field) if NUMBER_RE.fullmatch(field) else 0


def parse_numstat(output: str) -> Iterator[CommitStats]:
    """
    解析 `git log --pretty=tformat:%H --numstat` 的输出。

    每个提交以单独一行的对象 ID 开始，后面跟若干
    "<新增>\\t<删除>\\t<路径>" 行，每行算一个变更文件。
    无法识别的行直接跳过。
    """
    sha: Optional[str] = None
    files = insertions = deletions = 0

    for line in output.splitlines():
        stripped = line.strip()
        if COMMIT_LINE_RE.match(stripped):
            if sha is not None or files:
                yield CommitStats(sha or "", DiffStats(files, insertions, deletions))
            sha = stripped
            files = insertions = deletions = 0
            continue

        parts = line.split("\t", 2)
        if len(parts) < 3:
            continue
        files += 1
        insertions += _numeric(parts[0])
        deletions += _numeric(parts[1])

    if sha is not None or files:
        yield CommitStats(sha or "", DiffStats(files, insertions, deletions))
