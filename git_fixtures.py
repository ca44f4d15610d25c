# git_fixtures.py
"""
测试辅助: 在临时目录中创建与用户 git 配置隔离的仓库
"""
import os
import shutil
import subprocess
import tempfile
import unittest
from unittest import mock

GIT_AVAILABLE = shutil.which("git") is not None


class GitRepoTestCase(unittest.TestCase):
    """每个测试一个全新的临时仓库 (self.repo_path)，默认不执行 git init"""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.repo_path = os.path.join(self._tmp.name, "repo")
        os.makedirs(self.repo_path)

        env = {
            "GIT_CONFIG_GLOBAL": os.devnull,
            "GIT_CONFIG_NOSYSTEM": "1",
            # 防止向上找到包含临时目录的仓库
            "GIT_CEILING_DIRECTORIES": self._tmp.name,
            "GIT_AUTHOR_NAME": "Test",
            "GIT_AUTHOR_EMAIL": "test@example.com",
            "GIT_COMMITTER_NAME": "Test",
            "GIT_COMMITTER_EMAIL": "test@example.com",
        }
        patcher = mock.patch.dict(os.environ, env)
        patcher.start()
        self.addCleanup(patcher.stop)

    def git(self, *args: str) -> str:
        result = subprocess.run(
            ["git", *args],
            cwd=self.repo_path,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout

    def init_repo(self):
        self.git("init", "-q")

    def write(self, path: str, content, mode: str = "w"):
        full_path = os.path.join(self.repo_path, path)
        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with open(full_path, mode) as f:
            f.write(content)

    def commit(self, message: str = "change"):
        self.git("add", "-A")
        self.git("commit", "-q", "-m", message)

    def current_branch(self) -> str:
        return self.git("rev-parse", "--abbrev-ref", "HEAD").strip()
