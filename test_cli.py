import io
import os
import subprocess
import sys
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

import cli
from exceptions import RepositoryNotFoundError
from git_fixtures import GIT_AVAILABLE, GitRepoTestCase

SCRIPT = os.path.join(os.path.dirname(os.path.abspath(__file__)), "HitsOfCode.py")


class TestParser(unittest.TestCase):

    def run_cli(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            try:
                code = cli.run_cli(argv, prog="hoc")
            except SystemExit as e:
                code = e.code
        return code, out.getvalue(), err.getvalue()

    def test_unknown_argument_prints_usage(self):
        for argv in (["--bogus"], ["-h"], ["--find"], ["extra"],
                     ["--find-renames-and-copies", "extra"]):
            with mock.patch("cli.hoc") as hoc:
                code, out, err = self.run_cli(argv)

            self.assertEqual(code, 1, argv)
            self.assertEqual(out, "")
            self.assertEqual(err, "usage: hoc [--find-renames-and-copies]\n")
            hoc.assert_not_called()

    def test_flag_is_passed_explicitly(self):
        with mock.patch("cli.hoc", return_value=42) as hoc:
            code, out, _ = self.run_cli(["--find-renames-and-copies"])

        self.assertEqual((code, out), (0, "42\n"))
        self.assertTrue(hoc.call_args[0][0])

        with mock.patch("cli.hoc", return_value=0) as hoc:
            code, out, _ = self.run_cli([])

        self.assertEqual((code, out), (0, "0\n"))
        self.assertFalse(hoc.call_args[0][0])

    def test_failure_prints_no_total(self):
        with mock.patch("cli.hoc", side_effect=RepositoryNotFoundError(".")):
            code, out, err = self.run_cli([])

        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("failed to calculate hits-of-code", err)


@unittest.skipUnless(GIT_AVAILABLE, "git 未安装")
class TestCommandLine(GitRepoTestCase):

    def run_script(self, *args: str) -> subprocess.CompletedProcess:
        return subprocess.run(
            [sys.executable, SCRIPT, *args],
            cwd=self.repo_path,
            capture_output=True,
            text=True,
        )

    def test_prints_total(self):
        self.init_repo()
        self.write("a.txt", "a\nb\n")
        self.commit("initial")

        for args in ((), ("--find-renames-and-copies",)):
            result = self.run_script(*args)
            self.assertEqual(result.returncode, 0, result.stderr)
            self.assertEqual(result.stdout, "3\n")

    def test_bogus_flag(self):
        result = self.run_script("--bogus")

        self.assertEqual(result.returncode, 1)
        self.assertEqual(result.stdout, "")
        self.assertIn("usage: HitsOfCode.py [--find-renames-and-copies]", result.stderr)

    def test_outside_repository(self):
        result = self.run_script()

        self.assertEqual(result.returncode, 1)
        self.assertEqual(result.stdout, "")
        self.assertIn("failed to calculate hits-of-code", result.stderr)


if __name__ == "__main__":
    unittest.main()
