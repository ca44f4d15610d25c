# cli.py
"""
[V1.0] 命令行界面 (Interface) 层
- 无参数: 关闭重命名/复制检测
- --find-renames-and-copies: 开启重命名/复制检测
- 其他任何参数: 打印 usage 并以 1 退出，不访问仓库
"""
import argparse
import logging
import sys
from typing import List, Optional

from accumulator import hoc
from config import GlobalConfig
from exceptions import HocError

logger = logging.getLogger(__name__)

USAGE = "%(prog)s [--find-renames-and-copies]"


class HocArgumentParser(argparse.ArgumentParser):
    """参数错误时只打印 usage，退出码为 1 (argparse 默认为 2)"""

    def error(self, message: str):
        logger.debug(f"参数错误: {message}")
        self.print_usage(sys.stderr)
        self.exit(1)


def setup_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    """
    负责所有 argparse 的定义。
    """
    parser = HocArgumentParser(
        prog=prog,
        usage=USAGE,
        description="Calculate the hits-of-code metric of the git repository in the current directory.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--find-renames-and-copies",
        action="store_true",
        help="detect renames and copies (significantly slower)",
    )
    return parser


def run_cli(argv: Optional[List[str]] = None, prog: Optional[str] = None) -> int:
    """
    主入口点，返回进程退出码。
    """

    # 1. 解析 Args (失败时在这里直接退出)
    parser = setup_parser(prog)
    args = parser.parse_args(argv)

    # 2. 加载配置并计算
    try:
        global_config = GlobalConfig()
        logging.getLogger().setLevel(global_config.get_log_level())
        logger.info(f"🚀 开始计算 HoC (find_renames_and_copies={args.find_renames_and_copies})")
        total = hoc(args.find_renames_and_copies, ".", global_config)
    except HocError as e:
        logger.debug("HoC 计算失败", exc_info=True)
        print(f"{parser.prog}: failed to calculate hits-of-code: {e}", file=sys.stderr)
        return 1

    # 3. 输出结果
    print(total)
    return 0
