import logging
import sys


def setup_logging(level: int = logging.WARNING):
    """
    配置全局日志
    日志写入 stderr，stdout 只保留 HoC 结果
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
