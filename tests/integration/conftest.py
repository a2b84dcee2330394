"""集成测试配置 -- CLI 运行 fixture"""

import logging

import pytest
import structlog
from hyperaction.core import __main__ as cli


def _quiet_logging(config=None) -> None:
    # 只保留 warning 以上，stdout 留给 CLI 输出
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(),
    )


@pytest.fixture
def run_cli(monkeypatch, capsys):
    """在进程内执行 CLI，返回 (exit_code, stdout, stderr)

    测试体与 CLI 都只输出 warning 以上日志；
    替换 setup_logging，避免测试进程的全局日志配置被改写。
    """
    _quiet_logging()
    monkeypatch.setattr(cli, "setup_logging", _quiet_logging)

    def _run(*argv: str):
        code = cli.main(list(argv))
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    yield _run
    structlog.reset_defaults()
