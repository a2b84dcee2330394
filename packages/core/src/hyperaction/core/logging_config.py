"""structlog 配置模块 -- 供 CLI 使用

库代码只调用 structlog.get_logger()，是否输出、如何输出由调用方决定。
CLI 的 stdout 承载命令结果，日志统一写到 stderr。
"""

import logging
import sys

import structlog

from .config import HyperActionConfig, load_config


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(config: HyperActionConfig | None = None) -> None:
    """按配置初始化 structlog 与标准库 logging

    config 为 None 时从环境变量加载。
    """
    cfg = config or load_config()

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        timestamper,
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_renderer(cfg.log_format),
            foreign_pre_chain=pre_chain,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, cfg.log_level.upper(), logging.INFO))
