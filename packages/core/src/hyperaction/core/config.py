"""HyperActionConfig -- 从环境变量加载运行配置

环境变量:
    HYPERACTION_LOG_FORMAT: 日志渲染模式（dev/json，默认 dev）
    HYPERACTION_LOG_LEVEL: 日志级别（默认 INFO）
    HYPERACTION_JSON_INDENT: CLI 输出 JSON 的缩进（默认不缩进）
"""

import os
from typing import Literal

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()


class HyperActionConfig(BaseModel):
    """运行配置"""

    log_format: Literal["dev", "json"] = Field(
        default="dev",
        description="日志渲染模式：dev / json",
    )
    log_level: str = Field(default="INFO", description="日志级别")
    json_indent: int | None = Field(
        default=None,
        ge=0,
        description="CLI 输出 JSON 的缩进，None 表示紧凑输出",
    )


def load_config() -> HyperActionConfig:
    """从环境变量加载配置

    Returns:
        HyperActionConfig 实例
    """
    kwargs: dict = {}

    if val := os.environ.get("HYPERACTION_LOG_FORMAT"):
        kwargs["log_format"] = val

    if val := os.environ.get("HYPERACTION_LOG_LEVEL"):
        kwargs["log_level"] = val.upper()

    if val := os.environ.get("HYPERACTION_JSON_INDENT"):
        try:
            kwargs["json_indent"] = int(val)
        except ValueError:
            log.warning(
                "invalid_json_indent_config",
                env_var="HYPERACTION_JSON_INDENT",
                value=val,
                fallback=None,
            )

    return HyperActionConfig(**kwargs)
