"""Action 工厂

create_action 根据 options 返回同步或异步 Action；
两个便捷构造函数分别固定 {async: True} 与 {async: True, uniq: True}。
"""

from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field

from .clock import Clock, now_iso
from .exceptions import InvalidActionTypeError, InvalidPayloadError
from .identity import create_action_id
from .models.action import PROGRESS_MIN, SIGN, Action
from .models.enums import Phase
from .serialization import is_plain_value

log = structlog.get_logger()


class ActionOptions(BaseModel):
    """create_action 的选项"""

    model_config = ConfigDict(extra="forbid", frozen=True)

    # 只识别 "async" 与 "uniq" 两个键
    is_async: bool = Field(default=False, alias="async", description="是否为异步 Action")
    uniq: bool = Field(default=False, description="是否使用随机标识")

    @classmethod
    def of(cls, is_async: bool = False, uniq: bool = False) -> "ActionOptions":
        """按关键字参数构造"""
        return cls.model_validate({"async": is_async, "uniq": uniq})


def _coerce_options(options: ActionOptions | Mapping[str, Any] | None) -> ActionOptions:
    if options is None:
        return ActionOptions()
    if isinstance(options, ActionOptions):
        return options
    return ActionOptions.model_validate(dict(options))


def create_action(
    action_type: str,
    payload: Any = None,
    options: ActionOptions | Mapping[str, Any] | None = None,
    *,
    clock: Clock | None = None,
) -> Action:
    """创建 Action

    Args:
        action_type: 非空字符串
        payload: 纯数据 payload
        options: {"async": bool, "uniq": bool} 或 ActionOptions
        clock: 时钟，默认当前 UTC 时间

    Returns:
        新的 Action；异步 Action 处于 started 阶段，progress 为 0

    Raises:
        InvalidActionTypeError: action_type 不是非空字符串
        InvalidPayloadError: payload 不是纯数据值
        pydantic.ValidationError: options 含未知字段或类型错误
    """
    if not isinstance(action_type, str) or not action_type:
        raise InvalidActionTypeError(action_type)
    if not is_plain_value(payload):
        raise InvalidPayloadError(payload)

    opts = _coerce_options(options)

    meta: dict[str, Any] = {
        "sign": SIGN,
        "id": create_action_id(action_type, payload, opts.uniq),
    }
    if opts.is_async:
        meta["phase"] = Phase.STARTED.value
        meta["progress"] = PROGRESS_MIN
    meta["ctime"] = now_iso(clock)
    meta["async"] = opts.is_async
    meta["uniq"] = opts.uniq

    log.debug(
        "action_created",
        action_type=action_type,
        action_id=meta["id"],
        is_async=opts.is_async,
        uniq=opts.uniq,
    )

    return {
        "type": action_type,
        "payload": payload,
        "error": False,
        "meta": meta,
    }  # type: ignore[return-value]


def create_async_action(
    action_type: str,
    payload: Any = None,
    *,
    clock: Clock | None = None,
) -> Action:
    """创建内容派生标识的异步 Action"""
    return create_action(
        action_type,
        payload,
        ActionOptions.of(is_async=True, uniq=False),
        clock=clock,
    )


def create_async_unique_action(
    action_type: str,
    payload: Any = None,
    *,
    clock: Clock | None = None,
) -> Action:
    """创建随机标识的异步 Action"""
    return create_action(
        action_type,
        payload,
        ActionOptions.of(is_async=True, uniq=True),
        clock=clock,
    )
