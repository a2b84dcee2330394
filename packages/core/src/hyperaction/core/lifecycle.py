"""异步 Action 生命周期流转

每个函数接收新 payload，返回一个作用于异步 Action 的纯函数：
- continue_with: started/running -> running，progress 取给定值
- succeed_with:  -> finished，progress 100，error False
- fail_with:     -> finished，progress 100，error True

流转总是返回新记录，输入不被修改；meta.id 与 meta.ctime 保持不变，
meta.utime 刷新为当前时间。
"""

from collections.abc import Callable
from typing import Any

import structlog

from .accessors import ensure_async_action
from .clock import Clock, now_iso
from .exceptions import HyperActionError, InvalidPayloadError
from .models.action import PROGRESS_MAX, PROGRESS_MIN, Action
from .models.enums import Phase
from .serialization import is_plain_value

log = structlog.get_logger()

Transition = Callable[[Action], Action]


def _clamp_progress(progress: Any) -> int:
    if isinstance(progress, bool) or not isinstance(progress, int):
        raise HyperActionError(f"Progress must be an integer, got {progress!r}")
    clamped = max(PROGRESS_MIN, min(PROGRESS_MAX, progress))
    if clamped != progress:
        log.warning("progress_clamped", progress=progress, clamped=clamped)
    return clamped


def _transit(
    action: Any,
    *,
    payload: Any,
    error: bool,
    phase: Phase,
    progress: int,
    clock: Clock | None,
) -> Action:
    current = ensure_async_action(action)
    meta = {
        **current["meta"],
        "phase": phase.value,
        "progress": progress,
        "utime": now_iso(clock),
    }
    log.debug(
        "action_transitioned",
        action_id=meta["id"],
        phase=phase.value,
        progress=progress,
        error=error,
    )
    return {
        **current,
        "error": error,
        "payload": payload,
        "meta": meta,
    }  # type: ignore[return-value]


def continue_with(
    payload: Any,
    progress: int = PROGRESS_MIN,
    *,
    clock: Clock | None = None,
) -> Transition:
    """推进到 running 阶段

    Args:
        payload: 新 payload（纯数据值）
        progress: 进度，超出 [0, 100] 时截断
        clock: 时钟，默认当前 UTC 时间
    """
    if not is_plain_value(payload):
        raise InvalidPayloadError(payload)
    value = _clamp_progress(progress)

    def transit(action: Action) -> Action:
        return _transit(
            action,
            payload=payload,
            error=False,
            phase=Phase.RUNNING,
            progress=value,
            clock=clock,
        )

    return transit


def succeed_with(payload: Any, *, clock: Clock | None = None) -> Transition:
    """以成功结束"""
    if not is_plain_value(payload):
        raise InvalidPayloadError(payload)

    def transit(action: Action) -> Action:
        return _transit(
            action,
            payload=payload,
            error=False,
            phase=Phase.FINISHED,
            progress=PROGRESS_MAX,
            clock=clock,
        )

    return transit


def fail_with(error: Any, *, clock: Clock | None = None) -> Transition:
    """以失败结束，error 作为 payload（必须是纯数据值，不接受异常对象）"""
    if not is_plain_value(error):
        raise InvalidPayloadError(error)

    def transit(action: Action) -> Action:
        return _transit(
            action,
            payload=error,
            error=True,
            phase=Phase.FINISHED,
            progress=PROGRESS_MAX,
            clock=clock,
        )

    return transit
