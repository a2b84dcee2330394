"""Action 访问器与阶段谓词

所有函数先校验输入；非法输入抛出 InvalidActionError，
仅限异步的谓词对同步 Action 抛出 InvalidAsyncActionError。
"""

from typing import Any

import structlog

from .exceptions import InvalidActionError, InvalidAsyncActionError
from .models.action import Action
from .models.enums import Phase
from .validation import is_valid_action

log = structlog.get_logger()


def ensure_action(action: Any) -> Action:
    """校验并返回 Action，非法时抛出 InvalidActionError"""
    if not is_valid_action(action):
        log.debug("invalid_action_rejected")
        raise InvalidActionError(action)
    return action


def ensure_async_action(action: Any) -> Action:
    """校验并返回异步 Action，否则抛出 InvalidAsyncActionError"""
    if not is_valid_action(action) or action["meta"]["async"] is not True:
        log.debug("invalid_async_action_rejected")
        raise InvalidAsyncActionError(action)
    return action


def id_of_action(action: Any) -> str:
    """读取 meta.id"""
    return ensure_action(action)["meta"]["id"]


def pid_of_action(action: Any) -> str | None:
    """读取 meta.pid，未设置父 Action 时返回 None"""
    return ensure_action(action)["meta"].get("pid")


def is_async(action: Any) -> bool:
    """是否为异步 Action"""
    return ensure_action(action)["meta"]["async"] is True


def is_unique(action: Any) -> bool:
    """标识是否随机生成"""
    return ensure_action(action)["meta"]["uniq"] is True


def _phase_of(action: Any) -> Any:
    return ensure_async_action(action)["meta"].get("phase")


def is_started(action: Any) -> bool:
    """异步 Action 是否处于 started 阶段"""
    return _phase_of(action) == Phase.STARTED


def is_running(action: Any) -> bool:
    """异步 Action 是否处于 running 阶段"""
    return _phase_of(action) == Phase.RUNNING


def is_finished(action: Any) -> bool:
    """异步 Action 是否已结束（成功或失败）"""
    return _phase_of(action) == Phase.FINISHED


def has_error(action: Any) -> bool:
    """异步 Action 是否以失败结束"""
    return ensure_async_action(action)["error"] is True
