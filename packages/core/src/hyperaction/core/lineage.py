"""Action 血缘关系：通过 meta.pid 引用父 Action 的 meta.id"""

from collections.abc import Callable
from typing import Any

import structlog

from .clock import Clock, now_iso
from .exceptions import InvalidActionError
from .models.action import Action
from .validation import is_valid_action

log = structlog.get_logger()


def _ensure_pair(parent: Any, child: Any) -> None:
    if not is_valid_action(parent) or not is_valid_action(child):
        log.debug("invalid_lineage_rejected")
        raise InvalidActionError({"parent": parent, "child": child})


def make_child_of(parent: Any, *, clock: Clock | None = None) -> Callable[[Action], Action]:
    """返回将 child 挂到 parent 下的函数

    结果与 child 相同，仅 meta.pid 设为 parent 的 meta.id，meta.utime 刷新。
    """

    def attach(child: Action) -> Action:
        _ensure_pair(parent, child)
        pid = parent["meta"]["id"]
        log.debug("action_attached", action_id=child["meta"]["id"], pid=pid)
        return {
            **child,
            "meta": {
                **child["meta"],
                "pid": pid,
                "utime": now_iso(clock),
            },
        }  # type: ignore[return-value]

    return attach


def is_child_of(parent: Any) -> Callable[[Action], bool]:
    """返回判断 child 是否为 parent 直接子 Action 的函数"""

    def check(child: Action) -> bool:
        _ensure_pair(parent, child)
        return child["meta"].get("pid") == parent["meta"]["id"]

    return check
