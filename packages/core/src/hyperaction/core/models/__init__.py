"""HyperAction Domain Models -- 公共类型导出

所有数据形状与常量从此入口导入。
"""

from .action import (
    ACTION_PROPERTIES,
    ACTION_REQUIRED_PROPERTIES,
    ASYNC_META_PROPERTIES,
    META_PROPERTIES,
    META_REQUIRED_PROPERTIES,
    PROGRESS_MAX,
    PROGRESS_MIN,
    SIGN,
    Action,
    AsyncMeta,
    Meta,
    PlainValue,
    SyncMeta,
)
from .envelope import ActionEnvelope, ActionMeta
from .enums import TERMINAL_PHASES, Phase, is_terminal_phase

__all__ = [
    # 常量
    "SIGN",
    "ACTION_PROPERTIES",
    "ACTION_REQUIRED_PROPERTIES",
    "META_PROPERTIES",
    "META_REQUIRED_PROPERTIES",
    "ASYNC_META_PROPERTIES",
    "PROGRESS_MIN",
    "PROGRESS_MAX",
    # 枚举
    "Phase",
    "TERMINAL_PHASES",
    "is_terminal_phase",
    # 数据形状
    "PlainValue",
    "SyncMeta",
    "AsyncMeta",
    "Meta",
    "Action",
    # 传输模型
    "ActionMeta",
    "ActionEnvelope",
]
