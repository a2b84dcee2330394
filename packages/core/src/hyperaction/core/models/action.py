"""Action 数据形状 -- 纯数据记录的类型定义

Action 始终是普通 dict，这里的 TypedDict 只用于类型标注。
SIGN 与属性集合共同构成封闭 schema：多一个键、少一个必填键都视为非法。
"""

from typing import Any, NotRequired, TypedDict

SIGN = "redux-hyper-action"

# 顶层属性
ACTION_PROPERTIES: frozenset[str] = frozenset({"type", "payload", "error", "meta"})
ACTION_REQUIRED_PROPERTIES: frozenset[str] = frozenset({"type", "error", "meta"})

# meta 属性（同步与异步的并集）
META_PROPERTIES: frozenset[str] = frozenset(
    {"sign", "id", "pid", "phase", "progress", "ctime", "utime", "async", "uniq"}
)
META_REQUIRED_PROPERTIES: frozenset[str] = frozenset(
    {"sign", "id", "ctime", "async", "uniq"}
)

# 仅异步 Action 携带的 meta 属性
ASYNC_META_PROPERTIES: frozenset[str] = frozenset({"phase", "progress"})

PROGRESS_MIN = 0
PROGRESS_MAX = 100

PlainValue = None | str | int | float | bool | dict[str, Any] | list[Any]

# "async" 是关键字，只能使用函数式 TypedDict 语法
SyncMeta = TypedDict(
    "SyncMeta",
    {
        "sign": str,
        "id": str,
        "pid": NotRequired[str],
        "ctime": str,
        "utime": NotRequired[str],
        "async": bool,
        "uniq": bool,
    },
)

AsyncMeta = TypedDict(
    "AsyncMeta",
    {
        "sign": str,
        "id": str,
        "pid": NotRequired[str],
        "phase": str,
        "progress": int,
        "ctime": str,
        "utime": NotRequired[str],
        "async": bool,
        "uniq": bool,
    },
)

Meta = SyncMeta | AsyncMeta


class Action(TypedDict):
    """Action 记录"""

    type: str
    error: bool
    payload: NotRequired[Any]
    meta: Meta
