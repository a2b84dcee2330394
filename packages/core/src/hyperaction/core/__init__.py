"""HyperAction Core -- 带标识、血缘与异步生命周期元数据的 Action 约定

公开接口导出。Action 是普通 dict：
构造（factory）、校验（validation）、读取（accessors）、
生命周期流转（lifecycle）、血缘（lineage）都是作用于纯数据的函数。
"""

# 访问器与阶段谓词
from .accessors import (
    has_error,
    id_of_action,
    is_async,
    is_finished,
    is_running,
    is_started,
    is_unique,
    pid_of_action,
)

# 时钟
from .clock import Clock, FixedClock, to_iso8601, utc_now

# 编解码
from .codec import dump_action, load_action, parse_action

# 配置
from .config import HyperActionConfig, load_config

# 异常
from .exceptions import (
    HyperActionError,
    InvalidActionError,
    InvalidActionTypeError,
    InvalidAsyncActionError,
    InvalidPayloadError,
)

# 构造
from .factory import (
    ActionOptions,
    create_action,
    create_async_action,
    create_async_unique_action,
)
from .identity import ACTION_ID_NAMESPACE, create_action_id
from .lifecycle import continue_with, fail_with, succeed_with
from .lineage import is_child_of, make_child_of

# 数据模型
from .models import SIGN, Action, AsyncMeta, Meta, Phase, SyncMeta
from .serialization import is_plain_value, stable_stringify
from .validation import is_plain_record, is_valid_action

__all__ = [
    "SIGN",
    "Phase",
    "Action",
    "Meta",
    "SyncMeta",
    "AsyncMeta",
    "ActionOptions",
    "ACTION_ID_NAMESPACE",
    "create_action_id",
    "create_action",
    "create_async_action",
    "create_async_unique_action",
    "is_valid_action",
    "is_plain_record",
    "is_plain_value",
    "stable_stringify",
    "id_of_action",
    "pid_of_action",
    "is_async",
    "is_unique",
    "is_started",
    "is_running",
    "is_finished",
    "has_error",
    "continue_with",
    "succeed_with",
    "fail_with",
    "make_child_of",
    "is_child_of",
    "parse_action",
    "load_action",
    "dump_action",
    "Clock",
    "FixedClock",
    "utc_now",
    "to_iso8601",
    "HyperActionConfig",
    "load_config",
    "HyperActionError",
    "InvalidActionError",
    "InvalidAsyncActionError",
    "InvalidPayloadError",
    "InvalidActionTypeError",
]
