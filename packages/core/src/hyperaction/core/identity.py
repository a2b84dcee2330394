"""Action 标识生成

- uniq=False：对 [type, payload] 做规范化序列化后生成 UUIDv5，
  相同 type + payload 永远得到相同标识
- uniq=True：UUIDv4，每次调用都不同
"""

import uuid
from typing import Any

from .models.action import SIGN
from .serialization import stable_stringify

# 命名空间由约定标记派生：uuid5(NIL, SIGN)
ACTION_ID_NAMESPACE = uuid.uuid5(uuid.UUID(int=0), SIGN)


def create_action_id(action_type: str, payload: Any = None, uniq: bool = False) -> str:
    """生成 Action 标识

    Args:
        action_type: Action type
        payload: 纯数据 payload
        uniq: True 时生成随机标识

    Returns:
        UUID 字符串
    """
    if uniq:
        return str(uuid.uuid4())
    return str(uuid.uuid5(ACTION_ID_NAMESPACE, stable_stringify([action_type, payload])))
