"""Action 结构校验

is_valid_action 永不抛异常，对任何不符合约定的输入返回 False。
顶层与 meta 的键集合都是封闭的：出现未声明的键即视为非法。
"""

from typing import Any

from .models.action import (
    ACTION_PROPERTIES,
    ACTION_REQUIRED_PROPERTIES,
    META_PROPERTIES,
    META_REQUIRED_PROPERTIES,
    SIGN,
)


def is_plain_record(value: Any) -> bool:
    """是否为普通数据记录（严格的 dict，不含子类、列表、类实例）"""
    return type(value) is dict


def is_valid_action(value: Any) -> bool:
    """判断任意值是否为合法 Action

    校验顺序：
    1. 必须是普通 dict
    2. 必填顶层键（type/error/meta）齐全
    3. 不存在未声明的顶层键
    4. type 为 str，error 为 bool
    5. meta 为普通 dict
    6. 必填 meta 键（sign/id/ctime/async/uniq）齐全
    7. 不存在未声明的 meta 键
    8. meta.sign 等于约定标记
    """
    if not is_plain_record(value):
        return False

    keys = value.keys()
    if not ACTION_REQUIRED_PROPERTIES.issubset(keys):
        return False
    if not ACTION_PROPERTIES.issuperset(keys):
        return False

    if not isinstance(value["type"], str):
        return False
    if not isinstance(value["error"], bool):
        return False

    meta = value["meta"]
    if not is_plain_record(meta):
        return False

    meta_keys = meta.keys()
    if not META_REQUIRED_PROPERTIES.issubset(meta_keys):
        return False
    if not META_PROPERTIES.issuperset(meta_keys):
        return False

    return meta["sign"] == SIGN
