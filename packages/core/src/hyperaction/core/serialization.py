"""纯数据值的判定与规范化序列化

stable_stringify 对结构相同的纯数据值产生相同字符串（与键插入顺序无关），
它是内容派生 Action 标识的输入。
"""

import json
import math
from typing import Any


def is_plain_value(value: Any) -> bool:
    """判断是否为纯数据值

    纯数据值递归定义为：None、str、int、float、bool、
    键为 str 的 dict、由纯数据值组成的 list/tuple。
    NaN 与 Infinity 不是纯数据值（JSON 无法表示）。
    函数、类实例、异常对象以及循环引用都不是纯数据值。
    """
    return _is_plain(value, set())


def _is_plain(value: Any, seen: set[int]) -> bool:
    if value is None or isinstance(value, (str, bool, int)):
        return True
    if isinstance(value, float):
        return math.isfinite(value)

    if type(value) is dict:
        if id(value) in seen:
            return False
        seen.add(id(value))
        ok = all(
            isinstance(k, str) and _is_plain(v, seen) for k, v in value.items()
        )
        seen.discard(id(value))
        return ok

    if type(value) in (list, tuple):
        if id(value) in seen:
            return False
        seen.add(id(value))
        ok = all(_is_plain(item, seen) for item in value)
        seen.discard(id(value))
        return ok

    return False


def canonicalize(value: Any) -> Any:
    """将纯数据值转换为规范形式

    - tuple 转为 list
    - 整数值的 float 转为 int（1.0 与 1 序列化一致）
    """
    if isinstance(value, bool) or value is None or isinstance(value, (str, int)):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"non-finite float: {value!r}")
        if value.is_integer():
            return int(value)
        return value
    if isinstance(value, dict):
        return {k: canonicalize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [canonicalize(item) for item in value]
    raise TypeError(f"not a plain value: {type(value).__name__}")


def stable_stringify(value: Any) -> str:
    """规范化 JSON 序列化（键排序、紧凑分隔符、不转义非 ASCII）"""
    return json.dumps(
        canonicalize(value),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )


def describe(value: Any) -> str:
    """用于错误信息的宽松序列化，永不抛出异常"""
    try:
        return json.dumps(value, ensure_ascii=False, default=repr)
    except (TypeError, ValueError):
        # 循环引用等无法 JSON 化的情况
        return repr(value)
