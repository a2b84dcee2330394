"""Action 编解码 -- 应用边界上的 JSON 读写

parse_action 先做结构校验（与 is_valid_action 一致），
再用 ActionEnvelope 做类型化校验；任一失败都抛出 InvalidActionError。
"""

import json
from typing import Any

import structlog
from pydantic import ValidationError

from .exceptions import InvalidActionError
from .models.action import Action
from .models.envelope import ActionEnvelope
from .validation import is_valid_action

log = structlog.get_logger()


def parse_action(value: Any) -> Action:
    """校验任意值并作为 Action 返回（原样返回，不做拷贝）"""
    if not is_valid_action(value):
        raise InvalidActionError(value)
    try:
        ActionEnvelope.model_validate(value)
    except ValidationError as e:
        log.debug("action_envelope_rejected", error_count=e.error_count())
        raise InvalidActionError(value, reason=_summarize(e)) from e
    return value


def load_action(text: str | bytes) -> Action:
    """从 JSON 文本解析 Action"""
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidActionError(text, reason=f"JSON decode failed: {e.msg}") from e
    except UnicodeDecodeError as e:
        raise InvalidActionError(text, reason=f"UTF-8 decode failed: {e.reason}") from e
    return parse_action(value)


def dump_action(action: Any, indent: int | None = None) -> str:
    """校验后序列化为 JSON 文本"""
    parse_action(action)
    return json.dumps(action, ensure_ascii=False, indent=indent, allow_nan=False)


def _summarize(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        loc = ".".join(str(p) for p in item["loc"]) or "<root>"
        parts.append(f"{loc}: {item['msg']}")
    return "; ".join(parts)
