"""Action 传输模型 -- 规范 JSON 形状的类型化校验

is_valid_action 只做结构检查（键集合 + sign），
这里在应用边界（持久化、跨进程传输）进一步校验字段类型：
- 同步 meta 不允许携带 phase/progress，异步 meta 必须携带
- progress 取值 [0, 100]
- ctime/utime 必须是 ISO-8601 时间戳
- payload 必须是纯数据值
"""

from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)

from ..serialization import is_plain_value
from .action import PROGRESS_MAX, PROGRESS_MIN, SIGN
from .enums import Phase


class ActionMeta(BaseModel):
    """Action meta 的类型化视图"""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    sign: Literal[SIGN] = Field(description="约定标记")  # type: ignore[valid-type]
    id: StrictStr = Field(min_length=1, description="Action 标识")
    pid: StrictStr | None = Field(default=None, description="父 Action 标识")
    phase: Phase | None = Field(default=None, description="生命周期阶段（仅异步）")
    progress: Annotated[StrictInt, Field(ge=PROGRESS_MIN, le=PROGRESS_MAX)] | None = Field(
        default=None,
        description="进度（仅异步）",
    )
    ctime: StrictStr = Field(description="创建时间")
    utime: StrictStr | None = Field(default=None, description="最近更新时间")
    is_async: StrictBool = Field(alias="async", description="是否为异步 Action")
    uniq: StrictBool = Field(description="标识是否随机生成")

    @field_validator("ctime", "utime")
    @classmethod
    def _check_timestamp(cls, value: str | None) -> str | None:
        if value is not None:
            datetime.fromisoformat(value)
        return value

    @model_validator(mode="after")
    def _check_variant(self) -> "ActionMeta":
        if self.is_async:
            if self.phase is None or self.progress is None:
                raise ValueError("async meta requires phase and progress")
        elif self.phase is not None or self.progress is not None:
            raise ValueError("sync meta must not carry phase or progress")
        return self


class ActionEnvelope(BaseModel):
    """Action 的类型化视图"""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: StrictStr = Field(min_length=1, description="事件类型")
    error: StrictBool = Field(description="payload 是否为失败信息")
    payload: Any = Field(default=None, description="纯数据 payload")
    meta: ActionMeta

    @field_validator("payload")
    @classmethod
    def _check_payload(cls, value: Any) -> Any:
        if not is_plain_value(value):
            raise ValueError("payload must be a plain value")
        return value
