"""HyperAction 异常体系

形状错误由 is_valid_action 以 False 表达，不抛异常；
以下异常只用于调用方误用（usage error）。
"""

from typing import Any

from .serialization import describe


class HyperActionError(Exception):
    """HyperAction 包基础异常"""


class InvalidActionError(HyperActionError):
    """对非法 Action 调用了访问器、谓词、生命周期或血缘函数"""

    label = "Hyper Action"

    def __init__(self, action: Any, reason: str = "") -> None:
        """
        Args:
            action: 引发错误的原始值
            reason: 附加说明（如类型化校验的失败原因）
        """
        message = f"Invalid {self.label}. {describe(action)}!"
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)
        self.action = action
        self.reason = reason


class InvalidAsyncActionError(InvalidActionError):
    """对同步或非法 Action 调用了仅限异步 Action 的操作"""

    label = "Async Hyper Action"


class InvalidPayloadError(HyperActionError):
    """payload 不是纯数据值"""

    def __init__(self, payload: Any) -> None:
        super().__init__(f"Payload is not a plain value: {describe(payload)}")
        self.payload = payload


class InvalidActionTypeError(HyperActionError):
    """Action type 不是非空字符串"""

    def __init__(self, action_type: Any) -> None:
        super().__init__(
            f"Action type must be a non-empty string, got {describe(action_type)}"
        )
        self.action_type = action_type
