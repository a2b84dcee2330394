"""时钟模块 -- 可注入的当前时间来源

所有写入 ctime/utime 的函数都接受 clock 参数，
测试中传入 FixedClock 即可得到确定性的时间戳。
"""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """默认时钟：当前 UTC 时间"""
    return datetime.now(UTC)


def to_iso8601(dt: datetime) -> str:
    """格式化为毫秒精度、Z 结尾的 ISO-8601 字符串

    naive datetime 视为 UTC。
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    text = dt.astimezone(UTC).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def now_iso(clock: Clock | None = None) -> str:
    """读取时钟并格式化"""
    return to_iso8601((clock or utc_now)())


class FixedClock:
    """固定时钟

    每次调用返回当前时刻，然后按 step 前进（默认不前进）。
    """

    def __init__(self, at: datetime, step: timedelta | None = None) -> None:
        self._current = at
        self._step = step or timedelta(0)
        self.calls = 0

    def __call__(self) -> datetime:
        current = self._current
        self._current = current + self._step
        self.calls += 1
        return current
