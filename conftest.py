"""全局 pytest 配置 -- 固定时钟 fixture"""

from datetime import UTC, datetime, timedelta

import pytest
from hyperaction.core.clock import FixedClock


@pytest.fixture
def fixed_now() -> datetime:
    """测试用固定时刻"""
    return datetime(2024, 5, 1, 8, 30, 0, 123000, tzinfo=UTC)


@pytest.fixture
def fixed_clock(fixed_now: datetime) -> FixedClock:
    """每次调用前进 1 秒的确定性时钟"""
    return FixedClock(fixed_now, step=timedelta(seconds=1))
