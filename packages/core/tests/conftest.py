"""packages/core 测试配置 -- 样例 Action fixture"""

import pytest

VALID_ACTION = {
    "type": "t",
    "payload": "p",
    "error": False,
    "meta": {
        "sign": "redux-hyper-action",
        "id": "xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx",
        "pid": "yyyyyyyy-yyyy-yyyy-yyyy-yyyyyyyyyyyy",
        "phase": "started",
        "progress": 0,
        "ctime": "2024-05-01T08:30:00.000Z",
        "utime": "2024-05-01T08:30:01.000Z",
        "async": True,
        "uniq": True,
    },
}


@pytest.fixture
def valid_action() -> dict:
    """手写的合法 Action（每次返回独立副本）"""
    return {**VALID_ACTION, "meta": dict(VALID_ACTION["meta"])}
