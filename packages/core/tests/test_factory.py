"""Action 工厂单元测试"""

import re

import pytest
from hyperaction.core import (
    SIGN,
    ActionOptions,
    InvalidActionTypeError,
    InvalidPayloadError,
    create_action,
    create_action_id,
    create_async_action,
    create_async_unique_action,
)
from pydantic import ValidationError

REGEX_UUID = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)
REGEX_ISO8601 = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


class TestCreateAction:
    """create_action 测试"""

    def test_sync_action(self):
        """默认创建同步 Action"""
        action = create_action("type")
        assert action["type"] == "type"
        assert action["payload"] is None
        assert action["error"] is False

        meta = action["meta"]
        assert set(meta) == {"sign", "id", "ctime", "async", "uniq"}
        assert meta["sign"] == SIGN
        assert REGEX_UUID.match(meta["id"])
        assert REGEX_ISO8601.match(meta["ctime"])
        assert meta["async"] is False
        assert meta["uniq"] is False

    def test_async_action(self):
        """async 选项创建 started 阶段的异步 Action"""
        action = create_action("type", None, {"async": True})
        meta = action["meta"]
        assert set(meta) == {"sign", "id", "phase", "progress", "ctime", "async", "uniq"}
        assert meta["phase"] == "started"
        assert meta["progress"] == 0
        assert meta["async"] is True
        assert meta["uniq"] is False

    def test_uniq_option(self):
        """uniq 选项对同步 Action 同样生效"""
        a1 = create_action("type", "payload", {"uniq": True})
        a2 = create_action("type", "payload", {"uniq": True})
        assert a1["meta"]["uniq"] is True
        assert a1["meta"]["id"] != a2["meta"]["id"]

    def test_async_uniq_option(self):
        action = create_action("type", None, {"async": True, "uniq": True})
        assert action["meta"]["async"] is True
        assert action["meta"]["uniq"] is True

    def test_options_model(self):
        """options 接受 ActionOptions"""
        action = create_action("type", None, ActionOptions.of(is_async=True))
        assert action["meta"]["async"] is True
        assert action["meta"]["uniq"] is False

    def test_options_field_name_rejected(self):
        """映射只识别 async 与 uniq 两个键"""
        with pytest.raises(ValidationError):
            create_action("type", None, {"is_async": True})

    def test_unknown_option_rejected(self):
        """未知选项被 Pydantic 拒绝"""
        with pytest.raises(ValidationError):
            create_action("type", None, {"asynchronous": True})

    def test_content_derived_id(self):
        """非 uniq Action 的标识由 type + payload 决定"""
        action = create_action("fetch", {"url": "/x"})
        assert action["meta"]["id"] == create_action_id("fetch", {"url": "/x"})

    def test_ctime_from_clock(self, fixed_clock):
        """ctime 取自注入的时钟"""
        action = create_action("type", clock=fixed_clock)
        assert action["meta"]["ctime"] == "2024-05-01T08:30:00.123Z"
        assert fixed_clock.calls == 1

    def test_no_pid_or_utime(self):
        """新建 Action 不含 pid 与 utime"""
        meta = create_async_action("type")["meta"]
        assert "pid" not in meta
        assert "utime" not in meta

    @pytest.mark.parametrize("action_type", ["", None, 1, b"type"])
    def test_invalid_type(self, action_type):
        """type 必须是非空字符串"""
        with pytest.raises(InvalidActionTypeError):
            create_action(action_type)

    @pytest.mark.parametrize(
        "payload",
        [
            ValueError("boom"),
            object(),
            {1: "int key"},
            {"f": len},
            {"x": float("nan")},
            [float("inf")],
        ],
    )
    def test_non_plain_payload(self, payload):
        """payload 必须是纯数据值"""
        with pytest.raises(InvalidPayloadError):
            create_action("type", payload)


class TestCreateAsyncAction:
    """便捷构造函数测试"""

    def test_create_async_action(self):
        action = create_async_action("type", "payload")
        assert action["payload"] == "payload"
        assert action["meta"]["async"] is True
        assert action["meta"]["uniq"] is False
        assert action["meta"]["phase"] == "started"
        assert action["meta"]["progress"] == 0

    def test_create_async_action_is_deterministic(self):
        a1 = create_async_action("type", "payload")
        a2 = create_async_action("type", "payload")
        assert a1["meta"]["id"] == a2["meta"]["id"]

    def test_create_async_unique_action(self):
        action = create_async_unique_action("type", "payload")
        assert action["meta"]["async"] is True
        assert action["meta"]["uniq"] is True
        assert action["meta"]["phase"] == "started"
        assert action["meta"]["id"] != create_async_unique_action("type", "payload")["meta"]["id"]
