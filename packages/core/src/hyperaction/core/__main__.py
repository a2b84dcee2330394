"""CLI 入口模块 -- python -m hyperaction.core <command>

支持的命令：
  id <type> [payload-json] [--uniq]               输出 Action 标识
  create <type> [payload-json] [--async] [--uniq] 输出新建 Action 的 JSON
  validate [path]                                 校验文件（或 stdin）中的 Action
"""

import json
import sys
from pathlib import Path
from typing import Any

from .codec import dump_action, load_action
from .config import load_config
from .exceptions import HyperActionError
from .factory import ActionOptions, create_action
from .identity import create_action_id
from .logging_config import setup_logging

USAGE = """用法: python -m hyperaction.core <command>
命令:
  id <type> [payload-json] [--uniq]
  create <type> [payload-json] [--async] [--uniq]
  validate [path]"""


def main(argv: list[str] | None = None) -> int:
    """CLI 主入口，返回退出码"""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(USAGE)
        return 1

    config = load_config()
    setup_logging(config)

    command, rest = args[0], args[1:]
    flags = {a for a in rest if a.startswith("--")}
    positional = [a for a in rest if not a.startswith("--")]

    try:
        if command == "id":
            return _cmd_id(positional, flags)
        if command == "create":
            return _cmd_create(positional, flags, config.json_indent)
        if command == "validate":
            return _cmd_validate(positional)
    except (HyperActionError, OSError, UnicodeDecodeError) as e:
        print(f"错误: {e}", file=sys.stderr)
        return 1

    print(f"未知命令: {command}")
    print(USAGE)
    return 1


def _parse_payload(positional: list[str]) -> Any:
    if len(positional) < 2:
        return None
    try:
        return json.loads(positional[1])
    except json.JSONDecodeError as e:
        raise HyperActionError(f"payload 不是合法 JSON: {e.msg}") from e


def _cmd_id(positional: list[str], flags: set[str]) -> int:
    if not positional:
        print(USAGE)
        return 1
    print(create_action_id(positional[0], _parse_payload(positional), "--uniq" in flags))
    return 0


def _cmd_create(positional: list[str], flags: set[str], indent: int | None) -> int:
    if not positional:
        print(USAGE)
        return 1
    options = ActionOptions.of(is_async="--async" in flags, uniq="--uniq" in flags)
    action = create_action(positional[0], _parse_payload(positional), options)
    print(dump_action(action, indent=indent))
    return 0


def _cmd_validate(positional: list[str]) -> int:
    if positional:
        text = Path(positional[0]).read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()
    load_action(text)
    print("valid")
    return 0


if __name__ == "__main__":
    sys.exit(main())
