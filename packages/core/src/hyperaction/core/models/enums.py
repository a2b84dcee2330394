"""枚举定义 -- 异步 Action 生命周期阶段

包含 Phase 枚举，以及 TERMINAL_PHASES 终态集合。
"""

from enum import StrEnum


class Phase(StrEnum):
    """异步 Action 生命周期阶段"""

    STARTED = "started"
    RUNNING = "running"
    # 唯一终态：成功与失败都以 error 标志区分
    FINISHED = "finished"


TERMINAL_PHASES: frozenset[Phase] = frozenset({Phase.FINISHED})


def is_terminal_phase(phase: str) -> bool:
    """判断阶段是否为终态

    Args:
        phase: 阶段字符串（Action meta 中保存的原始值）

    Returns:
        True 如果为终态，否则 False（未知阶段同样返回 False）
    """
    return phase in TERMINAL_PHASES
