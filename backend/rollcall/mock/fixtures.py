"""fixtures.py — Static pools and constants for the mock roster.

Every categorical field on a generated person is drawn from one of the
pools below. Pool order is part of the output: reordering or resizing a
pool changes which value a given seed lands on.

Design principles:
    - Pools are tuples (read-only, never empty)
    - Time constants are in milliseconds, matching the dashboard's clock
    - Zero external dependencies

Called by: factory.py
Depends on: Nothing
"""

from __future__ import annotations

# ─── Roster Shape ─────────────────────────────────────────────────────────────
# WHY: 72 arrived / 8 not-arrived gives the dashboard's not-arrived panel
# enough rows to scroll in demos.

DEFAULT_SEED = 42
EXPECTED_COUNT = 80
ARRIVED_COUNT = 72

# Served from the front-end's public dir so the demo works offline.
AVATAR_PATH = "/avatars/default.png"

# ─── Categorical Pools ────────────────────────────────────────────────────────

NAMES: tuple[str, ...] = (
    "张三", "李四", "王五", "赵六", "钱七", "孙八", "周九", "吴十", "郑一", "冯二",
    "陈三", "褚四", "卫五", "蒋六", "沈七", "韩八", "杨九", "朱十", "秦一", "尤二",
    "许三", "何四", "吕五", "施六", "张强", "李雷", "王刚", "赵云", "马超", "黄忠",
)

POSITIONS: tuple[str, ...] = ("工程师", "技术员", "值班员", "调度员", "班长", "主管")
ROOMS: tuple[str, ...] = ("A101", "A203", "B110", "C305", "D210", "E402")
DEPTS: tuple[str, ...] = ("运行部", "维护部", "安全部", "设备部")
SHIFTS: tuple[str, ...] = ("白班", "中班", "夜班")

# Named zones shown as the last-seen area on the trace view.
AREAS: tuple[str, ...] = ("主厂房", "升压站", "办公楼", "仓库区", "输煤栈桥", "食堂", "停车场")

# ─── Tracking ─────────────────────────────────────────────────────────────────

# Default reference point (lon, lat). Overridden by REFERENCE_LON/LAT.
REFERENCE_POINT: tuple[float, float] = (116.397428, 39.90923)

POSITION_JITTER_DEG = 0.02  # full width of the jitter window around the reference
LAST_SEEN_WINDOW_MS = 3_600_000  # last_time lies within the past hour
TRACK_LENGTH = 5
TRACK_INTERVAL_MS = 60_000
TRACK_STEP_DEG = 0.001
