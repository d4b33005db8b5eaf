"""Interactive curses dashboard.

Three columns: category menu, device menu, and the live metric panel for the
selected device with its sysfs path underneath. Tab or Left/Right moves focus
between the two menus, Up/Down moves the selection, q quits. The panel is
redrawn on every key press and every refresh tick.
"""

from __future__ import annotations

import curses
import logging
from typing import Any

from kmon.core.model import DashboardFrame, Severity
from kmon.core.service import DashboardController

TITLE = " LINUX KERNEL MONITOR "
HELP = " q: Quit | Tab/Arrows: Navigate "
FOCUS_CATEGORIES = "categories"
FOCUS_DEVICES = "devices"
CATEGORY_WIDTH = 20
DEVICE_WIDTH = 30
LOGGER = logging.getLogger(__name__)

C_GREEN = 1
C_RED = 2
C_DIM = 3
C_TITLE = 4

_SEVERITY_COLORS = {
    Severity.NORMAL: C_GREEN,
    Severity.HEALTHY: C_GREEN,
    Severity.ALERT: C_RED,
    Severity.UNHEALTHY: C_RED,
    Severity.MUTED: C_DIM,
}


def _init_colors() -> None:
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(C_GREEN, curses.COLOR_GREEN, -1)
    curses.init_pair(C_RED, curses.COLOR_RED, -1)
    curses.init_pair(C_DIM, curses.COLOR_WHITE, -1)
    curses.init_pair(C_TITLE, curses.COLOR_WHITE, curses.COLOR_BLUE)


def handle_key(controller: DashboardController, focus: str, key: int) -> str | None:
    """Apply a key press to the controller. Returns the new focus, or None to quit."""
    if key in (ord("q"), ord("Q")):
        return None
    if key == curses.KEY_LEFT:
        return FOCUS_CATEGORIES
    if key == curses.KEY_RIGHT:
        return FOCUS_DEVICES
    if key == ord("\t"):
        return FOCUS_DEVICES if focus == FOCUS_CATEGORIES else FOCUS_CATEGORIES
    if key in (curses.KEY_UP, curses.KEY_DOWN):
        delta = -1 if key == curses.KEY_UP else 1
        if focus == FOCUS_CATEGORIES:
            controller.move_category(delta)
        else:
            controller.move_device(delta)
    return focus


def _safe(win: Any, *args: Any) -> None:
    """addstr wrapper that swallows out-of-bounds errors."""
    try:
        win.addstr(*args)
    except curses.error:
        pass


def _draw_box(win: Any, y: int, x: int, h: int, w: int, title: str) -> Any | None:
    max_y, max_x = win.getmaxyx()
    h = min(h, max_y - y)
    w = min(w, max_x - x)
    if h < 3 or w < 4:
        return None
    try:
        sub = win.subwin(h, w, y, x)
        sub.box()
        _safe(sub, 0, max(1, (w - len(title)) // 2), title, curses.A_BOLD)
        return sub
    except curses.error:
        return None


def _draw_menu(box: Any, items: tuple[str, ...], selected: int, focused: bool) -> None:
    h, w = box.getmaxyx()
    visible = h - 2
    start = max(0, selected - visible + 1)
    for row, item in enumerate(items[start : start + visible]):
        index = start + row
        attr = curses.A_NORMAL
        if index == selected:
            attr = curses.A_REVERSE if focused else curses.A_BOLD
        marker = ">" if index == selected else " "
        _safe(box, 1 + row, 1, f"{marker} {item}"[: w - 2], attr)


def _draw_metrics(box: Any, frame: DashboardFrame) -> None:
    h, w = box.getmaxyx()
    for row, line in enumerate(frame.summary.lines[: h - 3]):
        attr = curses.A_NORMAL
        if line.severity is not None:
            attr = curses.color_pair(_SEVERITY_COLORS[line.severity])
        if line.value is None:
            _safe(box, 1 + row, 1, line.label[: w - 2], attr)
            continue
        label = f"{line.label}: "
        _safe(box, 1 + row, 1, label[: w - 2], curses.A_BOLD)
        _safe(box, 1 + row, 1 + len(label), line.value[: max(0, w - 2 - len(label))], attr)
    _safe(box, h - 2, 1, f" Path: {frame.path_text}"[: w - 2], curses.color_pair(C_DIM))


def draw_frame(stdscr: Any, frame: DashboardFrame, focus: str) -> None:
    max_y, max_x = stdscr.getmaxyx()
    stdscr.erase()
    title_attr = curses.color_pair(C_TITLE) | curses.A_BOLD
    _safe(stdscr, 0, 0, " " * (max_x - 1), title_attr)
    _safe(stdscr, 0, max(0, (max_x - len(TITLE)) // 2), TITLE, title_attr)

    body_h = max_y - 2
    categories = tuple(c.label for c in frame.categories)
    cat_box = _draw_box(stdscr, 1, 0, body_h, CATEGORY_WIDTH, "SENSORS")
    if cat_box is not None:
        _draw_menu(cat_box, categories, frame.category_index, focus == FOCUS_CATEGORIES)
    dev_box = _draw_box(stdscr, 1, CATEGORY_WIDTH, body_h, DEVICE_WIDTH, "DEVICES")
    if dev_box is not None:
        _draw_menu(dev_box, frame.devices, frame.device_index, focus == FOCUS_DEVICES)
    data_x = CATEGORY_WIDTH + DEVICE_WIDTH
    data_box = _draw_box(stdscr, 1, data_x, body_h, max_x - data_x, " LIVE DATA ")
    if data_box is not None:
        _draw_metrics(data_box, frame)

    _safe(stdscr, max_y - 1, max(0, (max_x - len(HELP)) // 2), HELP)
    stdscr.refresh()


def _dashboard_loop(stdscr: Any, controller: DashboardController, interval: float) -> None:
    _init_colors()
    curses.curs_set(0)
    stdscr.keypad(True)
    stdscr.timeout(int(interval * 1000))

    focus: str | None = FOCUS_CATEGORIES
    while focus is not None:
        max_y, max_x = stdscr.getmaxyx()
        if max_y < 8 or max_x < CATEGORY_WIDTH + DEVICE_WIDTH + 10:
            stdscr.erase()
            _safe(stdscr, 0, 0, "Terminal too small")
            stdscr.refresh()
        else:
            draw_frame(stdscr, controller.render(), focus)

        key = stdscr.getch()
        if key == curses.KEY_RESIZE:
            stdscr.clear()
            continue
        if key == -1:
            continue
        focus = handle_key(controller, focus, key)


def run_dashboard(controller: DashboardController, interval: float) -> None:
    LOGGER.debug("Starting dashboard with %.1fs refresh", interval)
    try:
        curses.wrapper(_dashboard_loop, controller, interval)
    except KeyboardInterrupt:
        pass
