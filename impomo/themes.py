"""Style sheets for the light and dark themes of the interface."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Mapping, Union


class Theme(str, Enum):
    """The two colour schemes the interface can be shown in."""

    LIGHT = "Light"
    DARK = "Dark"


ThemeLike = Union[str, Theme]


def _theme(theme: ThemeLike) -> Theme:
    try:
        return Theme(theme)
    except ValueError:
        raise ValueError(f"unknown theme: {theme!r}") from None


def _props(props: Mapping[str, str]) -> str:
    return " ".join(f"{name}: {value};" for name, value in props.items())


def _rule(selector: str, props: Mapping[str, str]) -> str:
    return f"{selector} {{ {_props(props)} }}"


def _pick(theme: Theme, light: str, dark: str) -> str:
    return light if theme is Theme.LIGHT else dark


def _tab(t: Theme) -> str:
    return _props({"background-color": _pick(t, "#ffecb3", "#1f1f1f")})


def _add_button(t: Theme) -> str:
    if t is Theme.LIGHT:
        props = {
            "border-radius": "5px",
            "background-color": "#fffde7",
            "color": "black",
            "font": "bold 24px",
        }
    else:
        props = {
            "border-radius": "5px",
            "background-color": "#2a2a2a",
            "color": "white",
            "font-size": "24px",
            "font-weight": "900",
        }
    return _rule("QPushButton", props)


def _welcome_label(t: Theme) -> str:
    return _props(
        {"font-size": "60px", "font-weight": "bold", "color": _pick(t, "black", "white")}
    )


def _hint_label(t: Theme) -> str:
    return _props({"font-size": "20px", "color": _pick(t, "black", "white")})


def _heading(t: Theme) -> str:
    return _props(
        {
            "font-size": "25px",
            "font-weight": "bold",
            "color": _pick(t, "black", "white"),
            "margin": "10px",
        }
    )


def _reset_button(t: Theme) -> str:
    body = {
        "font-size": "20px",
        "padding": "15px 20px",
        "border-radius": "5px",
        "background-color": _pick(t, "#ffb74d", "#ff3333"),
        "color": _pick(t, "black", "white"),
        "margin": "10px",
        "border": f"1px solid {_pick(t, '#4c4c4c', '#5f5f5f')}",
    }
    hover = {"background-color": _pick(t, "#ffa726", "#8b0000")}
    return " ".join([_rule("QPushButton", body), _rule("QPushButton:hover", hover)])


def _timer(t: Theme) -> str:
    return _props(
        {
            "font-size": "100px",
            "font-weight": "bold",
            "color": _pick(t, "black", "white"),
            "background-color": _pick(t, "#ffe0b2", "#000000"),
            "border": f"1px solid {_pick(t, '#4c4c4c', '#5f5f5f')}",
            "border-radius": "30px",
            "padding": "50px 90px",
            "margin": "20px",
        }
    )


def _timer_button(t: Theme) -> str:
    body = {
        "font-size": "25px",
        "padding": "30px 35px",
        "border-radius": "5px",
        "background-color": _pick(t, "#ffe0b2", "#000000"),
        "color": _pick(t, "black", "white"),
        "border": f"1px solid {_pick(t, '#4c4c4c', '#5f5f5f')}",
        "margin": "5px",
    }
    hover = {"background-color": _pick(t, "#ffcc80", "#1a1a1a")}
    return " ".join([_rule("QPushButton", body), _rule("QPushButton:hover", hover)])


def _settings_button(t: Theme) -> str:
    body = {"font-size": "30px", "padding": "10px 10px", "border-radius": "10px"}
    if t is Theme.LIGHT:
        body["border"] = "1px solid #4c4c4c"
    body["background-color"] = _pick(t, "#ffb74d", "#555555")
    body["color"] = _pick(t, "#000000", "#e0e0e0")
    hover = {"background-color": _pick(t, "#ffa726", "#777777")}
    return " ".join([_rule("QPushButton", body), _rule("QPushButton:hover", hover)])


def _calendar(t: Theme) -> str:
    cal = "QCalendarWidget"
    view = f"{cal} QAbstractItemView"
    text = _pick(t, "#000000", "#e0e0e0")
    rules = [
        (
            cal,
            {
                "border": f"2px solid {_pick(t, '#4c4c4c', '#5f5f5f')}",
                "border-radius": "8px",
                "background-color": _pick(t, "#fff0db", "#121212"),
                "color": text,
            },
        ),
        (
            f"{cal} QWidget#qt_calendar_navigationbar",
            {"background-color": _pick(t, "#ffe0b2", "#1a1a1a")},
        ),
        (
            f"{cal} QToolButton",
            {
                "background-color": _pick(t, "#ffb74d", "#2a2a2a"),
                "color": _pick(t, "#000000", "#f0f0f0"),
                "font-size": "18px",
                "padding": "8px 12px",
                "border-radius": "5px",
            },
        ),
        (f"{cal} QToolButton:hover", {"background-color": _pick(t, "#ffa726", "#3a3a3a")}),
        (
            f"{cal} QToolButton#qt_calendar_prevmonth, {cal} QToolButton#qt_calendar_nextmonth",
            {"background-color": "transparent", "border": "none"},
        ),
        (
            f"{cal} QMenu",
            {"background-color": _pick(t, "#fff5e6", "#1e1e1e"), "color": text},
        ),
        (
            view,
            {
                "background-color": _pick(t, "#fff9ec", "#1e1e1e"),
                "font-size": "20px",
                "border-radius": "5px",
                "color": text,
            },
        ),
        (f"{view}::item:enabled", {"color": text}),
        (
            f"{view}::item:disabled",
            {
                "background-color": _pick(t, "#f0e0d0", "#2a2a2a"),
                "color": _pick(t, "#999999", "#777777"),
            },
        ),
        (
            f"{view}::item:hover",
            {
                "background-color": _pick(t, "#ffd180", "#444444"),
                "color": _pick(t, "#000000", "#ffffff"),
            },
        ),
    ]
    return " ".join(_rule(selector, props) for selector, props in rules)


def _settings_tab(t: Theme) -> str:
    accent = _pick(t, "#a65c00", "#5f5f5f")
    text = _pick(t, "#2e1c00", "#f0f0f0")
    heading = _pick(t, "#a65c00", "#d0d0d0")
    panel = _pick(t, "#ffe0b2", "#000000")
    page = _pick(t, "#fff3db", "#111111")
    rules = [
        ("QWidget#settingsTab", {"background-color": page}),
        (
            "#settingsContainer",
            {
                "background-color": panel,
                "border": f"5px solid {accent}",
                "border-radius": "10px",
                "padding": "80px",
            },
        ),
        (
            "QCheckBox, QLabel, QRadioButton",
            {"color": text, "font-size": "28px", "font-weight": "800"},
        ),
        (
            "QComboBox",
            {
                "font-size": "28px",
                "color": text,
                "background-color": page,
                "border": f"4px solid {accent}",
                "border-radius": "12px",
                "padding": "12px 20px",
                "min-width": "280px",
            },
        ),
        (
            "QComboBox QAbstractItemView",
            {
                "background-color": _pick(t, "#ffe0b2", "#1a1a1a"),
                "color": text,
                "selection-background-color": _pick(t, "#ffb74d", "#444444"),
                "selection-color": _pick(t, "black", "white"),
                "font-size": "26px",
            },
        ),
        (
            "QGroupBox",
            {
                "font-size": "34px",
                "font-weight": "900",
                "color": heading,
                "margin-top": "35px",
                "margin-bottom": "35px",
                "padding": "12px 20px 20px 20px",
                "background": "transparent",
                "border": f"3px solid {accent}",
                "border-radius": "25px",
                "subcontrol-origin": "margin",
                "subcontrol-position": "top center",
            },
        ),
        (
            "QGroupBox::title",
            {
                "subcontrol-origin": "margin",
                "subcontrol-position": "top center",
                "padding": "0 12px",
                "background-color": panel,
                "color": heading,
            },
        ),
        (
            "QRadioButton::indicator, QCheckBox::indicator",
            {
                "width": "20px",
                "height": "20px",
                "border": f"2px solid {accent}",
                "background": _pick(t, "#ffffff", "#2e2e2e"),
            },
        ),
        (
            "QRadioButton::indicator:checked, QCheckBox::indicator:checked",
            {
                "background-color": _pick(t, "#ffb74d", "#ffffff"),
                "border": f"2px solid {accent}",
            },
        ),
        (
            "QGroupBox:hover, QGroupBox:focus, QRadioButton:hover, QRadioButton:focus",
            {"background": "transparent"},
        ),
    ]
    return " ".join(_rule(selector, props) for selector, props in rules)


def _pomodoro_settings_dialog(t: Theme) -> str:
    buttons = "QDialogButtonBox QPushButton"
    rules = [
        (
            "QDialog",
            {
                "background-color": _pick(t, "#ffd59a", "#000000"),
                "color": _pick(t, "#000000", "#ffffff"),
                "font-family": "'Segoe UI', sans-serif",
                "font-size": "14px",
                "border": f"1px solid {_pick(t, '#4c4c4c', '#5f5f5f')}",
                "border-radius": "5px",
                "padding": "5px",
            },
        ),
        (
            "QLabel",
            {
                "color": _pick(t, "#000000", "#d0d0d0"),
                "font-size": "16px",
                "font-weight": "bold",
                "margin-top": "10px",
            },
        ),
        (
            "QSpinBox",
            {
                "background-color": _pick(t, "#fff1db", "#1a1a1a"),
                "color": _pick(t, "#000000", "#ffffff"),
                "border": f"1px solid {_pick(t, '#4c4c4c', '#7f7f7f')}",
                "border-radius": "5px",
                "padding": "4px",
                "min-width": "120px",
                "height": "40px",
            },
        ),
        (
            "QSpinBox::up-button, QSpinBox::down-button",
            {"width": "0", "height": "0", "border": "none"},
        ),
        (
            buttons,
            {
                "background-color": _pick(t, "#ffb74d", "#5f5f5f"),
                "color": _pick(t, "#000000", "#ffffff"),
                "padding": "8px 16px",
                "border": _pick(t, "1px solid #e0912d", "none"),
                "border-radius": "6px",
                "font-weight": "bold",
                "min-width": "80px",
            },
        ),
        (f"{buttons}:hover", {"background-color": _pick(t, "#ffa726", "#7a7a7a")}),
        (f"{buttons}:pressed", {"background-color": _pick(t, "#fb8c00", "#9a9a9a")}),
    ]
    return "\n".join(_rule(selector, props) for selector, props in rules) + "\n"


_BUILDERS: dict[str, Callable[[Theme], str]] = {
    "tab": _tab,
    "add_button": _add_button,
    "welcome_label": _welcome_label,
    "hint_label": _hint_label,
    "task_label": _heading,
    "phase_label": _heading,
    "title_label": _heading,
    "reset_button": _reset_button,
    "timer": _timer,
    "timer_button": _timer_button,
    "settings_button": _settings_button,
    "calendar": _calendar,
    "settings_tab": _settings_tab,
    "pomodoro_settings_dialog": _pomodoro_settings_dialog,
}

ELEMENTS = tuple(_BUILDERS)


def timer_style(theme: ThemeLike) -> str:
    """Style sheet of the large countdown display."""
    return _timer(_theme(theme))


def timer_button_style(theme: ThemeLike) -> str:
    """Style sheet of the start, pause and reset buttons."""
    return _timer_button(_theme(theme))


def style_for(theme: ThemeLike, element: str) -> str:
    """Style sheet of a named interface element in the given theme."""
    resolved = _theme(theme)
    try:
        builder = _BUILDERS[element]
    except KeyError:
        raise ValueError(f"unknown element: {element!r}") from None
    return builder(resolved)