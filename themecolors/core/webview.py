"""CSS custom properties for rendering a webview in a theme's colors."""

from __future__ import annotations

from dataclasses import dataclass, field

from themecolors.core.theme import ColorTheme, ThemeType

_THEME_KIND_CLASSES: dict[ThemeType, str] = {
    ThemeType.DARK: "vscode-dark",
    ThemeType.LIGHT: "vscode-light",
    ThemeType.HIGH_CONTRAST: "vscode-high-contrast",
}


@dataclass(frozen=True, slots=True)
class WebviewBaseOptions:
    ui_font_family: str = '"Segoe WPC", "Segoe UI", sans-serif'
    ui_font_weight: str = "normal"
    ui_font_size: str = "13px"
    editor_font_family: str = 'Consolas, "Courier New", monospace'
    editor_font_weight: str = "normal"
    editor_font_size: str = "14px"


@dataclass(frozen=True, slots=True)
class WebviewProperties:
    style: str
    css_class: str
    dataset: dict[str, str] = field(default_factory=dict)


def css_variable_name(identifier: str) -> str:
    """``editor.background`` -> ``--vscode-editor-background`` (first dot only)."""
    return f"--vscode-{identifier.replace('.', '-', 1)}"


def get_webview_properties(theme: ColorTheme, options: WebviewBaseOptions) -> WebviewProperties:
    style = [
        f"--vscode-font-family:{options.ui_font_family}",
        f"--vscode-font-weight:{options.ui_font_weight}",
        f"--vscode-font-size:{options.ui_font_size}",
        f"--vscode-editor-font-family:{options.editor_font_family}",
        f"--vscode-editor-font-weight:{options.editor_font_weight}",
        f"--vscode-editor-font-size:{options.editor_font_size}",
    ]
    for identifier, color in theme:
        if color is not None:
            style.append(f"{css_variable_name(identifier)}:{color}")

    kind = _THEME_KIND_CLASSES[theme.type]
    return WebviewProperties(
        style=";".join(style),
        css_class=kind,
        dataset={"vscodeThemeKind": kind, "vscodeThemeName": theme.name},
    )
