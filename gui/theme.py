"""Theme primitives and ttk style setup."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Base theme definition."""

    name: str = "Default"
    primary_color: str = "#1f2937"  # slate-800
    accent_color: str = "#3b82f6"  # blue-500
    background_color: str = "#ffffff"
    panel_color: str = "#f3f4f6"  # gray-100
    muted_color: str = "#6b7280"  # gray-500
    toast_background: str = "#111827"
    toast_foreground: str = "#f9fafb"


def configure_styles(style, theme: Theme = Theme()) -> None:  # pragma: no cover - UI code
    """Register the named ttk styles the views use."""
    style.configure("Main.TFrame", background=theme.background_color)
    style.configure("Panel.TFrame", background=theme.panel_color)
    style.configure(
        "Header.TLabel",
        background=theme.panel_color,
        foreground=theme.primary_color,
        font=("Helvetica", 18, "bold"),
    )
    style.configure(
        "Caption.TLabel",
        background=theme.background_color,
        foreground=theme.muted_color,
        font=("Helvetica", 10),
    )
    style.configure(
        "Value.TLabel",
        background=theme.background_color,
        foreground=theme.primary_color,
    )
    style.configure(
        "Muted.TLabel",
        background=theme.panel_color,
        foreground=theme.muted_color,
    )
    style.configure("Accent.TButton", foreground=theme.accent_color)
