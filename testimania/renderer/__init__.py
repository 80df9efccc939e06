"""Renderers : feuille de style (css) et fragment DOM (html)."""
from .css import generate_widget_css, inject_styles, resolve_font, resolve_shadow, resolve_theme
from .html import render_card, render_empty, render_load_failed, render_widget

__all__ = [
    "generate_widget_css", "inject_styles", "resolve_font", "resolve_shadow", "resolve_theme",
    "render_card", "render_empty", "render_load_failed", "render_widget",
]
