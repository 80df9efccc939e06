"""
Style Synthesizer — WidgetConfig → feuille de style injectée une seule fois.

Les choix énumérés (ombre, police, thème) passent par des tables fixes ; une
clé inconnue renvoie l'entrée par défaut de la table, jamais un style vide.
Les variables CSS sont portées par le conteneur (.tm-widget-container) et
non par :root, pour ne pas fuir dans la page hôte.
"""
from typing import Dict

from ..core.dom import Node, el
from ..core.host import HostDocument
from ..core.schemas import WidgetConfig

STYLESHEET_ID = "testimania-widget-styles"

SHADOW_VARIANTS: Dict[str, str] = {
    "none": "none",
    "sm":   "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    "md":   "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
    "lg":   "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
}
DEFAULT_SHADOW = "md"

FONT_VARIANTS: Dict[str, str] = {
    "sans":  "ui-sans-serif, system-ui, sans-serif",
    "serif": 'ui-serif, Georgia, Cambria, "Times New Roman", Times, serif',
    "mono":  'ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, "Liberation Mono", "Courier New", monospace',
}
DEFAULT_FONT = "sans"

THEME_PALETTES: Dict[str, Dict[str, str]] = {
    "light": {
        "color_scheme": "light",
        "header":       "#1a202c",
        "card_bg":      "#fff",
        "card_text":    "#333",
        "card_border":  "#e2e8f0",
    },
    "dark": {
        "color_scheme": "dark",
        "header":       "#f7fafc",
        "card_bg":      "#2d3748",
        "card_text":    "#f7fafc",
        "card_border":  "#4a5568",
    },
}
DEFAULT_THEME = "light"


def resolve_shadow(name: str) -> str:
    return SHADOW_VARIANTS.get(name, SHADOW_VARIANTS[DEFAULT_SHADOW])


def resolve_font(name: str) -> str:
    return FONT_VARIANTS.get(name, FONT_VARIANTS[DEFAULT_FONT])


def resolve_theme(name: str) -> Dict[str, str]:
    return THEME_PALETTES.get(name, THEME_PALETTES[DEFAULT_THEME])


def _theme_rules(name: str) -> str:
    p = resolve_theme(name)
    return f""".tm-theme-{name} {{ color-scheme: {p['color_scheme']}; }}
.tm-theme-{name} .tm-widget-header {{ color: {p['header']}; }}
.tm-theme-{name} .tm-card {{ background: {p['card_bg']}; color: {p['card_text']}; border-color: {p['card_border']}; }}"""


def generate_widget_css(config: WidgetConfig, container_id: str) -> str:
    """CSS complet du widget : variables, carte, thèmes, layouts."""
    themes = "\n".join(_theme_rules(name) for name in THEME_PALETTES)
    return f""".tm-widget-container {{
  --tm-primary-color: {config.primary_color};
  --tm-font-family: {resolve_font(config.font)};
  --tm-card-border-radius: {config.border_radius};
  --tm-card-shadow: {resolve_shadow(config.shadow)};
  --tm-gap: {config.gap};
  max-width: {config.max_width};
  margin: 20px auto;
}}
#{container_id} {{ font-family: var(--tm-font-family); }}
.tm-widget-header {{ font-size: 1.5em; font-weight: bold; margin-bottom: 16px; text-align: center; }}
.tm-card {{
  border: 1px solid #e2e8f0;
  border-left: 5px solid var(--tm-primary-color);
  padding: 20px;
  border-radius: var(--tm-card-border-radius);
  box-shadow: var(--tm-card-shadow);
}}
.tm-stars {{ display: flex; color: var(--tm-primary-color); margin-bottom: 8px; }}
.tm-title {{ font-weight: bold; font-size: 1.1em; margin-bottom: 4px; }}
.tm-content {{ line-height: 1.6; margin-bottom: 12px; }}
.tm-author {{ font-style: italic; font-size: 0.9em; }}
.tm-message {{ text-align: center; }}
{themes}
.tm-layout-list .testimonials-wrapper {{ display: flex; flex-direction: column; gap: var(--tm-gap); }}
.tm-layout-grid .testimonials-wrapper {{ display: grid; grid-template-columns: repeat({config.grid_columns}, minmax(0, 1fr)); gap: var(--tm-gap); }}
.tm-layout-carousel {{ position: relative; overflow: hidden; }}
.tm-carousel-inner {{ display: flex; transition: transform 0.5s ease; }}
.tm-carousel-item {{ min-width: 100%; box-sizing: border-box; padding: 0 40px; }}
.tm-carousel-btn {{ position: absolute; top: 50%; transform: translateY(-50%); background: rgba(0,0,0,0.2); color: white; border: none; border-radius: 50%; cursor: pointer; width: 32px; height: 32px; z-index: 1; }}
.tm-carousel-btn.prev {{ left: 5px; }}
.tm-carousel-btn.next {{ right: 5px; }}"""


def build_stylesheet(config: WidgetConfig, container_id: str) -> Node:
    return el(
        "style",
        generate_widget_css(config, container_id),
        id=STYLESHEET_ID,
        data_collection=config.collection_id,
    )


def apply_container_classes(target: Node, config: WidgetConfig) -> None:
    target.set_classes(
        "tm-widget-container",
        f"tm-theme-{config.theme}",
        f"tm-layout-{config.layout}",
    )


def inject_styles(document: HostDocument, target: Node, config: WidgetConfig, container_id: str) -> Node:
    """
    Ajoute la feuille de style dans <head> et pose les classes du conteneur.
    Un second bootstrap sur la même page remplace la feuille précédente
    (dédoublonnage par STYLESHEET_ID).
    """
    document.remove_from_head(STYLESHEET_ID)
    stylesheet = build_stylesheet(config, container_id)
    document.append_to_head(stylesheet)
    apply_container_classes(target, config)
    return stylesheet
