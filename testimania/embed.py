"""
Bootstrap du widget + outils d'embarquement.

bootstrap() enchaîne, une seule fois par page :
  Config Resolver → Style Synthesizer → Data Loader → Layout Renderer
  → Carousel Controller (layout carousel uniquement)

Aucune erreur ne remonte vers l'appelant : tout échec reste confiné au
conteneur du widget.
"""
import logging
from enum import Enum
from html import escape
from typing import Any, Dict, Optional
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict

from . import settings
from .carousel import CarouselController, attach_carousel
from .core.dom import Node, el
from .core.host import HostDocument
from .core.resolver import ConfigurationError, resolve_config, resolve_target
from .core.schemas import Testimonial, WidgetConfig
from .loader import LoadResult, LoadStatus, load_testimonials
from .renderer.css import apply_container_classes, build_stylesheet, inject_styles
from .renderer.html import render_load_failed, render_widget

log = logging.getLogger(__name__)


class WidgetStatus(str, Enum):
    RENDERED = "rendered"
    EMPTY = "empty"
    FAILED = "failed"
    ABORTED = "aborted"


class WidgetResult(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    status: WidgetStatus
    config: Optional[WidgetConfig] = None
    controller: Optional[CarouselController] = None
    error: Optional[str] = None


def render_result(config: WidgetConfig, result: LoadResult) -> Node:
    """Fragment correspondant à l'issue du chargement."""
    if result.status == LoadStatus.FAILED:
        return render_load_failed()
    return render_widget(config, result.testimonials)


def bootstrap(document: HostDocument, base_url: Optional[str] = None,
              timeout: Optional[float] = None, session: Any = None,
              container_id: Optional[str] = None) -> WidgetResult:
    """
    Monte le widget dans `document`.

    Erreur de configuration fatale → ABORTED, document intact, aucun appel réseau.
    """
    container_id = container_id or settings.CONTAINER_ID
    try:
        config = resolve_config(document.embed_attributes)
        target = resolve_target(document, container_id)
    except ConfigurationError as exc:
        log.error("%s (%s)", exc, exc.code.value)
        return WidgetResult(status=WidgetStatus.ABORTED, error=str(exc))

    inject_styles(document, target, config, container_id)

    result = load_testimonials(config, base_url=base_url, timeout=timeout, session=session)
    if result.status == LoadStatus.FAILED:
        target.replace_children(render_load_failed())
        return WidgetResult(status=WidgetStatus.FAILED, config=config, error=result.error)

    try:
        widget = render_result(config, result)
        target.replace_children(widget)
        controller = attach_carousel(widget) if config.layout == "carousel" else None
    except Exception as exc:
        log.exception("Testimania: rendu impossible slug=%s", config.collection_id)
        target.replace_children(render_load_failed())
        return WidgetResult(status=WidgetStatus.FAILED, config=config, error=str(exc))

    status = WidgetStatus.EMPTY if result.status == LoadStatus.EMPTY else WidgetStatus.RENDERED
    return WidgetResult(status=status, config=config, controller=controller)


# ── Rendu autonome (API / aperçu) ───────────────────────────────────────────

def render_standalone(config: WidgetConfig, content: Node, container_id: Optional[str] = None) -> str:
    """<style> + conteneur, sans document hôte."""
    container_id = container_id or settings.CONTAINER_ID
    container = el("div", id=container_id)
    apply_container_classes(container, config)
    container.replace_children(content)
    return build_stylesheet(config, container_id).to_html() + "\n" + container.to_html()


SAMPLE_TESTIMONIAL = Testimonial(
    rating=5,
    title="A Game Changer!",
    content="This is a sample testimonial to preview the design.",
    client_name="John Doe",
)


def render_preview(config: WidgetConfig, container_id: Optional[str] = None) -> str:
    """Aperçu avec des témoignages d'exemple — aucun appel réseau."""
    count = 1 if config.layout == "single" else min(2, config.max_items)
    return render_standalone(config, render_widget(config, [SAMPLE_TESTIMONIAL] * count), container_id)


# ── Snippet d'embarquement ──────────────────────────────────────────────────

def embed_attributes(config: WidgetConfig) -> Dict[str, str]:
    """Attributs data-* équivalents à `config` (relus par resolve_config)."""
    return {
        "data-slug":          config.collection_id,
        "data-layout":        config.layout,
        "data-theme":         config.theme,
        "data-primary-color": config.primary_color,
        "data-max-width":     config.max_width,
        "data-max-items":     str(config.max_items),
        "data-show-stars":    "true" if config.show_stars else "false",
        "data-widget-title":  quote(config.widget_title, safe=""),
        "data-grid-columns":  str(config.grid_columns),
        "data-border-radius": config.border_radius,
        "data-shadow":        config.shadow,
        "data-font":          config.font,
        "data-gap":           config.gap,
    }


def generate_embed_code(config: WidgetConfig, script_url: Optional[str] = None,
                        container_id: Optional[str] = None) -> str:
    """Code à coller dans la page hôte : conteneur + balise <script>."""
    script_url = script_url or settings.SCRIPT_URL
    container_id = container_id or settings.CONTAINER_ID
    attrs = "\n".join(
        f'  {name}="{escape(value, quote=True)}"'
        for name, value in embed_attributes(config).items()
    )
    return (
        f'<div id="{escape(container_id, quote=True)}"></div>\n'
        f'<script src="{escape(script_url, quote=True)}"\n{attrs}\n  defer>\n</script>'
    )
