"""
Testimania — widget de témoignages embarquable.

Usage :
    >>> from testimania import HostDocument, bootstrap
    >>> doc = HostDocument.for_widget({"data-slug": "acme", "data-layout": "carousel"},
    ...                               container_id="testimania-widget")
    >>> result = bootstrap(doc)
    >>> result.controller.next()

Snippet d'embarquement :
    >>> from testimania import resolve_config, generate_embed_code
    >>> print(generate_embed_code(resolve_config({"slug": "acme"})))
"""
from .core.dom import Node, el, fragment
from .core.host import HostDocument
from .core.resolver import ConfigErrorCode, ConfigurationError, resolve_config, resolve_target
from .core.schemas import Testimonial, WidgetConfig
from .carousel import CarouselController, attach_carousel
from .loader import LoadResult, LoadStatus, load_testimonials, truncate
from .renderer.css import generate_widget_css, inject_styles
from .renderer.html import render_widget
from .embed import (
    WidgetResult, WidgetStatus,
    bootstrap, generate_embed_code, render_preview, render_standalone,
)

__version__ = "0.1.0"

__all__ = [
    "Node", "el", "fragment", "HostDocument",
    "ConfigErrorCode", "ConfigurationError", "resolve_config", "resolve_target",
    "Testimonial", "WidgetConfig",
    "CarouselController", "attach_carousel",
    "LoadResult", "LoadStatus", "load_testimonials", "truncate",
    "generate_widget_css", "inject_styles", "render_widget",
    "WidgetResult", "WidgetStatus",
    "bootstrap", "generate_embed_code", "render_preview", "render_standalone",
]
