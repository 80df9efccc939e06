"""
Layout Renderer — (WidgetConfig, témoignages) → fragment DOM.

Fonction pure : ni réseau ni minuterie. Dispatch par layout via
LAYOUT_RENDERERS ; le rendu d'une carte est identique pour tous les layouts.
"""
from typing import Callable, Dict, List, Optional, Sequence

from ..core.dom import Node, el, fragment
from ..core.schemas import Testimonial, WidgetConfig

EMPTY_MESSAGE = "No testimonials yet."
LOAD_FAILED_MESSAGE = "Could not load testimonials."

MAX_STARS = 5
STAR_FILLED = "★"
STAR_EMPTY = "☆"
# Borne de la chaîne affichée uniquement ; la note elle-même n'est pas modifiée
STAR_RENDER_LIMIT = 100

# Transitions du carrousel côté navigateur — mêmes règles que CarouselController
_CAROUSEL_STEP_JS = (
    "var s=this.parentNode.querySelector('.tm-carousel-inner'),n=s.children.length;"
    "if(!n)return;var i=((+s.getAttribute('data-index')||0)+{step}+n)%n;"
    "s.setAttribute('data-index',i);s.style.transform='translateX(-'+(i*100)+'%)';"
)
PREV_ONCLICK = _CAROUSEL_STEP_JS.format(step=-1)
NEXT_ONCLICK = _CAROUSEL_STEP_JS.format(step=1)


# ── Éléments d'une carte ────────────────────────────────────────────────────

def render_stars(rating: int) -> Node:
    """`rating` étoiles pleines, complétées jusqu'à 5 (note non bornée, affichage limité à STAR_RENDER_LIMIT)."""
    filled = min(max(0, rating), STAR_RENDER_LIMIT)
    empty = min(max(0, MAX_STARS - rating), STAR_RENDER_LIMIT)
    stars = STAR_FILLED * filled + STAR_EMPTY * empty
    return el("div", stars, cls="tm-stars", aria_label=f"{rating} out of {MAX_STARS} stars")


def render_card(config: WidgetConfig, item: Testimonial) -> Node:
    stars = render_stars(item.rating) if config.show_stars and item.rating is not None else None
    title = el("div", item.title, cls="tm-title") if item.title else None
    return el(
        "div",
        stars,
        title,
        el("p", f"“{item.content}”", cls="tm-content"),
        el("p", f"- {item.client_name}", cls="tm-author"),
        cls="tm-card",
    )


def render_header(config: WidgetConfig) -> Optional[Node]:
    if not config.widget_title:
        return None
    return el("h2", config.widget_title, cls="tm-widget-header")


# ── Messages de repli ───────────────────────────────────────────────────────

def render_empty() -> Node:
    return fragment(el("p", EMPTY_MESSAGE, cls="tm-message tm-empty"))


def render_load_failed() -> Node:
    return fragment(el("p", LOAD_FAILED_MESSAGE, cls="tm-message tm-error"))


# ── Layouts ─────────────────────────────────────────────────────────────────

def _render_single(config: WidgetConfig, items: Sequence[Testimonial]) -> List[Node]:
    return [render_card(config, items[0])]


def _render_list(config: WidgetConfig, items: Sequence[Testimonial]) -> List[Node]:
    cards = [render_card(config, t) for t in items]
    return [el("div", *cards, cls="testimonials-wrapper")]


def _render_grid(config: WidgetConfig, items: Sequence[Testimonial]) -> List[Node]:
    # Ordre source conservé : la grille CSS remplit ligne par ligne
    cards = [render_card(config, t) for t in items]
    return [el("div", *cards, cls="testimonials-wrapper", data_columns=config.grid_columns)]


def render_carousel(config: WidgetConfig, items: Sequence[Testimonial]) -> Node:
    """Bande horizontale + boutons précédent/suivant."""
    slides = [el("div", render_card(config, t), cls="tm-carousel-item") for t in items]
    nav = {} if slides else {"disabled": "disabled"}
    return el(
        "div",
        el("div", *slides, cls="tm-carousel-inner", data_index=0),
        el("button", "❮", cls="tm-carousel-btn prev", type="button",
           aria_label="Previous testimonial", onclick=PREV_ONCLICK, **nav),
        el("button", "❯", cls="tm-carousel-btn next", type="button",
           aria_label="Next testimonial", onclick=NEXT_ONCLICK, **nav),
        cls="tm-layout-carousel",
    )


def _render_carousel(config: WidgetConfig, items: Sequence[Testimonial]) -> List[Node]:
    return [render_carousel(config, items)]


LAYOUT_RENDERERS: Dict[str, Callable[[WidgetConfig, Sequence[Testimonial]], List[Node]]] = {
    "single":   _render_single,
    "list":     _render_list,
    "grid":     _render_grid,
    "carousel": _render_carousel,
}


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_widget(config: WidgetConfig, testimonials: Sequence[Testimonial]) -> Node:
    """
    Construit le fragment complet du widget.

    Séquence vide → message « rien à afficher », jamais une carte.
    L'en-tête n'est ajouté que si `widget_title` est non vide.
    """
    if not testimonials:
        return render_empty()

    renderer = LAYOUT_RENDERERS.get(config.layout, _render_list)
    return fragment(render_header(config), *renderer(config, testimonials))
