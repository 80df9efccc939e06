"""
Router FastAPI — rendu du widget côté serveur.

GET  /widget/catalog                   → schéma WidgetConfig + valeurs énumérées
POST /widget/preview                   → attributs JSON → HTML d'aperçu
GET  /widget/{collection_id}           → <style> + widget (fragment HTML)
GET  /widget/{collection_id}/page      → page HTML complète
GET  /widget/{collection_id}/embed-code → {"embed_code": "..."}

Les paramètres de requête reprennent les attributs data-* sans le préfixe
(layout, theme, primary-color / primary_color, ...).
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse

from . import settings
from .core.host import HostDocument
from .core.resolver import ConfigurationError, resolve_config
from .core.schemas import FONTS, LAYOUTS, SHADOWS, THEMES, WidgetConfig
from .embed import bootstrap, generate_embed_code, render_preview

router = APIRouter(prefix="/widget", tags=["widget"])


def _attributes(request: Request, collection_id: str) -> Dict[str, Optional[str]]:
    attrs: Dict[str, Optional[str]] = dict(request.query_params)
    attrs["slug"] = collection_id
    return attrs


def _mount(request: Request, collection_id: str) -> HostDocument:
    document = HostDocument.for_widget(_attributes(request, collection_id),
                                       settings.CONTAINER_ID, title="Testimonials")
    result = bootstrap(document)
    if result.config is None:
        raise HTTPException(status_code=422, detail=result.error)
    return document


@router.get("/catalog", summary="Options du widget et leur schéma")
def catalog() -> JSONResponse:
    return JSONResponse({
        "layouts": list(LAYOUTS),
        "themes":  list(THEMES),
        "shadows": list(SHADOWS),
        "fonts":   list(FONTS),
        "schema":  WidgetConfig.model_json_schema(),
    })


@router.post("/preview", response_class=HTMLResponse, summary="Aperçu avec témoignage d'exemple")
def preview(attributes: Dict[str, Any]) -> HTMLResponse:
    attrs = {"slug": "preview", **attributes}
    try:
        config = resolve_config(attrs)
    except ConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return HTMLResponse(render_preview(config))


@router.get("/{collection_id}", response_class=HTMLResponse, summary="Fragment HTML du widget")
def widget_fragment(collection_id: str, request: Request) -> HTMLResponse:
    """Échec de chargement ou collection vide → 200 avec le message de repli."""
    document = _mount(request, collection_id)
    stylesheets = "\n".join(n.to_html() for n in document.head)
    target = document.get_element_by_id(settings.CONTAINER_ID)
    return HTMLResponse(stylesheets + "\n" + target.to_html())


@router.get("/{collection_id}/page", response_class=HTMLResponse, summary="Page complète")
def widget_page(collection_id: str, request: Request) -> HTMLResponse:
    return HTMLResponse(_mount(request, collection_id).render())


@router.get("/{collection_id}/embed-code", summary="Snippet d'embarquement")
def embed_code(collection_id: str, request: Request) -> dict:
    try:
        config = resolve_config(_attributes(request, collection_id))
    except ConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"embed_code": generate_embed_code(config), "config": config.model_dump()}
