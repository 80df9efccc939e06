"""
Data Loader — une seule requête GET, sans nouvelle tentative.

Trois issues terminales, jamais d'exception :
  loaded → au moins un témoignage (après troncature)
  empty  → réponse valide mais aucun témoignage
  failed → erreur transport, timeout, statut non-2xx, corps illisible
"""
import logging
from enum import Enum
from typing import Any, List, Optional, Sequence

import requests
from pydantic import BaseModel, Field, ValidationError

from . import settings
from .core.schemas import Testimonial, WidgetConfig

log = logging.getLogger(__name__)

TESTIMONIALS_PATH = "/api/testimonials"


class LoadStatus(str, Enum):
    LOADED = "loaded"
    EMPTY = "empty"
    FAILED = "failed"


class LoadResult(BaseModel):
    status: LoadStatus
    testimonials: List[Testimonial] = Field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def loaded(cls, testimonials: Sequence[Testimonial]) -> "LoadResult":
        return cls(status=LoadStatus.LOADED, testimonials=list(testimonials))

    @classmethod
    def empty(cls) -> "LoadResult":
        return cls(status=LoadStatus.EMPTY)

    @classmethod
    def failed(cls, error: str) -> "LoadResult":
        return cls(status=LoadStatus.FAILED, error=error)


def truncate(config: WidgetConfig, items: Sequence[Testimonial]) -> List[Testimonial]:
    """`single` → premier élément ; sinon les `max_items` premiers. Ordre conservé."""
    limit = 1 if config.layout == "single" else config.max_items
    return list(items[:limit])


def parse_testimonials(data: Any) -> List[Testimonial]:
    """Décode un tableau JSON ; les enregistrements invalides sont ignorés."""
    items = []
    for i, raw in enumerate(data):
        if not isinstance(raw, dict):
            log.warning("Témoignage #%d ignoré : objet attendu, reçu %s", i, type(raw).__name__)
            continue
        try:
            items.append(Testimonial.model_validate(raw))
        except ValidationError as exc:
            log.warning("Témoignage #%d ignoré : %s", i, exc.errors()[0].get("msg", exc))
    return items


def fetch_testimonials(collection_id: str, base_url: Optional[str] = None,
                       timeout: Optional[float] = None, session: Any = None) -> LoadResult:
    """
    GET {base_url}/api/testimonials?slug={collection_id}.

    `session` : requests.Session (ou compatible) ; module `requests` par défaut.
    L'ordre renvoyé par l'API est conservé tel quel.
    """
    url = (base_url or settings.API_BASE_URL).rstrip("/") + TESTIMONIALS_PATH
    http = session or requests
    try:
        resp = http.get(url, params={"slug": collection_id},
                        timeout=timeout or settings.FETCH_TIMEOUT)
        resp.raise_for_status()
        data = resp.json()
    except requests.JSONDecodeError as exc:
        # Hérite aussi de RequestException : à traiter avant
        log.error("Testimania: invalid JSON slug=%s : %s", collection_id, exc)
        return LoadResult.failed("Invalid JSON response")
    except requests.RequestException as exc:
        log.error("Testimania: fetch failed slug=%s : %s", collection_id, exc)
        return LoadResult.failed(f"Fetch failed: {exc}")
    except ValueError as exc:
        log.error("Testimania: invalid JSON slug=%s : %s", collection_id, exc)
        return LoadResult.failed("Invalid JSON response")

    if not isinstance(data, list):
        log.error("Testimania: array expected slug=%s, got %s", collection_id, type(data).__name__)
        return LoadResult.failed("Unexpected response format")

    items = parse_testimonials(data)
    return LoadResult.loaded(items) if items else LoadResult.empty()


def load_testimonials(config: WidgetConfig, base_url: Optional[str] = None,
                      timeout: Optional[float] = None, session: Any = None) -> LoadResult:
    """Récupère puis tronque selon le layout / max_items."""
    result = fetch_testimonials(config.collection_id, base_url=base_url,
                                timeout=timeout, session=session)
    if result.status != LoadStatus.LOADED:
        return result
    items = truncate(config, result.testimonials)
    log.info("Testimania: %d témoignage(s) chargé(s) slug=%s", len(items), config.collection_id)
    return LoadResult.loaded(items)
