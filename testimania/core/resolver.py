"""
Config Resolver — attributs de la balise d'embarquement → WidgetConfig.

Deux erreurs fatales seulement (bootstrap interrompu, page hôte intacte) :
  - slug de collection absent
  - conteneur cible absent du document
Tout le reste est « best effort » : valeur illisible → valeur par défaut.
"""
import logging
from enum import Enum
from typing import Mapping, Optional
from urllib.parse import unquote

from .dom import Node
from .host import HostDocument
from .schemas import WidgetConfig

log = logging.getLogger(__name__)

# Nom d'attribut normalisé (sans "data-", kebab-case) → champ WidgetConfig
_ATTRIBUTE_FIELDS = {
    "slug":          "collection_id",
    "collection-id": "collection_id",
    "layout":        "layout",
    "theme":         "theme",
    "primary-color": "primary_color",
    "max-width":     "max_width",
    "max-items":     "max_items",
    "show-stars":    "show_stars",
    "widget-title":  "widget_title",
    "grid-columns":  "grid_columns",
    "border-radius": "border_radius",
    "shadow":        "shadow",
    "font":          "font",
    "gap":           "gap",
}


class ConfigErrorCode(str, Enum):
    MISSING_COLLECTION_ID = "missing_collection_id"
    MISSING_RENDER_TARGET = "missing_render_target"


class ConfigurationError(ValueError):
    """Erreur de configuration fatale : le widget ne s'affiche pas."""

    def __init__(self, code: ConfigErrorCode, message: str):
        super().__init__(message)
        self.code = code


def _normalize(name: str) -> str:
    name = name.strip().lower().replace("_", "-")
    return name[5:] if name.startswith("data-") else name


def resolve_config(attributes: Mapping[str, Optional[str]]) -> WidgetConfig:
    """
    Produit une WidgetConfig complète à partir des attributs bruts.

    Accepte `data-primary-color`, `primary-color` ou `primary_color`.
    Les attributs inconnus sont ignorés.

    Raises:
        ConfigurationError: MISSING_COLLECTION_ID si le slug est absent ou vide.
    """
    values = {}
    for name, raw in attributes.items():
        field = _ATTRIBUTE_FIELDS.get(_normalize(name))
        if field is not None and raw is not None:
            values[field] = raw

    slug = str(values.get("collection_id") or "").strip()
    if not slug:
        raise ConfigurationError(
            ConfigErrorCode.MISSING_COLLECTION_ID,
            "Testimania: data-slug is missing.",
        )
    values["collection_id"] = slug

    # Le générateur de snippet encode le titre (encodeURIComponent)
    if "widget_title" in values:
        values["widget_title"] = unquote(str(values["widget_title"]))

    return WidgetConfig(**values)


def resolve_target(document: HostDocument, container_id: str) -> Node:
    """
    Raises:
        ConfigurationError: MISSING_RENDER_TARGET si le conteneur est absent.
    """
    target = document.get_element_by_id(container_id)
    if target is None:
        raise ConfigurationError(
            ConfigErrorCode.MISSING_RENDER_TARGET,
            f"Testimania: Widget container div #{container_id} not found.",
        )
    return target
