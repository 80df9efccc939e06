"""
Schémas Pydantic du widget Testimania.

WidgetConfig : configuration immuable, entièrement « défautée ».
  Chaque champ énuméré inconnu retombe silencieusement sur sa valeur par
  défaut ; chaque champ numérique illisible aussi. Seul `collection_id` est
  obligatoire.
Testimonial  : enregistrement en lecture seule tel que reçu de l'API.
"""
import logging
import re
from typing import Any, Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

log = logging.getLogger(__name__)

LayoutType = Literal["list", "grid", "carousel", "single"]
ThemeType = Literal["light", "dark"]
ShadowType = Literal["none", "sm", "md", "lg"]
FontType = Literal["sans", "serif", "mono"]

LAYOUTS = get_args(LayoutType)
THEMES = get_args(ThemeType)
SHADOWS = get_args(ShadowType)
FONTS = get_args(FontType)

_ENUM_VALUES = {
    "layout": LAYOUTS,
    "theme": THEMES,
    "shadow": SHADOWS,
    "font": FONTS,
}

# Valeur CSS injectée telle quelle dans la feuille de style : pas de fin de
# déclaration, de bloc, de balise ni de commentaire.
_UNSAFE_CSS = re.compile(r"[;{}<>\\]|/\*|\*/")


def is_safe_css_value(value: str) -> bool:
    return bool(value.strip()) and not _UNSAFE_CSS.search(value)


def _field_default(info: ValidationInfo) -> Any:
    return WidgetConfig.model_fields[info.field_name].default


class WidgetConfig(BaseModel):
    """Configuration d'une instance de widget (construite une fois par bootstrap)."""
    model_config = ConfigDict(frozen=True)

    collection_id: str = Field(..., min_length=1, description="Slug de la collection")
    layout: LayoutType = "list"
    theme: ThemeType = "light"
    primary_color: str = "#f59e0b"
    max_width: str = "800px"
    gap: str = "16px"
    border_radius: str = "8px"
    max_items: int = Field(default=10, ge=1)
    show_stars: bool = True
    widget_title: str = ""
    grid_columns: int = Field(default=3, ge=1, description="Utilisé uniquement en layout grid")
    shadow: ShadowType = "md"
    font: FontType = "sans"

    @field_validator("layout", "theme", "shadow", "font", mode="before")
    @classmethod
    def _known_token(cls, value: Any, info: ValidationInfo) -> Any:
        token = value.strip().lower() if isinstance(value, str) else value
        if token in _ENUM_VALUES[info.field_name]:
            return token
        default = _field_default(info)
        log.debug("Valeur %s inconnue %r → %r", info.field_name, value, default)
        return default

    @field_validator("max_items", "grid_columns", mode="before")
    @classmethod
    def _positive_int(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, bool):
            return _field_default(info)
        try:
            number = int(str(value).strip())
        except (TypeError, ValueError):
            return _field_default(info)
        return number if number >= 1 else _field_default(info)

    @field_validator("primary_color", "max_width", "gap", "border_radius", mode="before")
    @classmethod
    def _css_value(cls, value: Any, info: ValidationInfo) -> Any:
        if not isinstance(value, str) or not is_safe_css_value(value):
            return _field_default(info)
        return value.strip()

    @field_validator("show_stars", mode="before")
    @classmethod
    def _stars_flag(cls, value: Any) -> bool:
        # Seul "false" désactive les étoiles (comportement de l'attribut data-show-stars)
        if isinstance(value, bool):
            return value
        if value is None:
            return True
        return str(value).strip().lower() != "false"

    @field_validator("widget_title", mode="before")
    @classmethod
    def _title(cls, value: Any) -> str:
        return "" if value is None else str(value).strip()

    @field_validator("collection_id", mode="before")
    @classmethod
    def _slug(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


class Testimonial(BaseModel):
    """Témoignage approuvé (format de l'API : {rating?, title?, content, client_name})."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    rating: Optional[int] = None
    title: Optional[str] = None
    content: str
    client_name: str = ""

    @field_validator("title", mode="before")
    @classmethod
    def _title(cls, value: Any) -> Optional[str]:
        return None if value is None else str(value)

    @field_validator("content", mode="before")
    @classmethod
    def _content(cls, value: Any) -> Any:
        # Contenu absent → enregistrement rejeté ; sinon converti en texte
        return value if value is None or isinstance(value, str) else str(value)

    @field_validator("client_name", mode="before")
    @classmethod
    def _client_name(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("rating", mode="before")
    @classmethod
    def _rating(cls, value: Any) -> Optional[int]:
        # Pas de bornage ici : la plage 1–5 est validée en amont
        if value is None or value == "" or isinstance(value, bool):
            return None
        try:
            return int(float(value))
        except (TypeError, ValueError, OverflowError):
            return None
