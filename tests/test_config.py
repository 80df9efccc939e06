"""Tests Config Resolver — valeurs par défaut, replis silencieux, erreurs fatales."""
import pytest
from pydantic import ValidationError

from testimania.core.host import HostDocument
from testimania.core.resolver import (
    ConfigErrorCode, ConfigurationError, resolve_config, resolve_target,
)
from testimania.core.schemas import Testimonial as Record, WidgetConfig


# ── Valeurs par défaut ────────────────────────────────────────────────────────

def test_defaults():
    c = resolve_config({"data-slug": "acme"})
    assert c.collection_id == "acme"
    assert c.layout == "list"
    assert c.theme == "light"
    assert c.primary_color == "#f59e0b"
    assert c.max_width == "800px"
    assert c.gap == "16px"
    assert c.border_radius == "8px"
    assert c.max_items == 10
    assert c.show_stars is True
    assert c.widget_title == ""
    assert c.grid_columns == 3
    assert c.shadow == "md"
    assert c.font == "sans"


def test_all_attributes_read():
    c = resolve_config({
        "data-slug": "acme",
        "data-layout": "grid",
        "data-theme": "dark",
        "data-primary-color": "#123456",
        "data-max-width": "600px",
        "data-max-items": "4",
        "data-show-stars": "false",
        "data-widget-title": "Avis clients",
        "data-grid-columns": "2",
        "data-border-radius": "12px",
        "data-shadow": "lg",
        "data-font": "serif",
        "data-gap": "24px",
    })
    assert (c.layout, c.theme, c.shadow, c.font) == ("grid", "dark", "lg", "serif")
    assert (c.max_items, c.grid_columns) == (4, 2)
    assert c.show_stars is False
    assert c.widget_title == "Avis clients"
    assert c.primary_color == "#123456"
    assert (c.max_width, c.border_radius, c.gap) == ("600px", "12px", "24px")


def test_attribute_name_variants():
    c = resolve_config({"slug": "acme", "primary_color": "#000", "max-items": "3"})
    assert c.primary_color == "#000"
    assert c.max_items == 3


def test_unknown_attributes_ignored():
    c = resolve_config({"data-slug": "acme", "data-foo": "bar"})
    assert c == WidgetConfig(collection_id="acme")


# ── Replis silencieux ─────────────────────────────────────────────────────────

@pytest.mark.parametrize("field,value,expected", [
    ("layout", "masonry", "list"),
    ("theme", "purple", "light"),
    ("shadow", "xl", "md"),
    ("font", "comic", "sans"),
    ("theme", "DARK", "dark"),
    ("layout", " carousel ", "carousel"),
])
def test_unknown_enum_falls_back(field, value, expected):
    c = resolve_config({"slug": "acme", field: value})
    assert getattr(c, field) == expected


def test_unknown_theme_same_as_light():
    assert resolve_config({"slug": "a", "theme": "purple"}) == resolve_config({"slug": "a", "theme": "light"})


@pytest.mark.parametrize("value", ["abc", "0", "-3", "", "2.5", "NaN"])
def test_invalid_max_items_falls_back(value):
    assert resolve_config({"slug": "acme", "max-items": value}).max_items == 10


def test_invalid_grid_columns_falls_back():
    assert resolve_config({"slug": "acme", "grid-columns": "x"}).grid_columns == 3
    assert resolve_config({"slug": "acme", "grid-columns": "0"}).grid_columns == 3


@pytest.mark.parametrize("value,expected", [
    ("false", False), ("FALSE", False), ("true", True), ("no", True), ("", True),
])
def test_show_stars_only_false_disables(value, expected):
    assert resolve_config({"slug": "acme", "show-stars": value}).show_stars is expected


def test_widget_title_url_decoded():
    c = resolve_config({"slug": "acme", "widget-title": "Nos%20clients%20%26%20amis"})
    assert c.widget_title == "Nos clients & amis"


def test_unsafe_css_value_falls_back():
    c = resolve_config({"slug": "acme", "primary-color": "red;}body{display:none"})
    assert c.primary_color == "#f59e0b"
    c = resolve_config({"slug": "acme", "gap": "</style><script>"})
    assert c.gap == "16px"


def test_none_values_ignored():
    c = resolve_config({"slug": "acme", "layout": None, "theme": None})
    assert c.layout == "list"
    assert c.theme == "light"


def test_config_is_immutable():
    c = resolve_config({"slug": "acme"})
    with pytest.raises(ValidationError):
        c.layout = "grid"


# ── Erreurs fatales ───────────────────────────────────────────────────────────

@pytest.mark.parametrize("attrs", [{}, {"data-slug": ""}, {"data-slug": "   "}, {"data-layout": "grid"}])
def test_missing_slug_is_fatal(attrs):
    with pytest.raises(ConfigurationError) as exc:
        resolve_config(attrs)
    assert exc.value.code == ConfigErrorCode.MISSING_COLLECTION_ID


def test_missing_target_is_fatal():
    doc = HostDocument(embed_attributes={"data-slug": "acme"})
    with pytest.raises(ConfigurationError) as exc:
        resolve_target(doc, "testimania-widget")
    assert exc.value.code == ConfigErrorCode.MISSING_RENDER_TARGET


def test_target_found():
    doc = HostDocument.for_widget({"data-slug": "acme"}, "testimania-widget")
    assert resolve_target(doc, "testimania-widget").attrs["id"] == "testimania-widget"


# ── Testimonial ───────────────────────────────────────────────────────────────

def test_testimonial_minimal():
    t = Record.model_validate({"content": "Super", "client_name": "Ana"})
    assert t.rating is None
    assert t.title is None


def test_testimonial_rating_coerced():
    assert Record.model_validate({"content": "x", "rating": "4"}).rating == 4
    assert Record.model_validate({"content": "x", "rating": "abc"}).rating is None


def test_testimonial_rating_not_clamped():
    assert Record.model_validate({"content": "x", "rating": 9}).rating == 9


def test_testimonial_requires_content():
    with pytest.raises(ValidationError):
        Record.model_validate({"client_name": "Ana"})


def test_testimonial_null_and_numeric_fields():
    t = Record.model_validate({"title": 2024, "content": "x", "client_name": None})
    assert t.title == "2024"
    assert t.client_name == ""


def test_testimonial_extra_fields_ignored():
    t = Record.model_validate({"content": "x", "client_name": "A", "id": 42, "approved": True})
    assert t.content == "x"
