"""Core : schémas, arbre DOM, document hôte, résolution de configuration."""
from .dom import Node, el, fragment
from .host import HostDocument
from .resolver import ConfigErrorCode, ConfigurationError, resolve_config, resolve_target
from .schemas import Testimonial, WidgetConfig

__all__ = [
    "Node", "el", "fragment",
    "HostDocument",
    "ConfigErrorCode", "ConfigurationError", "resolve_config", "resolve_target",
    "Testimonial", "WidgetConfig",
]
