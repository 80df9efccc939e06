"""
Carousel Controller — machine à états d'index, propriétaire de son état.

  état initial : 0
  next : i := (i + 1) mod total
  prev : i := (i - 1 + total) mod total

Seul effet observable : la bande est translatée pour montrer l'élément i.
Pas de minuterie, pas de clavier, pas d'état terminal.
"""
import logging
from typing import Optional

from .core.dom import Node

log = logging.getLogger(__name__)

STRIP_CLASS = "tm-carousel-inner"
ITEM_CLASS = "tm-carousel-item"


class CarouselController:
    def __init__(self, fragment: Node):
        strip = fragment.find(cls=STRIP_CLASS)
        if strip is None:
            raise ValueError("Fragment sans bande de carrousel (.tm-carousel-inner)")
        total = sum(1 for c in strip.children if isinstance(c, Node) and c.has_class(ITEM_CLASS))
        if total == 0:
            raise ValueError("Carrousel vide : aucun contrôleur")
        self._strip = strip
        self._total = total
        self._index = 0
        self._apply()

    @property
    def total(self) -> int:
        return self._total

    def current_index(self) -> int:
        return self._index

    def next(self) -> int:
        self._index = (self._index + 1) % self._total
        self._apply()
        return self._index

    def prev(self) -> int:
        self._index = (self._index - 1 + self._total) % self._total
        self._apply()
        return self._index

    def click(self, control: str) -> int:
        """Clic sur un bouton de navigation ("prev" ou "next")."""
        if control == "next":
            return self.next()
        if control == "prev":
            return self.prev()
        raise ValueError(f"Contrôle inconnu : {control!r}")

    def _apply(self) -> None:
        self._strip.attrs["data-index"] = str(self._index)
        self._strip.set_style(f"transform: translateX(-{self._index * 100}%)")


def attach_carousel(fragment: Node) -> Optional[CarouselController]:
    """Contrôleur si le fragment contient au moins un élément, sinon None."""
    strip = fragment.find(cls=STRIP_CLASS)
    if strip is None or not any(isinstance(c, Node) and c.has_class(ITEM_CLASS) for c in strip.children):
        log.debug("Carrousel sans élément : contrôles inactifs")
        return None
    return CarouselController(fragment)
