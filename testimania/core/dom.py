"""
Arbre de nœuds typé — remplace la concaténation de chaînes HTML.

On construit d'abord l'arbre (Node), puis on l'attache au conteneur cible.
La sérialisation échappe TOUT texte et TOUTE valeur d'attribut : les champs
des témoignages (titre, contenu, nom) sont considérés comme non fiables.
"""
from html import escape
from typing import Dict, Iterator, List, Optional, Union

from pydantic import BaseModel, Field

# Contenu brut (non échappé) : uniquement le CSS/JS généré par le widget lui-même
RAW_TEXT_TAGS = {"style", "script"}
VOID_TAGS = {"br", "hr", "img", "input", "link", "meta"}


class Node(BaseModel):
    """Élément DOM minimal. `tag=None` → fragment (seuls les enfants sont rendus)."""
    tag: Optional[str] = None
    attrs: Dict[str, str] = Field(default_factory=dict)
    children: List[Union["Node", str]] = Field(default_factory=list)

    # ── Classes / style ─────────────────────────────────────────────────────

    @property
    def classes(self) -> List[str]:
        return self.attrs.get("class", "").split()

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def set_classes(self, *names: str) -> None:
        self.attrs["class"] = " ".join(n for n in names if n)

    def set_style(self, style: str) -> None:
        self.attrs["style"] = style

    # ── Parcours ────────────────────────────────────────────────────────────

    def iter(self) -> Iterator["Node"]:
        """Parcours en profondeur (pré-ordre), nœud courant inclus."""
        yield self
        for child in self.children:
            if isinstance(child, Node):
                yield from child.iter()

    def find_all(self, cls: Optional[str] = None, tag: Optional[str] = None) -> List["Node"]:
        return [
            n for n in self.iter()
            if (cls is None or n.has_class(cls)) and (tag is None or n.tag == tag)
        ]

    def find(self, cls: Optional[str] = None, tag: Optional[str] = None) -> Optional["Node"]:
        found = self.find_all(cls=cls, tag=tag)
        return found[0] if found else None

    def find_by_id(self, element_id: str) -> Optional["Node"]:
        for n in self.iter():
            if n.attrs.get("id") == element_id:
                return n
        return None

    def text_content(self) -> str:
        return "".join(
            c if isinstance(c, str) else c.text_content()
            for c in self.children
        )

    # ── Mutation ────────────────────────────────────────────────────────────

    def append(self, child: Union["Node", str]) -> None:
        self.children.append(child)

    def replace_children(self, content: Union["Node", str, None]) -> None:
        """Remplace le contenu ; un fragment est « déplié » dans le nœud."""
        if content is None:
            self.children = []
        elif isinstance(content, Node) and content.tag is None:
            self.children = list(content.children)
        else:
            self.children = [content]

    # ── Sérialisation ───────────────────────────────────────────────────────

    def to_html(self) -> str:
        raw = self.tag in RAW_TEXT_TAGS
        inner = "".join(
            (c if raw else escape(c)) if isinstance(c, str) else c.to_html()
            for c in self.children
        )
        if self.tag is None:
            return inner

        attrs = "".join(f' {k}="{escape(v, quote=True)}"' for k, v in self.attrs.items())
        if self.tag in VOID_TAGS:
            return f"<{self.tag}{attrs}>"
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"


Node.model_rebuild()


def el(tag: str, *children: Union[Node, str, None], cls: Optional[str] = None, **attrs: str) -> Node:
    """
    Raccourci de construction.

        >>> el("p", "Bonjour", cls="tm-content").to_html()
        '<p class="tm-content">Bonjour</p>'

    Les enfants `None` sont ignorés (éléments optionnels). Les attributs
    `data_xxx` / `aria_xxx` deviennent `data-xxx` / `aria-xxx`.
    """
    node_attrs: Dict[str, str] = {}
    if cls:
        node_attrs["class"] = cls
    for key, value in attrs.items():
        node_attrs[key.replace("_", "-")] = str(value)
    return Node(tag=tag, attrs=node_attrs, children=[c for c in children if c is not None])


def fragment(*children: Union[Node, str, None]) -> Node:
    return Node(tag=None, children=[c for c in children if c is not None])
