"""
Document hôte — la page tierce dans laquelle le widget est embarqué.

Le widget ne lit que les attributs de sa balise d'embarquement et ne modifie
que deux choses : la feuille de style qu'il ajoute dans <head> et le contenu
de son conteneur cible.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .dom import Node, el


class HostDocument(BaseModel):
    title: str = ""
    lang: str = "en"
    head: List[Node] = Field(default_factory=list)
    body: List[Node] = Field(default_factory=list)
    embed_attributes: Dict[str, Optional[str]] = Field(
        default_factory=dict,
        description="Attributs data-* de la balise <script> d'embarquement",
    )

    @classmethod
    def for_widget(cls, attributes: Dict[str, Optional[str]], container_id: str, title: str = "") -> "HostDocument":
        """Page minimale contenant uniquement le conteneur du widget."""
        return cls(
            title=title,
            body=[el("div", id=container_id)],
            embed_attributes=dict(attributes),
        )

    def get_element_by_id(self, element_id: str) -> Optional[Node]:
        for root in self.body:
            found = root.find_by_id(element_id)
            if found is not None:
                return found
        return None

    def get_head_node(self, element_id: str) -> Optional[Node]:
        for node in self.head:
            if node.attrs.get("id") == element_id:
                return node
        return None

    def append_to_head(self, node: Node) -> None:
        self.head.append(node)

    def remove_from_head(self, element_id: str) -> int:
        before = len(self.head)
        self.head = [n for n in self.head if n.attrs.get("id") != element_id]
        return before - len(self.head)

    def render(self) -> str:
        """Sérialise la page complète."""
        head_html = "\n  ".join(n.to_html() for n in self.head)
        body_html = "\n".join(n.to_html() for n in self.body)
        title = el("title", self.title).to_html() if self.title else ""
        return f"""<!DOCTYPE html>
<html lang="{self.lang}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  {title}
  {head_html}
</head>
<body>
{body_html}
</body>
</html>"""
