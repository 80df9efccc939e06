import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest


@pytest.fixture
def records():
    """5 enregistrements bruts tels que renvoyés par l'API, du plus récent au plus ancien."""
    return [
        {"rating": 5, "title": f"Titre {i}", "content": f"Contenu {i}", "client_name": f"Client {i}"}
        for i in range(5)
    ]
