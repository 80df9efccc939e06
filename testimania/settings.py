"""
Paramètres d'environnement du widget.
"""
import os

API_BASE_URL   = os.getenv("TESTIMANIA_API_BASE_URL", "http://localhost:8000")
FETCH_TIMEOUT  = float(os.getenv("TESTIMANIA_FETCH_TIMEOUT", "10"))
CONTAINER_ID   = os.getenv("TESTIMANIA_CONTAINER_ID", "testimania-widget")
SCRIPT_URL     = os.getenv("TESTIMANIA_SCRIPT_URL", f"{API_BASE_URL}/embed.js")
