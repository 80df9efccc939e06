"""
Testimania — FastAPI app
Démarrer : uvicorn testimania.api.main:app --reload --port 8001
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..router import router as widget_router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="Testimania — Widget", version="0.1.0", docs_url="/docs")

# Le widget est embarqué sur des domaines tiers
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["GET", "POST"], allow_headers=["*"])

app.include_router(widget_router)


@app.get("/health")
def health():
    return {"status": "ok"}
