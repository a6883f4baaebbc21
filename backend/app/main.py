from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .api.recipes import router as recipes_router
from .api.websocket import router as ws_router
from .core.config import get_settings

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

app = FastAPI(title="cookmark", version="0.1.0", description="Cooklang recipe parsing service")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recipes_router)
app.include_router(ws_router)

@app.get("/api/health")
async def health_check():
    return {"status": "ok", "message": "cookmark API is running"}
