from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cardseed.api.routes import router
from cardseed.engine.models import SERVICE_VERSION
from cardseed.utils.hashing import KDF_VERSION


app = FastAPI(
    title="cardseed",
    description="Check a recorded card shuffle and stretch it into a 32-byte secret.",
    version=SERVICE_VERSION,
)

# Secrets come back in responses, so only local pages may call the API.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost", "http://127.0.0.1"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok", "kdf_version": KDF_VERSION}
