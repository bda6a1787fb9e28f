from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from .src.routers import linkedinify, page
from .src.config import settings
from .otel import init_tracing

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Shared HTTP client for outbound provider calls
    httpx_client = httpx.AsyncClient(http2=True)
    app.state.httpx_client = httpx_client
    try:
        yield
    finally:
        await httpx_client.aclose()

app = FastAPI(title="LinkedInese API", version="1.0.0", lifespan=lifespan)

# Routers
app.include_router(linkedinify.router, prefix="/api")
app.include_router(page.router)

tracer = init_tracing(app, service_name=settings.service_name, service_version="v1", console_export=settings.trace_console)

@app.get("/health")
def health():
    return {"status": "ok", "service": settings.service_name}

def run():
    import uvicorn

    uvicorn.run("linkedinese.main:app", host="0.0.0.0", port=8000)
