# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-07
# Updated: 2026-10-19
# Description: main.py
# -----------------------------------------------------------------------------
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

import settings
from api.dependencies import get_container
from api.routers import chat, health


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Close upstream HTTP clients only if a request ever built the container
    if get_container.cache_info().currsize:
        await get_container().aclose()


logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
app = FastAPI(title="CASELIST API", lifespan=lifespan)
app.include_router(health.router)
app.include_router(chat.router)

# Mount Gradio (served by the SAME uvicorn process/port)
if settings.MOUNT_UI:
    import gradio as gr

    from ui.gradio_app import build_gradio_app

    gradio_blocks = build_gradio_app(api_base_url=settings.API_BASE_URL)
    app = gr.mount_gradio_app(app, gradio_blocks, path="/ui")
