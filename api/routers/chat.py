# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-28
# Updated: 2026-10-19
# Description: chat.py
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

import settings
from api.dependencies import get_chat_service
from api.schemas.chat import ChatErrorResponse, ChatRequest, ChatResponse
from pipeline.Outcome import to_json_results
from services.ListChatService import ListChatService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post(
    "",
    response_model=ChatResponse,
    responses={500: {"model": ChatErrorResponse}},
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": ChatRequest.model_json_schema()}},
        },
    },
)
async def post_chat(
        request: Request,
        svc: ListChatService = Depends(get_chat_service),
):
    # Body is parsed inside the try so a bad body gets the same 500 shape
    # as a failed completion.
    try:
        req = ChatRequest.model_validate(await request.json())
        message = (req.message or "").strip() or settings.DEFAULT_MESSAGE

        logger.info("POST /chat (start) message_len=%d", len(message))
        outcomes = await svc.handle(message)
    except Exception as e:
        logger.exception("post_chat failed: %s", e)
        body = ChatErrorResponse(error="Failed to get chat completion", details=str(e))
        return JSONResponse(status_code=500, content=body.model_dump())

    results = to_json_results(outcomes)
    logger.info(
        "POST /chat (done) results=%d stored=%d",
        len(results),
        sum(1 for o in outcomes if o.present),
    )
    return ChatResponse(results=results)
