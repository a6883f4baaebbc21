from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState
import logging
import asyncio
from typing import Optional

from ..services.recipe_parser import RecipeParser
from ..core.config import Settings, get_settings

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1")


async def send_recipe(ws: WebSocket, text: str) -> None:
    recipe = RecipeParser.parse(text)
    if ws.application_state == WebSocketState.CONNECTED:
        await ws.send_json({"type": "recipe", "recipe": recipe.model_dump(mode="json")})
    else:
        log.warning("WebSocket not connected, parsed recipe dropped")


@router.websocket("/recipes/live")
async def live_preview(ws: WebSocket, settings: Settings = Depends(get_settings)):
    """
    Live editing: the client sends the whole document after every edit and
    gets the parsed recipe back once edits pause for ``parse_debounce_ms``.
    """
    await ws.accept()
    quiet = settings.parse_debounce_ms / 1000
    pending: Optional[str] = None
    edits = 0

    try:
        while True:
            try:
                message = await asyncio.wait_for(
                    ws.receive(),
                    timeout=quiet if pending is not None else None,
                )
            except asyncio.TimeoutError:
                log.debug(f"Parsing after {edits} edit(s), {len(pending)} characters")
                await send_recipe(ws, pending)
                pending = None
                edits = 0
                continue

            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000))

            text = message.get("text")
            if text is None:
                log.warning("Rejected binary frame on live preview")
                await ws.send_json({"type": "error", "message": "Send the document as a text frame"})
                continue

            if len(text) > settings.max_document_chars:
                log.warning(f"Rejected live document of {len(text)} characters")
                await ws.send_json({
                    "type": "error",
                    "message": f"Document is {len(text)} characters, limit is {settings.max_document_chars}",
                })
                continue

            pending = text
            edits += 1
    except WebSocketDisconnect:
        log.info("Live preview client disconnected")
