"""
Chat router
- forwards a student's question plus the visible conversation to Gemini
- the system prompt is added by the client on the first turn only
"""

from fastapi import APIRouter, Depends, Header, Response

from dependencies.security import get_current_user
from models.users import User as UserModel
from schemas.chat import ChatReply, ChatRequest
from services.llm.base import ChatClient
from services.llm.llm_gemini import get_chat_client

router = APIRouter(prefix="/chat", tags=["AI chat"])


@router.post("/")
async def post_chat(
    req: ChatRequest,
    response: Response,
    client: ChatClient = Depends(get_chat_client),
    user: UserModel = Depends(get_current_user),
    x_request_id: str | None = Header(default=None, alias="X-Request-Id"),
):
    """
    - X-Request-Id is echoed back for tracing
    - Cache-Control: no-store, replies may contain personal academic data
    """
    reply = await client.chat(req.message, req.history)

    if x_request_id:
        response.headers["X-Request-Id"] = x_request_id
    response.headers["Cache-Control"] = "no-store"

    return {"success": True, "data": ChatReply(message=reply).model_dump()}
