import json

from fastapi import APIRouter, Depends, Header, HTTPException, Request, Response
from starlette.status import HTTP_403_FORBIDDEN
from ..schemas import ChatRequest, ChatResponse, HistoryResponse
from ..services.chat_service import ChatService
from ..core.security import current_user, require_user, rate_limit
from ..core.utils import weak_etag

router = APIRouter()

def service_dep(request: Request) -> ChatService:
    # Built once in create_app so the stores and their locks are shared
    return request.app.state.chat_service

@router.post("/chat", response_model=ChatResponse)
def post_chat(
    body: ChatRequest,
    user: dict | None = Depends(current_user),
    _lim = Depends(rate_limit),
    svc: ChatService = Depends(service_dep),
):
    details = body.property_details.to_details() if body.property_details else None
    reply = svc.chat(body.message, details, user_id=user["id"] if user else None)
    return ChatResponse(reply=reply.text, prediction=reply.prediction)

def _history(target_id: str, user: dict, svc: ChatService, response: Response, if_none_match: str | None):
    # Only admins or the owners themselves can read a transcript
    if user.get("role") != "admin" and user.get("id") != target_id:
        raise HTTPException(status_code=HTTP_403_FORBIDDEN, detail="Unauthorized access")

    payload = HistoryResponse(messages=[
        {"text": t.text, "sender": t.sender, "timestamp": t.timestamp} for t in svc.history(target_id)
    ])
    etag = weak_etag(json.dumps(payload.model_dump(mode="json"), separators=(',',':')).encode("utf-8"))
    if if_none_match and if_none_match == etag:
        return Response(status_code=304, headers={"ETag": etag})
    response.headers["ETag"] = etag
    return payload

@router.get("/chat/history", response_model=HistoryResponse)
def get_own_history(
    response: Response,
    if_none_match: str | None = Header(default=None),
    user: dict = Depends(require_user),
    _lim = Depends(rate_limit),
    svc: ChatService = Depends(service_dep),
):
    return _history(user["id"], user, svc, response, if_none_match)

@router.get("/chat/history/{user_id}", response_model=HistoryResponse)
def get_user_history(
    user_id: str,
    response: Response,
    if_none_match: str | None = Header(default=None),
    user: dict = Depends(require_user),
    _lim = Depends(rate_limit),
    svc: ChatService = Depends(service_dep),
):
    return _history(user_id, user, svc, response, if_none_match)
