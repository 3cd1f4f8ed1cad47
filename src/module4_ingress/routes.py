# file: src/module4_ingress/routes.py
from fastapi import APIRouter, Request
from fastapi.responses import Response

from .schemas import CodeRequest

router = APIRouter()


@router.post("/code")
def code(code_request: CodeRequest, request: Request):
    """
    Accepts one message segment and starts its transfer.

    The segment is encoded with Hamming(15,11), disturbed, corrected,
    decoded and forwarded in the background. The 200 response only means
    processing was started; loss and forwarding failures are never
    reported back.
    """
    request.app.state.dispatcher.submit(code_request.to_segment())
    return Response(status_code=200)


@router.get("/health")
def health(request: Request):
    """Returns liveness and the active channel policy."""
    channel = request.app.state.config['channel']
    return {
        "status": "ok",
        "message_loss_probability": channel['message_loss_probability'],
        "frame_error_probability": channel['frame_error_probability'],
    }
