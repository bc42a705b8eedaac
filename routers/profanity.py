from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
import json
import logging

from models import ClassificationResult, ErrorResponse
from services.profanity import ProfanityClassifier, get_profanity_classifier

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 1000

profanity_router = APIRouter(tags=["profanity"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _message_length(message: str) -> int:
    """Length in UTF-16 code units, the way browser clients count characters"""
    return len(message.encode("utf-16-le", errors="surrogatepass")) // 2


def _is_json_request(request: Request) -> bool:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";")[0].strip().lower() == "application/json"


@profanity_router.post(
    "",
    response_model=ClassificationResult,
    responses={
        400: {"model": ErrorResponse},
        406: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def check_profanity(request: Request, classifier: ProfanityClassifier = Depends(get_profanity_classifier)):
    """
    Classify a message as profane or clean using vector similarity search
    """
    if not _is_json_request(request):
        return _error(406, "JSON Body expected")

    try:
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return _error(400, "Malformed JSON body")

        message = body.get("message") if isinstance(body, dict) else None
        if not message or not isinstance(message, str):
            return _error(400, "Message argument is required")

        if _message_length(message) > MAX_MESSAGE_LENGTH:
            return _error(413, f"Message is too long, it can atmost be {MAX_MESSAGE_LENGTH} characters")

        logger.info(f"Received profanity check for message of length: {len(message)}")
        return await classifier.classify(message)

    except Exception as e:
        logger.error(f"Unexpected error in check_profanity: {e}", exc_info=True)
        return _error(500, "Internal Server Error")
