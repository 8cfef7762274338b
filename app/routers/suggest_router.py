import logging

from fastapi import APIRouter

from app.models.suggestions import ErrorResponse, SuggestionRequest, SuggestionResponse
from app.services import suggestion_service
from app.services.errors import SuggestionError, UnexpectedError

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["ai"]
)

@router.post(
    "/ai-suggest",
    response_model=SuggestionResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        408: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
def ai_suggest(request: SuggestionRequest):
    logger.info("AI request received: context=%s", request.context)
    try:
        suggestions = suggestion_service.generate_suggestions(request)
    except SuggestionError:
        raise
    except Exception as e:
        logger.exception("AI suggestion error")
        raise UnexpectedError("Failed to generate AI suggestions. Please try again.") from e
    return SuggestionResponse(suggestions=suggestions)
