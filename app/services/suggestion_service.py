import logging
from typing import List, Optional

from app.config.settings import Settings
from app.config.suggestion_contexts import REQUIRED_FIELDS
from app.models.suggestions import SuggestionRequest
from app.services import ai_service
from app.services.errors import EmptyResultError, InvalidRequestError
from app.services.prompt_builder import build_prompt
from app.utils.normalizers import normalize_suggestions

logger = logging.getLogger(__name__)


def validate_request(request: SuggestionRequest) -> None:
    """Reject a request whose context is missing a required field."""
    if request.context not in REQUIRED_FIELDS:
        return
    field_names, message = REQUIRED_FIELDS[request.context]
    missing = request.missing_fields(field_names)
    if missing:
        logger.info("Rejected %s request, missing %s", request.context, missing)
        raise InvalidRequestError(message)


def generate_suggestions(request: SuggestionRequest, settings: Optional[Settings] = None) -> List[str]:
    """
    Validate, build the prompt, call the provider once and normalize the completion.
    Raises a SuggestionError subclass for every failure, including an empty result.
    """
    validate_request(request)
    prompt = build_prompt(request)
    raw_text = ai_service.get_completion(prompt, settings)
    suggestions = normalize_suggestions(raw_text, request.context)
    logger.info("Context %s produced %d suggestions", request.context, len(suggestions))

    if not suggestions:
        raise EmptyResultError("AI generated no suggestions. Please try again.")
    return suggestions
