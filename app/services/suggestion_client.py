"""
Client for the suggestion endpoint, as used by the resume editor.
Retry lives here rather than on the server: rate-limit and overload answers are
retried serially with exponential backoff (2s, 4s, 6s), everything else is raised at once.
"""
import logging
import time
from typing import Callable, List, Optional

import requests
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from app.models.suggestions import SuggestionRequest
from app.services.errors import (
    ConnectivityError,
    RequestTimeoutError,
    SuggestionError,
    UnexpectedError,
    error_for_status,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"
SUGGEST_PATH = "/api/ai-suggest"


def is_retryable(exc: BaseException) -> bool:
    """Rate limits, 503 answers (rebuilt as overload) and anything the server flags as an overload."""
    if not isinstance(exc, SuggestionError):
        return False
    if exc.retryable:
        return True
    return "overload" in exc.message.lower()


class SuggestionClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 35.0,
        max_retries: int = 3,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.session = session or requests.Session()
        self._sleep = sleep

    def suggest(self, context: str, **fields) -> List[str]:
        """
        Ask for suggestions, e.g. suggest("skills_suggestion", position="Backend Engineer").
        Field names follow SuggestionRequest (project_name or projectName).
        """
        request = SuggestionRequest(context=context, **fields)
        payload = request.model_dump(by_alias=True, exclude_none=True)
        retrying = Retrying(
            stop=stop_after_attempt(self.max_retries + 1),
            wait=wait_exponential(multiplier=2, max=6),
            retry=retry_if_exception(is_retryable),
            sleep=self._sleep,
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        return retrying(self._post_once, payload)

    def _post_once(self, payload: dict) -> List[str]:
        url = f"{self.base_url}{SUGGEST_PATH}"
        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise RequestTimeoutError("Suggestion request timed out. Please try again.") from e
        except requests.exceptions.RequestException as e:
            raise ConnectivityError(f"Unable to reach the suggestion service at {self.base_url}.") from e

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if response.status_code == 200:
            suggestions = data.get("suggestions")
            if not isinstance(suggestions, list):
                raise UnexpectedError("Suggestion service returned an unreadable response.")
            return suggestions

        message = data.get("error") or f"Suggestion request failed with HTTP {response.status_code}"
        raise error_for_status(response.status_code, message, data.get("details"))
