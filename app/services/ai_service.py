import logging
from typing import Optional

import openai
import requests
from openai import OpenAI

from app.config.settings import GENERATION_CONFIG, Settings, get_settings
from app.services.errors import (
    AuthError,
    ConfigurationError,
    ConnectivityError,
    MalformedRequestError,
    RateLimitError,
    RequestTimeoutError,
    ServiceOverloadError,
    UnexpectedError,
)
from app.services.prompt_builder import Prompt

logger = logging.getLogger(__name__)

PROVIDER_NAMES = {"gemini": "Gemini", "openai": "OpenAI"}


def get_completion(prompt: Prompt, settings: Optional[Settings] = None) -> str:
    """
    Send one prompt to the configured provider and return the raw completion text.
    Exactly one outbound request per call; retrying is left to the caller.
    """
    settings = settings or get_settings()
    provider = PROVIDER_NAMES.get(settings.llm_provider, "Gemini")
    if not settings.api_key:
        env_var = "OPENAI_API_KEY" if settings.llm_provider == "openai" else "GEMINI_API_KEY"
        logger.error("%s not found in environment variables", env_var)
        raise ConfigurationError(
            f"{provider} API key not configured. Please add {env_var} to your .env file.",
            details=f"Create a .env file in the project root with: {env_var}=your-api-key-here",
        )

    if settings.llm_provider == "openai":
        return _openai_completion(prompt, settings)
    return _gemini_completion(prompt, settings)


def _provider_detail(response: requests.Response) -> str:
    """Best-effort error message out of a provider error body."""
    try:
        data = response.json()
    except ValueError:
        return response.text or ""
    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict):
        return error.get("message") or ""
    return str(error) if error else ""


def _raise_for_gemini_status(response: requests.Response) -> None:
    status = response.status_code
    if status < 400:
        return
    detail = _provider_detail(response)
    logger.error("Gemini API error: status=%s detail=%s", status, detail)

    if status == 401:
        raise AuthError("Invalid Gemini API key. Please check your API key.")
    if status == 429:
        raise RateLimitError("Rate limit exceeded. Please try again later.")
    if status == 503:
        raise ServiceOverloadError("Gemini API is overloaded. Please try again later.", details=detail or None)
    if status == 400:
        raise MalformedRequestError(f"Gemini API error: {detail or 'Bad request - check parameters'}")
    raise UnexpectedError(f"Gemini API error: {detail or 'Unknown error'}", details=f"HTTP {status}")


def _gemini_completion(prompt: Prompt, settings: Settings) -> str:
    url = f"{settings.gemini_base_url}/models/{settings.gemini_model}:generateContent"
    payload = {
        "contents": [
            {
                "parts": [
                    {"text": prompt.system},
                    {"text": prompt.user},
                ]
            }
        ],
        "generationConfig": GENERATION_CONFIG,
    }
    logger.info("Calling Gemini API (model=%s)", settings.gemini_model)
    try:
        response = requests.post(
            url,
            json=payload,
            headers={
                "Content-Type": "application/json",
                "x-goog-api-key": settings.gemini_api_key,
            },
            timeout=settings.timeout_seconds,
        )
    except requests.exceptions.Timeout as e:
        logger.error("Gemini API request timed out: %s", e)
        raise RequestTimeoutError("Request to Gemini API timed out. Please try again.") from e
    except requests.exceptions.RequestException as e:
        logger.error("Could not reach Gemini API: %s", e)
        raise ConnectivityError(
            "Unable to connect to Gemini API. Please check your internet connection."
        ) from e

    logger.info("Gemini API response status: %s", response.status_code)
    _raise_for_gemini_status(response)

    try:
        data = response.json()
    except ValueError as e:
        raise UnexpectedError("Gemini API returned an unreadable response.") from e
    if not isinstance(data, dict):
        raise UnexpectedError("Gemini API returned an unreadable response.")

    candidates = data.get("candidates") or []
    if not isinstance(candidates, list) or not candidates:
        # Blocked prompts come back with promptFeedback and no candidates
        logger.warning("Gemini API returned no candidates: %s", data.get("promptFeedback"))
        return ""
    try:
        text = candidates[0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        text = None
    if not isinstance(text, str):
        logger.warning("Gemini API candidate has no text part: %s", candidates)
        return ""
    logger.debug("Raw AI generated text: %r", text)
    return text.strip()


def _openai_completion(prompt: Prompt, settings: Settings) -> str:
    client = OpenAI(
        api_key=settings.openai_api_key,
        timeout=settings.timeout_seconds,
        max_retries=0,
    )
    logger.info("Calling OpenAI API (model=%s)", settings.openai_model)
    try:
        response = client.chat.completions.create(
            model=settings.openai_model,
            messages=[
                {"role": "system", "content": prompt.system},
                {"role": "user", "content": prompt.user},
            ],
            temperature=GENERATION_CONFIG["temperature"],
            top_p=GENERATION_CONFIG["topP"],
            max_tokens=GENERATION_CONFIG["maxOutputTokens"],
        )
    except openai.AuthenticationError as e:
        logger.error("OpenAI API rejected the key: %s", e)
        raise AuthError("Invalid OpenAI API key. Please check your API key.") from e
    except openai.RateLimitError as e:
        logger.error("OpenAI API rate limit: %s", e)
        raise RateLimitError("Rate limit exceeded. Please try again later.") from e
    except openai.BadRequestError as e:
        logger.error("OpenAI API bad request: %s", e)
        raise MalformedRequestError(f"OpenAI API error: {e.message}") from e
    except openai.APITimeoutError as e:
        logger.error("OpenAI API request timed out: %s", e)
        raise RequestTimeoutError("Request to OpenAI API timed out. Please try again.") from e
    except openai.APIConnectionError as e:
        logger.error("Could not reach OpenAI API: %s", e)
        raise ConnectivityError(
            "Unable to connect to OpenAI API. Please check your internet connection."
        ) from e
    except openai.APIStatusError as e:
        logger.error("OpenAI API error: status=%s %s", e.status_code, e)
        if e.status_code == 503:
            raise ServiceOverloadError("OpenAI API is overloaded. Please try again later.") from e
        raise UnexpectedError(f"OpenAI API error: {e.message}", details=f"HTTP {e.status_code}") from e

    if not response.choices:
        return ""
    text = response.choices[0].message.content or ""
    logger.debug("Raw AI generated text: %r", text)
    return text.strip()
