from unittest.mock import MagicMock, patch

import pytest

from app.services.errors import (
    AuthError,
    ConfigurationError,
    ConnectivityError,
    MalformedRequestError,
    RateLimitError,
    RequestTimeoutError,
    ServiceOverloadError,
)

SUGGEST_URL = "/api/ai-suggest"


def _gemini_response(text):
    response = MagicMock()
    response.status_code = 200
    response.json.return_value = {"candidates": [{"content": {"parts": [{"text": text}]}}]}
    return response


def test_skills_end_to_end(client, gemini_env):
    """Prompt carries the request fields; the stub completion comes back as a clean list."""
    completion = _gemini_response("Java, Spring Boot, PostgreSQL, Kafka, AWS, Leadership, Communication")
    with patch("app.services.ai_service.requests.post", return_value=completion) as post:
        response = client.post(
            SUGGEST_URL,
            json={"context": "skills_suggestion", "position": "Backend Engineer", "industry": "Fintech"},
        )

    assert response.status_code == 200
    assert response.json() == {
        "suggestions": ["Java", "Spring Boot", "PostgreSQL", "Kafka", "AWS", "Leadership", "Communication"]
    }
    prompt_text = post.call_args.kwargs["json"]["contents"][0]["parts"][1]["text"]
    assert "Backend Engineer" in prompt_text
    assert "Fintech" in prompt_text


def test_missing_company_rejected(client, gemini_env):
    with patch("app.services.ai_service.requests.post") as post:
        response = client.post(SUGGEST_URL, json={"context": "resume_bullet_point", "position": "Engineer"})
    assert response.status_code == 400
    assert response.json() == {"error": "Company and position are required for resume bullet points"}
    post.assert_not_called()


def test_missing_position_rejected_before_network_call(client, gemini_env):
    with patch("app.services.ai_service.requests.post") as post:
        response = client.post(SUGGEST_URL, json={"context": "resume_bullet_point", "company": "Acme"})
    assert response.status_code == 400
    post.assert_not_called()


@pytest.mark.parametrize("body, message", [
    ({"context": "education_achievement", "institution": "MIT"},
     "Institution and degree are required for education achievements"),
    ({"context": "skills_suggestion", "position": "   "},
     "Position is required for skills suggestions"),
    ({"context": "project_description", "position": "Engineer"},
     "Project name is required for project descriptions"),
    ({"context": "project_technologies", "position": "Engineer"},
     "Project name is required for project technologies"),
    ({"context": "certification_suggestion"},
     "Position is required for certification suggestions"),
    ({"context": "about_me_description", "name": "Dana"},
     "Position is required for about me descriptions"),
])
def test_required_fields_per_context(client, gemini_env, body, message):
    with patch("app.services.ai_service.requests.post") as post:
        response = client.post(SUGGEST_URL, json=body)
    assert response.status_code == 400
    assert response.json()["error"] == message
    post.assert_not_called()


def test_missing_api_key_is_500_without_network(client, monkeypatch):
    monkeypatch.setenv("LLM_PROVIDER", "gemini")
    monkeypatch.setenv("GEMINI_API_KEY", "")
    with patch("app.services.ai_service.requests.post") as post:
        response = client.post(SUGGEST_URL, json={"context": "skills_suggestion", "position": "Engineer"})
    assert response.status_code == 500
    data = response.json()
    assert "GEMINI_API_KEY" in data["error"]
    assert "details" in data
    post.assert_not_called()


def test_about_me_returns_single_suggestion(client, gemini_env):
    completion = _gemini_response(
        "About Me: Nurse with 8 years in emergency care. Calm under pressure. Loves teaching. Runs marathons."
    )
    with patch("app.services.ai_service.requests.post", return_value=completion):
        response = client.post(SUGGEST_URL, json={"context": "about_me_description", "position": "Nurse"})
    assert response.status_code == 200
    assert response.json()["suggestions"] == [
        "Nurse with 8 years in emergency care. Calm under pressure. Loves teaching."
    ]


def test_project_technologies_accepts_camel_case(client, gemini_env):
    completion = _gemini_response("React, Node.js, MongoDB, Docker")
    with patch("app.services.ai_service.requests.post", return_value=completion) as post:
        response = client.post(
            SUGGEST_URL,
            json={"context": "project_technologies", "projectName": "ShopCart", "position": "Full Stack Developer"},
        )
    assert response.status_code == 200
    assert response.json()["suggestions"] == ["React", "Node.js", "MongoDB", "Docker"]
    assert '"ShopCart"' in post.call_args.kwargs["json"]["contents"][0]["parts"][1]["text"]


def test_unknown_context_uses_bullet_points(client, gemini_env):
    completion = _gemini_response("Cooked things\nServed things\nCleaned things\nExtra line")
    with patch("app.services.ai_service.requests.post", return_value=completion):
        response = client.post(SUGGEST_URL, json={"context": "mystery", "position": "Chef"})
    assert response.status_code == 200
    assert response.json()["suggestions"] == ["Cooked things", "Served things", "Cleaned things"]


def test_empty_completion_is_500(client, gemini_env):
    with patch("app.services.ai_service.requests.post", return_value=_gemini_response("   \n  ")):
        response = client.post(SUGGEST_URL, json={"context": "skills_suggestion", "position": "Engineer"})
    assert response.status_code == 500
    assert response.json() == {"error": "AI generated no suggestions. Please try again."}


@pytest.mark.parametrize("error, status", [
    (AuthError("Invalid Gemini API key. Please check your API key."), 401),
    (RateLimitError("Rate limit exceeded. Please try again later."), 429),
    (ServiceOverloadError("Gemini API is overloaded. Please try again later."), 503),
    (MalformedRequestError("Gemini API error: bad"), 400),
    (RequestTimeoutError("Request to Gemini API timed out. Please try again."), 408),
    (ConnectivityError("Unable to connect to Gemini API."), 503),
    (ConfigurationError("Gemini API key not configured.", details="add it"), 500),
])
def test_gateway_errors_map_to_status(client, gemini_env, error, status):
    with patch("app.services.ai_service.get_completion", side_effect=error):
        response = client.post(SUGGEST_URL, json={"context": "skills_suggestion", "position": "Engineer"})
    assert response.status_code == status
    assert response.json() == error.to_dict()


def test_unexpected_exception_is_500(client, gemini_env):
    with patch("app.services.suggestion_service.normalize_suggestions", side_effect=RuntimeError("boom")):
        with patch("app.services.ai_service.requests.post", return_value=_gemini_response("x")):
            response = client.post(SUGGEST_URL, json={"context": "skills_suggestion", "position": "Engineer"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate AI suggestions. Please try again."}


def test_invalid_body_is_400(client):
    response = client.post(SUGGEST_URL, json={"context": "skills_suggestion", "position": 42})
    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "Invalid request body"
    assert "position" in data["details"]


def test_non_json_body_is_400(client):
    response = client.post(SUGGEST_URL, content="not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"
