from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class SuggestionRequest(BaseModel):
    """Body of an AI suggestion request; which fields matter depends on `context`"""
    model_config = ConfigDict(populate_by_name=True)

    context: Optional[str] = None  # e.g. "resume_bullet_point", "skills_suggestion"
    company: Optional[str] = None
    position: Optional[str] = None
    duration: Optional[str] = None
    institution: Optional[str] = None
    degree: Optional[str] = None
    industry: Optional[str] = None
    project_name: Optional[str] = Field(default=None, alias="projectName")
    name: Optional[str] = None

    def missing_fields(self, field_names) -> List[str]:
        """Names from `field_names` whose value is absent or blank"""
        return [f for f in field_names if not (getattr(self, f) or "").strip()]

class SuggestionResponse(BaseModel):
    """Ordered suggestion strings for the editor"""
    suggestions: List[str]

class ErrorResponse(BaseModel):
    """Error body returned for every failed suggestion request"""
    error: str
    details: Optional[str] = None
