"""
Suggestion contexts: the context tags the editor sends, the fields each one requires,
and the boilerplate prefixes the model tends to add before its answer.
Normalizers compile the prefix lists into regexes at import time.
Add or edit entries here to support a new context without touching pipeline logic.
"""
from typing import Dict, List, Tuple

RESUME_BULLET_POINT = "resume_bullet_point"
EDUCATION_ACHIEVEMENT = "education_achievement"
SKILLS_SUGGESTION = "skills_suggestion"
PROJECT_DESCRIPTION = "project_description"
PROJECT_TECHNOLOGIES = "project_technologies"
CERTIFICATION_SUGGESTION = "certification_suggestion"
ABOUT_ME_DESCRIPTION = "about_me_description"

# Unknown contexts are rendered with this template and normalized with the line rules.
DEFAULT_CONTEXT = RESUME_BULLET_POINT

SUGGESTION_CONTEXTS: List[str] = [
    RESUME_BULLET_POINT,
    EDUCATION_ACHIEVEMENT,
    SKILLS_SUGGESTION,
    PROJECT_DESCRIPTION,
    PROJECT_TECHNOLOGIES,
    CERTIFICATION_SUGGESTION,
    ABOUT_ME_DESCRIPTION,
]

# Context -> (request attribute names that must be non-empty, error message).
REQUIRED_FIELDS: Dict[str, Tuple[Tuple[str, ...], str]] = {
    RESUME_BULLET_POINT: (
        ("company", "position"),
        "Company and position are required for resume bullet points",
    ),
    EDUCATION_ACHIEVEMENT: (
        ("institution", "degree"),
        "Institution and degree are required for education achievements",
    ),
    SKILLS_SUGGESTION: (
        ("position",),
        "Position is required for skills suggestions",
    ),
    PROJECT_DESCRIPTION: (
        ("project_name",),
        "Project name is required for project descriptions",
    ),
    PROJECT_TECHNOLOGIES: (
        ("project_name",),
        "Project name is required for project technologies",
    ),
    CERTIFICATION_SUGGESTION: (
        ("position",),
        "Position is required for certification suggestions",
    ),
    ABOUT_ME_DESCRIPTION: (
        ("position",),
        "Position is required for about me descriptions",
    ),
}

# Contexts whose completion is a delimited list -> (leading boilerplate variants, max items).
# "Here are ...:" style intros are matched up to their colon; the rest are matched literally.
LIST_CONTEXTS: Dict[str, Tuple[List[str], int]] = {
    SKILLS_SUGGESTION: (
        [
            "Here are",
            "Here's",
            "Skills:",
            "Technical skills:",
            "Soft skills:",
            "Relevant skills:",
        ],
        15,
    ),
    PROJECT_TECHNOLOGIES: (
        [
            "Technologies used:",
            "Tech stack:",
            "Technologies:",
            "Tools used:",
        ],
        8,
    ),
}

# Contexts whose completion is one paragraph -> leading boilerplate variants.
PARAGRAPH_CONTEXTS: Dict[str, List[str]] = {
    PROJECT_DESCRIPTION: [
        "Project Description:",
        "Description:",
        "Summary:",
    ],
    ABOUT_ME_DESCRIPTION: [
        "About Me:",
        "Professional Summary:",
        "Personal Summary:",
        "Summary:",
    ],
}

# Standalone filler words the model sometimes leaves between list items.
CONNECTOR_WORDS: List[str] = ["and", "also", "additionally", "furthermore", "moreover"]

LIST_ITEM_MAX_LENGTH = 50
LINE_MAX_LENGTH = 150
LINE_MAX_ITEMS = 3
PARAGRAPH_MAX_SENTENCES = 3
# A list split that yields fewer items than this is retried on whitespace as well.
LIST_MIN_ITEMS = 3
