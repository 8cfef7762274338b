"""
Prompt templates for every suggestion context.
Each template embeds an example of the expected output so the plain-text
completion can be split deterministically by app.utils.normalizers.
"""
from typing import NamedTuple

from app.config import suggestion_contexts as ctx
from app.models.suggestions import SuggestionRequest

SYSTEM_INSTRUCTION = (
    "You are a professional resume writer. "
    "Generate concise, impactful bullet points for resumes."
)


class Prompt(NamedTuple):
    system: str
    user: str


BULLET_POINT_TEMPLATE = """Generate 3 professional resume bullet points for a {position} position at {company}{duration_clause}.

Requirements:
- Each bullet point should start with a strong action verb
- Include specific achievements or responsibilities
- Be concise and impactful (max 120 characters each)
- Focus on quantifiable results when possible
- Make them relevant to the position and company

Format: Return only the 3 bullet points, one per line, without numbering or extra formatting.

Example format:
Developed and maintained React applications, improving system performance by 30%
Led cross-functional teams to deliver high-impact projects, increasing user satisfaction by 25%
Implemented automated testing and CI/CD pipelines, reducing deployment time by 60%"""

EDUCATION_TEMPLATE = """Generate 3 academic achievements or relevant coursework for a {degree} degree at {institution}{duration_clause}.

Requirements:
- Focus on academic achievements, research, projects, or relevant coursework
- Include GPA, honors, or academic recognition if applicable
- Be specific and relevant to the degree program
- Keep each achievement concise (max 120 characters each)

Format: Return only the 3 achievements, one per line, without numbering or extra formatting.

Example format:
Maintained 3.8 GPA while completing advanced algorithms and data structures coursework
Led research project on machine learning applications in healthcare systems
Graduated with honors and completed capstone project on scalable web applications"""

SKILLS_TEMPLATE = """Generate 10-15 relevant technical and soft skills for a {position} position in the {industry} industry.

Requirements:
- Mix of technical skills (programming languages, tools, frameworks)
- Soft skills (leadership, communication, problem-solving)
- Industry-specific skills relevant to the position
- Skills that would be valuable for this role
- Include both entry-level and advanced skills

IMPORTANT: Return ONLY the skills separated by commas, with no additional text, numbering, or formatting.

Example format:
JavaScript, React, Node.js, Python, AWS, Docker, Git, Agile, Leadership, Problem Solving, Communication, Team Collaboration, Data Analysis, API Development

Do not include any introductory text like "Here are the skills:" or "Skills include:". Just return the comma-separated list."""

PROJECT_DESCRIPTION_TEMPLATE = """Generate a professional project description for "{project_name}" project for a {position} position.

Requirements:
- Describe the project's purpose and impact
- Include technologies used and your role
- Focus on quantifiable results or outcomes
- Keep it concise but comprehensive (max 200 characters)
- Make it relevant to the position

Format: Return only the project description, without extra formatting.

Example format:
Developed a full-stack e-commerce platform using React and Node, implementing user authentication, payment processing, and admin dashboard. Deployed on AWS with 99.9% uptime and 40% improvement in user engagement."""

PROJECT_TECHNOLOGIES_TEMPLATE = """Generate 5-8 relevant technologies for a "{project_name}" project for a {position} position.

Requirements:
- Include frontend technologies (frameworks, libraries)
- Include backend technologies (languages, databases, servers)
- Include deployment and infrastructure tools
- Include testing and development tools
- Technologies should be relevant to the project type and position

IMPORTANT: Return ONLY the technologies separated by commas, with no additional text, numbering, or formatting.

Example format:
React, Node.js, MongoDB, Express.js, AWS, Docker, Jest, Git

Do not include any introductory text like "Technologies used:" or "Tech stack:". Just return the comma-separated list."""

CERTIFICATION_TEMPLATE = """Generate 3-5 relevant professional certifications for a {position} position in the {industry} industry.

Requirements:
- Industry-recognized certifications
- Certifications that would enhance credibility for this position
- Include both technical and professional certifications
- Focus on certifications that are currently in demand
- Include the certifying organization

Format: Return only the certifications, one per line, without numbering or extra formatting.

Example format:
AWS Certified Solutions Architect - Associate
Google Cloud Professional Developer
Certified Scrum Master (CSM)
Microsoft Certified: Azure Developer Associate
PMP (Project Management Professional)"""

ABOUT_ME_TEMPLATE = """Generate a professional "About Me" description for {name} who is a {position}.

Requirements:
- Write a compelling professional summary (2-3 sentences)
- Highlight key strengths and career goals
- Make it relevant to the position and industry
- Keep it concise but impactful (max 200 characters)
- Focus on what makes this person unique and valuable

Format: Return only the about me description, without extra formatting.

Example format:
Passionate software engineer with 5+ years of experience developing scalable web applications. Specialized in React, Node, and cloud technologies with a proven track record of delivering high-impact projects that improve user experience and business outcomes. Committed to continuous learning and staying current with emerging technologies."""

TEMPLATES = {
    ctx.RESUME_BULLET_POINT: BULLET_POINT_TEMPLATE,
    ctx.EDUCATION_ACHIEVEMENT: EDUCATION_TEMPLATE,
    ctx.SKILLS_SUGGESTION: SKILLS_TEMPLATE,
    ctx.PROJECT_DESCRIPTION: PROJECT_DESCRIPTION_TEMPLATE,
    ctx.PROJECT_TECHNOLOGIES: PROJECT_TECHNOLOGIES_TEMPLATE,
    ctx.CERTIFICATION_SUGGESTION: CERTIFICATION_TEMPLATE,
    ctx.ABOUT_ME_DESCRIPTION: ABOUT_ME_TEMPLATE,
}


def _template_fields(request: SuggestionRequest) -> dict:
    """Interpolation values, with neutral wording for fields the request left out."""
    duration = (request.duration or "").strip()
    return {
        "position": (request.position or "").strip() or "professional",
        "company": (request.company or "").strip() or "their company",
        "duration_clause": f" from {duration}" if duration else "",
        "degree": (request.degree or "").strip(),
        "institution": (request.institution or "").strip(),
        "industry": (request.industry or "").strip() or "technology",
        "project_name": (request.project_name or "").strip(),
        "name": (request.name or "").strip() or "a professional",
    }


def build_prompt(request: SuggestionRequest) -> Prompt:
    """
    Render the instruction for `request.context`.
    Unknown contexts get the bullet-point template filled with whatever fields are present.
    """
    template = TEMPLATES.get(request.context, TEMPLATES[ctx.DEFAULT_CONTEXT])
    return Prompt(system=SYSTEM_INSTRUCTION, user=template.format_map(_template_fields(request)))
