from datetime import datetime, timedelta, timezone
from typing import Callable

SAMPLE_RESUME = (
    "Experienced software engineer with 5 years experience in React, AWS, SQL, javascript, python"
)

SAMPLE_JOB_DESCRIPTION = """
We are looking for a Senior Software Engineer with:
- 3+ years Python experience
- React/TypeScript frontend skills
- AWS cloud experience
"""

AI_PAYLOAD = {
    "overallScore": 82,
    "skillsScore": 78,
    "experienceScore": 88,
    "formatScore": 90,
    "keywordsScore": 74,
    "suggestions": ["Add TypeScript to the skills section", "Quantify the AWS migration"],
    "strongPoints": ["Five years of relevant experience"],
    "missingKeywords": ["typescript", "kubernetes"],
    "matchedKeywords": ["python", "react", "aws"],
    "recommendations": ["Lead with a summary tailored to the role"],
}


def make_clock(start: datetime | None = None, step: timedelta = timedelta(minutes=1)) -> Callable[[], datetime]:
    """A clock that moves forward by `step` every time it is read."""
    current = [start or datetime(2026, 1, 1, tzinfo=timezone.utc)]

    def clock() -> datetime:
        value = current[0]
        current[0] = value + step
        return value

    return clock
