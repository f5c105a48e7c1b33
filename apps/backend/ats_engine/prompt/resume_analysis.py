SCHEMA = """{
  "overallScore": number (0-100),
  "skillsScore": number (0-100),
  "experienceScore": number (0-100),
  "formatScore": number (0-100),
  "keywordsScore": number (0-100),
  "suggestions": [array of specific improvement suggestions],
  "strongPoints": [array of resume strengths],
  "missingKeywords": [array of important missing keywords],
  "matchedKeywords": [array of relevant keywords found],
  "recommendations": [array of actionable recommendations]
}"""

PROMPT = """
As an expert ATS (Applicant Tracking System) analyzer, analyze this resume against {target}.

Resume Text:
\"\"\"
{resume}
\"\"\"
{job_section}
Provide a comprehensive ATS compatibility assessment.
Return only JSON with exactly the following structure. Do not add keys. Do not return markdown.

{schema}

Focus on:
- ATS parsing compatibility
- Keyword optimization for {focus}
- Format and structure analysis
- Skills relevance and presentation
- Experience quantification and relevance
- Missing critical elements

A keyword must not appear in both missingKeywords and matchedKeywords.
Provide specific, actionable feedback that will help improve ATS compatibility.
"""

JOB_SECTION = """
Job Description:
\"\"\"
{job_description}
\"\"\"
"""


def build_prompt(resume_text: str, job_description: str | None = None) -> str:
    if job_description:
        return PROMPT.format(
            target="the provided job description",
            resume=resume_text,
            job_section=JOB_SECTION.format(job_description=job_description),
            schema=SCHEMA,
            focus="the specific role",
        )
    return PROMPT.format(
        target="general ATS best practices",
        resume=resume_text,
        job_section="",
        schema=SCHEMA,
        focus="general tech roles",
    )
