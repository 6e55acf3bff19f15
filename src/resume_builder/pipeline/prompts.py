"""Prompt text for resume content generation."""

from __future__ import annotations

from resume_builder.models.resume import ResumeData

NOT_PROVIDED = "Not provided"

PROFILE_INSTRUCTIONS: dict[str, str] = {
    "first-job": """\
- Focus on education, academic projects and transferable skills
- Highlight courses, certifications and extracurricular activities
- Emphasize enthusiasm, willingness to learn and soft skills
- Action verbs: Completed, Organized, Volunteered, Researched, Built""",
    "junior": """\
- Highlight 1-3 years of professional experience
- Focus on specific technologies and concrete projects
- Show fast growth and learning
- Action verbs: Developed, Implemented, Supported, Delivered, Automated""",
    "mid-level": """\
- Emphasize 3-7 years of solid experience
- Highlight complex projects and technical ownership
- Quantify results and business impact
- Action verbs: Led, Designed, Optimized, Delivered, Streamlined""",
    "senior": """\
- Focus on 7+ years of experience and deep expertise
- Highlight system architecture and strategic technical decisions
- Emphasize technical leadership and mentoring
- Action verbs: Architected, Spearheaded, Mentored, Scaled, Standardized""",
    "executive": """\
- Highlight executive leadership and strategic management
- Focus on organizational transformation and business results
- Emphasize P&L ownership, budgets and revenue growth
- Action verbs: Directed, Transformed, Grew, Restructured, Negotiated""",
    "freelancer": """\
- Highlight the diversity of projects and clients
- Emphasize autonomy, project management and delivered results
- Show specializations and niches of expertise
- Action verbs: Delivered, Consulted, Managed, Launched, Advised""",
    "career-transition": """\
- Connect previous experience to the new area strategically
- Highlight transferable skills and recent learning
- Emphasize motivation and preparation for the transition
- Action verbs: Adapted, Applied, Completed, Translated, Bridged""",
    "career-return": """\
- Address the career gap positively, focusing on recent updates
- Highlight relevant previous experience
- Emphasize recent courses, personal projects or volunteer work
- Action verbs: Refreshed, Completed, Contributed, Led, Rebuilt""",
}

SYSTEM_PROMPT = """\
You are a professional resume-writing assistant and recruiter. You write \
clear, objective, high-impact resume content.

Respond with valid JSON only, no markdown and no commentary, using exactly \
this schema:
{
  "summary": "3-4 sentence professional summary",
  "experiences": [
    {"bullets": ["achievement 1", "achievement 2", "achievement 3"]}
  ]
}

The "experiences" array must have one entry per experience in the input, in \
the same order."""

BULLET_RULES = """\
1. Write a 3-4 sentence professional summary highlighting the main qualifications.
2. For each experience, in the given order, write 3-5 bullets that:
   - start with a past-tense action verb
   - include a quantified metric (%, numbers, time saved) where plausible
   - are 1-2 lines long
   - have no leading bullet glyph ("•", "-", "*")
3. Use only facts present in the candidate data. Do not invent employers, \
titles or dates."""


def build_user_prompt(profile: str, resume: ResumeData) -> str:
    """Serialize profile instructions and resume data into the user prompt."""
    info = resume.personal_info
    instructions = PROFILE_INSTRUCTIONS.get(profile, PROFILE_INSTRUCTIONS["junior"])

    lines = [
        "Improve the resume content for the following candidate.",
        "",
        f"PROFILE: {profile}",
        "PROFILE INSTRUCTIONS:",
        instructions,
        "",
        "CANDIDATE DATA:",
        f"- Name: {_value(info.full_name)}",
        f"- Email: {_value(info.email)}",
        f"- Phone: {_value(info.phone)}",
        f"- Location: {_value(info.location)}",
        f"- LinkedIn: {_value(info.linked_in)}",
        f"- Portfolio: {_value(info.portfolio)}",
        f"- GitHub: {_value(info.github)}",
        "",
        f"CURRENT SUMMARY: {_value(resume.summary)}",
        "",
        "EXPERIENCES:",
    ]

    if resume.experiences:
        for i, exp in enumerate(resume.experiences, start=1):
            end = "Present" if exp.current else _value(exp.end_date)
            lines.append(f"{i}. {_value(exp.position)} at {_value(exp.company)}")
            lines.append(f"   Period: {_value(exp.start_date)} - {end}")
            lines.append(f"   Location: {_value(exp.location)}")
            lines.append(f"   Description: {_value(exp.description)}")
    else:
        lines.append(NOT_PROVIDED)

    lines += ["", "EDUCATION:"]
    if resume.education:
        for i, edu in enumerate(resume.education, start=1):
            end = "In progress" if edu.current else _value(edu.end_date)
            lines.append(
                f"{i}. {_value(edu.degree)} in {_value(edu.field)} - {_value(edu.institution)}"
            )
            lines.append(f"   Period: {_value(edu.start_date)} - {end}")
            if edu.description:
                lines.append(f"   {edu.description}")
    else:
        lines.append(NOT_PROVIDED)

    languages = ", ".join(f"{lang.language} ({lang.level})" for lang in resume.languages)
    certifications = ", ".join(
        f"{cert.name} - {_value(cert.issuer)} ({_value(cert.date)})"
        for cert in resume.certifications
    )
    lines += [
        "",
        f"SKILLS: {_value(', '.join(resume.skills))}",
        f"LANGUAGES: {_value(languages)}",
        f"CERTIFICATIONS: {_value(certifications)}",
        "",
        "TASK:",
        BULLET_RULES,
        "",
        f'Return JSON only. The "experiences" array must contain exactly '
        f"{len(resume.experiences)} entries.",
    ]
    return "\n".join(lines)


def _value(value: str | None) -> str:
    if value is None or not str(value).strip():
        return NOT_PROVIDED
    return str(value).strip()
