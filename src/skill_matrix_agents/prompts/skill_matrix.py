"""Skill matrix extraction prompt templates (v1)."""

from __future__ import annotations

SKILL_MATRIX_SYSTEM = """\
You are a strict JSON parser. You read job descriptions and answer with a single \
JSON object and nothing else.
"""

SKILL_MATRIX_SCHEMA = """\
{
  "title": string (non-empty),
  "seniority": "junior" | "mid" | "senior" | "lead" | "unknown",
  "skills": {
    "frontend": string[],
    "backend": string[],
    "devops": string[],
    "web3": string[],
    "other": string[]
  },
  "mustHave": string[],
  "niceToHave": string[],
  "salary"?: { "currency": "USD" | "EUR" | "PLN" | "GBP", "min"?: number, "max"?: number },
  "summary": string (at most 300 characters)
}
"""

SKILL_MATRIX_USER = """\
Analyze the following job description and return a JSON object that matches this schema:

{schema}
<rules>
- Skill values are lowercase technology names; never repeat a value within a list
- Omit "salary" entirely when no salary with a currency is advertised
- When both are present, "min" must not exceed "max"
</rules>

<job_description>
{document}
</job_description>

Return only valid JSON.
"""

SKILL_MATRIX_REPAIR_USER = """\
Your previous answer did not match the schema:

{schema}
<previous_answer>
{prior_output}
</previous_answer>

<violations>
{violations}
</violations>

<job_description>
{document}
</job_description>

Fix the JSON so it strictly matches the schema. Return only the corrected JSON, no extra text.
"""
