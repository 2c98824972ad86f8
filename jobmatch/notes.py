from __future__ import annotations

from jobmatch.models import (
    CandidateProfile,
    JobRequirement,
    expected_salary_value,
    location_words,
)

STRONG_MATCH_THRESHOLD = 80

# Tie order when two dimensions share the lowest score.
NOTE_PRIORITY = ("skills", "experience", "location", "salary")


def _years(value: float) -> str:
    count = f"{value:g}"
    return f"{count} year" if value == 1 else f"{count} years"


def _money(value: float) -> str:
    return f"{value:,.0f}"


def _skills_note(matched: list[str], missing: list[str]) -> str:
    total = len(matched) + len(missing)
    shown = ", ".join(missing[:5])
    if len(missing) > 5:
        shown += f" and {len(missing) - 5} more"
    return f"Missing {len(missing)} of {total} required skills: {shown}."


def _experience_note(candidate: CandidateProfile, job: JobRequirement) -> str:
    years = candidate.experience_years
    if years is None:
        return "Experience not provided; the experience requirement could not be verified."
    if job.experience_min is not None and years < job.experience_min:
        shortfall = job.experience_min - max(years, 0.0)
        return f"{_years(shortfall)} short of the {job.experience_min:g}-year minimum."
    if job.experience_max is not None and years > job.experience_max:
        excess = years - job.experience_max
        return f"Exceeds the {job.experience_max:g}-year maximum by {_years(excess)}."
    return "Experience is within the required range."


def _location_note(score: int, candidate: CandidateProfile, job: JobRequirement) -> str:
    candidate_known = any(
        location_words(loc) for loc in (candidate.location, candidate.preferred_location)
    )
    if not candidate_known or not location_words(job.location):
        return "Location could not be compared."
    if score > 0:
        return f"Only a partial location match with {job.location.strip()}."
    return f"Location does not match the job location ({job.location.strip()})."


def _salary_note(candidate: CandidateProfile, job: JobRequirement) -> str:
    expected = expected_salary_value(candidate.expected_salary)
    budget = job.salary_range.max if job.salary_range else None
    if expected is None or budget is None:
        return "Salary expectations could not be compared."
    overage = expected - budget
    return (
        f"Expected salary {_money(expected)} exceeds the {_money(budget)} budget "
        f"by {_money(overage)}."
    )


def build_notes(
    sub_scores: dict[str, int],
    matched: list[str],
    missing: list[str],
    candidate: CandidateProfile,
    job: JobRequirement,
) -> str:
    weakest = min(NOTE_PRIORITY, key=lambda name: (sub_scores[name], NOTE_PRIORITY.index(name)))
    if sub_scores[weakest] >= STRONG_MATCH_THRESHOLD:
        return "Strong match on skills, experience, location and salary."
    if weakest == "skills":
        return _skills_note(matched, missing)
    if weakest == "experience":
        return _experience_note(candidate, job)
    if weakest == "location":
        return _location_note(sub_scores["location"], candidate, job)
    return _salary_note(candidate, job)
