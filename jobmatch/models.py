from __future__ import annotations

import re
from dataclasses import dataclass, field

SKILL_LEVELS = ("Beginner", "Intermediate", "Advanced", "Expert")

SCORE_BANDS = (
    (80, "Excellent"),
    (60, "Good"),
    (40, "Fair"),
)

_WORD_RE = re.compile(r"[a-z0-9]+")


@dataclass(frozen=True)
class SkillEntry:
    name: str
    level: str | None = None


@dataclass(frozen=True)
class SalaryRange:
    min: float | None = None
    max: float | None = None

    @property
    def is_empty(self) -> bool:
        return self.min is None and self.max is None


def expected_salary_value(expected: float | SalaryRange | None) -> float | None:
    """A range is compared by the least the candidate would accept."""
    if isinstance(expected, SalaryRange):
        return expected.min if expected.min is not None else expected.max
    return expected


def location_words(location: str | None) -> list[str]:
    return _WORD_RE.findall((location or "").lower())


@dataclass
class CandidateProfile:
    skills: list[SkillEntry] = field(default_factory=list)
    experience_years: float | None = None
    location: str | None = None
    preferred_location: str | None = None
    expected_salary: float | SalaryRange | None = None
    candidate_id: str | None = None
    name: str | None = None

    @property
    def skill_names(self) -> list[str]:
        return [skill.name for skill in self.skills]


@dataclass
class JobRequirement:
    required_skills: list[str] = field(default_factory=list)
    experience_min: float | None = None
    experience_max: float | None = None
    location: str | None = None
    remote: bool = False
    salary_range: SalaryRange | None = None
    job_id: str | None = None
    title: str | None = None


def score_band(score: float) -> str:
    for threshold, label in SCORE_BANDS:
        if score >= threshold:
            return label
    return "Poor"


@dataclass(frozen=True)
class MatchResult:
    overall_score: int
    skills_match: int
    experience_match: int
    location_match: int
    salary_match: int
    matched_skills: tuple[str, ...] = ()
    missing_skills: tuple[str, ...] = ()
    notes: str = ""
    # set by the scorer against its configured recommendation threshold
    recommended: bool = False

    @property
    def band(self) -> str:
        return score_band(self.overall_score)

    @property
    def dimension_scores(self) -> dict[str, int]:
        return {
            "skills": self.skills_match,
            "experience": self.experience_match,
            "location": self.location_match,
            "salary": self.salary_match,
        }
