from __future__ import annotations

import pytest

from jobmatch.models import CandidateProfile, JobRequirement, SalaryRange, SkillEntry


def _skills(*names: str) -> list[SkillEntry]:
    return [SkillEntry(name=name) for name in names]


@pytest.fixture
def backend_job() -> JobRequirement:
    return JobRequirement(
        required_skills=["Python", "SQL", "Docker", "AWS"],
        experience_min=2,
        experience_max=5,
        location="Berlin",
        salary_range=SalaryRange(min=50000, max=80000),
        job_id="job-backend",
        title="Backend Engineer",
    )


@pytest.fixture
def ranked_pool() -> list[CandidateProfile]:
    """Candidates in deliberately shuffled order: c3, c2, c1, c4."""
    return [
        CandidateProfile(
            skills=[],
            experience_years=None,
            location="Tokyo",
            expected_salary=200000,
            candidate_id="c3",
            name="Chen Wei",
        ),
        CandidateProfile(
            skills=_skills("python", "SQL"),
            experience_years=3,
            location="Berlin",
            expected_salary=60000,
            candidate_id="c2",
            name="Bea Schulz",
        ),
        CandidateProfile(
            skills=_skills("Python", "SQL", "Docker", "AWS"),
            experience_years=3,
            location="Berlin",
            expected_salary=60000,
            candidate_id="c1",
            name="Ana Lima",
        ),
        CandidateProfile(
            skills=_skills("Python", "sql"),
            experience_years=4,
            location="berlin",
            expected_salary=70000,
            candidate_id="c4",
            name="Dev Patel",
        ),
    ]
