from __future__ import annotations

from typing import Sequence

import pandas as pd

from jobmatch.models import SCORE_BANDS, MatchResult
from jobmatch.recommendations import RankedMatch

RANKING_COLUMNS = [
    "candidate_id",
    "name",
    "overall_score",
    "skills_match",
    "experience_match",
    "location_match",
    "salary_match",
    "band",
    "matched_count",
    "missing_count",
]

BAND_ORDER = [label for _, label in SCORE_BANDS] + ["Poor"]


def to_application_fields(result: MatchResult) -> dict:
    """Shape a result the way an application record stores it."""
    return {
        "matchScore": result.overall_score,
        "matchedDetails": {
            "skillsMatch": result.skills_match,
            "experienceMatch": result.experience_match,
            "locationMatch": result.location_match,
            "salaryMatch": result.salary_match,
            "matchedSkills": list(result.matched_skills),
            "missingSkills": list(result.missing_skills),
            "notes": result.notes,
        },
    }


def ranking_frame(ranked: Sequence[RankedMatch]) -> pd.DataFrame:
    rows = [
        {
            "candidate_id": item.candidate.candidate_id,
            "name": item.candidate.name,
            "overall_score": item.result.overall_score,
            "skills_match": item.result.skills_match,
            "experience_match": item.result.experience_match,
            "location_match": item.result.location_match,
            "salary_match": item.result.salary_match,
            "band": item.result.band,
            "matched_count": len(item.result.matched_skills),
            "missing_count": len(item.result.missing_skills),
        }
        for item in ranked
    ]
    return pd.DataFrame(rows, columns=RANKING_COLUMNS)


def summarize_ranking(frame: pd.DataFrame) -> dict:
    bands = frame["band"].value_counts().reindex(BAND_ORDER, fill_value=0)
    if frame.empty:
        means = {column: 0.0 for column in RANKING_COLUMNS[2:7]}
    else:
        means = {column: round(float(frame[column].mean()), 1) for column in RANKING_COLUMNS[2:7]}
    return {
        "count": int(len(frame)),
        "mean_scores": means,
        "bands": {band: int(count) for band, count in bands.items()},
    }
