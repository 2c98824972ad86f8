from __future__ import annotations

import logging
import math

from jobmatch.config import DEFAULT_CONFIG, DIMENSIONS, ScoringConfig
from jobmatch.models import (
    CandidateProfile,
    JobRequirement,
    MatchResult,
    SalaryRange,
    expected_salary_value,
    location_words,
)
from jobmatch.notes import build_notes

logger = logging.getLogger(__name__)

REMOTE_LOCATION = "remote"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def _as_score(value: float) -> int:
    if math.isnan(value):
        return 0
    return _round_half_up(_clamp(value))


def normalize_skill(name: str | None) -> str:
    return (name or "").strip().lower()


def _normalize_location(location: str | None) -> str:
    return " ".join((location or "").lower().split())


def partition_skills(
    candidate_skills: list[str], required_skills: list[str]
) -> tuple[list[str], list[str]]:
    """Split required skills into (matched, missing), keeping job order and casing.

    Blank entries are ignored and duplicates (by normalised form) count once.
    """
    have = {normalize_skill(name) for name in candidate_skills}
    have.discard("")
    matched: list[str] = []
    missing: list[str] = []
    seen: set[str] = set()
    for skill in required_skills:
        key = normalize_skill(skill)
        if not key or key in seen:
            continue
        seen.add(key)
        if key in have:
            matched.append(skill.strip())
        else:
            missing.append(skill.strip())
    return matched, missing


def skills_score(matched: list[str], missing: list[str]) -> int:
    total = len(matched) + len(missing)
    if total == 0:
        return 100
    return _as_score(100.0 * len(matched) / total)


def experience_score(
    years: float | None,
    minimum: float | None,
    maximum: float | None,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> int:
    if minimum is None and maximum is None:
        return 100
    if years is None:
        return 0
    years = max(years, 0.0)
    low = minimum if minimum is not None else 0.0
    high = maximum if maximum is not None else math.inf

    if years < low:
        # linear toward 0 as the shortfall approaches the full minimum
        return _as_score(100.0 * years / low)
    if years <= high:
        return 100

    excess = years - high - config.overqualified_grace_years
    if excess <= 0:
        return 100
    penalised = 100.0 - config.overqualified_penalty_per_year * excess
    return _as_score(max(config.overqualified_floor, penalised))


def _location_pair_score(candidate: str, job: str, config: ScoringConfig) -> int:
    if candidate == job:
        return 100
    candidate_words = location_words(candidate)
    job_words = location_words(job)
    # whole-word containment, so "la" does not match "atlanta"
    candidate_text = f" {' '.join(candidate_words)} "
    job_text = f" {' '.join(job_words)} "
    if candidate_text in job_text or job_text in candidate_text:
        return _as_score(config.partial_location_ceiling)
    candidate_tokens = set(candidate_words)
    job_tokens = set(job_words)
    shared = candidate_tokens & job_tokens
    if not shared:
        return 0
    overlap = len(shared) / len(candidate_tokens | job_tokens)
    span = config.partial_location_ceiling - config.partial_location_floor
    return _as_score(config.partial_location_floor + span * overlap)


def location_score(
    candidate_locations: list[str | None],
    job_location: str | None,
    remote: bool = False,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> int:
    job = _normalize_location(job_location)
    if remote or job == REMOTE_LOCATION:
        return 100
    # a location without any words (e.g. "--") is as good as absent
    known = [
        loc for loc in (_normalize_location(c) for c in candidate_locations) if location_words(loc)
    ]
    if not location_words(job) or not known:
        return _as_score(config.unknown_location_score)
    return max(_location_pair_score(loc, job, config) for loc in known)


def salary_score(
    expected: float | SalaryRange | None,
    salary_range: SalaryRange | None,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> int:
    ask = expected_salary_value(expected)
    if ask is None or salary_range is None or salary_range.max is None:
        return 100
    budget = salary_range.max
    if ask <= budget:
        return 100
    if budget <= 0:
        return 0
    overage = (ask - budget) / budget
    return _as_score(100.0 * (1.0 - config.salary_overage_penalty * overage))


def overall_score(sub_scores: dict[str, float], weights: dict[str, float]) -> int:
    weighted = sum(weights[name] * sub_scores[name] for name in DIMENSIONS)
    return _as_score(weighted)


class MatchScorer:
    """Scores one candidate profile against one job requirement.

    Stateless apart from its immutable config, so one instance can be shared
    across threads.
    """

    def __init__(self, config: ScoringConfig | None = None):
        self.config = config or DEFAULT_CONFIG

    def score(self, candidate: CandidateProfile, job: JobRequirement) -> MatchResult:
        config = self.config
        matched, missing = partition_skills(candidate.skill_names, job.required_skills)
        sub_scores = {
            "skills": skills_score(matched, missing),
            "experience": experience_score(
                candidate.experience_years, job.experience_min, job.experience_max, config
            ),
            "location": location_score(
                [candidate.location, candidate.preferred_location],
                job.location,
                job.remote,
                config,
            ),
            "salary": salary_score(candidate.expected_salary, job.salary_range, config),
        }
        overall = overall_score(sub_scores, config.weights.as_dict())
        notes = build_notes(sub_scores, matched, missing, candidate, job)

        logger.debug(
            "Scored candidate=%s job=%s overall=%d skills=%d experience=%d location=%d salary=%d",
            candidate.candidate_id,
            job.job_id,
            overall,
            sub_scores["skills"],
            sub_scores["experience"],
            sub_scores["location"],
            sub_scores["salary"],
        )
        return MatchResult(
            overall_score=overall,
            skills_match=sub_scores["skills"],
            experience_match=sub_scores["experience"],
            location_match=sub_scores["location"],
            salary_match=sub_scores["salary"],
            matched_skills=tuple(matched),
            missing_skills=tuple(missing),
            notes=notes,
            recommended=overall >= config.recommendation_threshold,
        )


def score_candidate(
    candidate: CandidateProfile,
    job: JobRequirement,
    config: ScoringConfig | None = None,
) -> MatchResult:
    return MatchScorer(config).score(candidate, job)
