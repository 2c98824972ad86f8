from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from jobmatch.models import CandidateProfile, JobRequirement, MatchResult
from jobmatch.scoring import MatchScorer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankedMatch:
    candidate: CandidateProfile
    result: MatchResult


def _stable_descending(scores: np.ndarray) -> np.ndarray:
    # negate so ties keep input order under a stable sort
    return np.argsort(-scores, kind="stable")


def rank_candidates(
    job: JobRequirement,
    candidates: Sequence[CandidateProfile],
    top_n: int | None = None,
    scorer: MatchScorer | None = None,
) -> list[RankedMatch]:
    scorer = scorer or MatchScorer()
    if top_n is None or top_n <= 0:
        top_n = scorer.config.default_top_n

    results = [scorer.score(candidate, job) for candidate in candidates]
    if not results:
        logger.info("Ranked 0 candidates for job %s", job.job_id)
        return []

    overall = np.array([result.overall_score for result in results], dtype=float)
    order = _stable_descending(overall)[:top_n]
    ranked = [RankedMatch(candidate=candidates[i], result=results[i]) for i in order]
    logger.info(
        "Ranked %d candidates for job %s, returning top %d (best=%d)",
        len(results),
        job.job_id,
        len(ranked),
        ranked[0].result.overall_score,
    )
    return ranked


def recommend_jobs(
    candidate: CandidateProfile,
    jobs: Sequence[JobRequirement],
    threshold: float | None = None,
    scorer: MatchScorer | None = None,
) -> list[tuple[JobRequirement, MatchResult]]:
    scorer = scorer or MatchScorer()
    if threshold is None:
        threshold = scorer.config.recommendation_threshold

    results = [scorer.score(candidate, job) for job in jobs]
    if not results:
        return []
    overall = np.array([result.overall_score for result in results], dtype=float)
    recommended = [
        (jobs[i], results[i]) for i in _stable_descending(overall) if overall[i] >= threshold
    ]
    logger.info(
        "Recommended %d of %d jobs to candidate %s (threshold=%g)",
        len(recommended),
        len(jobs),
        candidate.candidate_id,
        threshold,
    )
    return recommended


def score_matrix(
    candidates: Sequence[CandidateProfile],
    jobs: Sequence[JobRequirement],
    scorer: MatchScorer | None = None,
) -> np.ndarray:
    scorer = scorer or MatchScorer()
    matrix = np.zeros((len(candidates), len(jobs)), dtype=int)
    for i, candidate in enumerate(candidates):
        for j, job in enumerate(jobs):
            matrix[i, j] = scorer.score(candidate, job).overall_score
    return matrix
