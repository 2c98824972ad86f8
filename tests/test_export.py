from __future__ import annotations

import json

from jobmatch.export import RANKING_COLUMNS, ranking_frame, summarize_ranking, to_application_fields
from jobmatch.recommendations import rank_candidates
from jobmatch.scoring import score_candidate


def test_application_fields_are_json_ready(backend_job, ranked_pool):
    result = score_candidate(ranked_pool[1], backend_job)
    payload = to_application_fields(result)
    assert payload["matchScore"] == 80
    details = payload["matchedDetails"]
    assert details["skillsMatch"] == 50
    assert details["matchedSkills"] == ["Python", "SQL"]
    assert details["missingSkills"] == ["Docker", "AWS"]
    assert details["notes"].startswith("Missing 2 of 4")
    json.dumps(payload)


def test_ranking_frame_columns(backend_job, ranked_pool):
    frame = ranking_frame(rank_candidates(backend_job, ranked_pool))
    assert list(frame.columns) == RANKING_COLUMNS
    assert frame["candidate_id"].tolist() == ["c1", "c2", "c4", "c3"]
    assert frame.loc[0, "band"] == "Excellent"
    assert frame.loc[3, "missing_count"] == 4


def test_summary_counts_every_band(backend_job, ranked_pool):
    summary = summarize_ranking(ranking_frame(rank_candidates(backend_job, ranked_pool)))
    assert summary["count"] == 4
    assert summary["mean_scores"]["overall_score"] == 65.0
    assert summary["bands"] == {"Excellent": 3, "Good": 0, "Fair": 0, "Poor": 1}


def test_summary_of_empty_ranking():
    summary = summarize_ranking(ranking_frame([]))
    assert summary["count"] == 0
    assert summary["bands"] == {"Excellent": 0, "Good": 0, "Fair": 0, "Poor": 0}
