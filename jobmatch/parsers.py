from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Mapping

from jobmatch.models import SKILL_LEVELS, CandidateProfile, JobRequirement, SalaryRange, SkillEntry

logger = logging.getLogger(__name__)

_LEVELS_BY_KEY = {level.lower(): level for level in SKILL_LEVELS}


def _non_negative(value: Any, field_name: str) -> float | None:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        logger.warning("Ignoring boolean value for %s", field_name)
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning("Ignoring non-numeric value for %s: %r", field_name, value)
        return None
    if not math.isfinite(number) or number < 0:
        logger.warning("Ignoring out-of-range value for %s: %r", field_name, value)
        return None
    return number


def _text(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _identifier(record: Mapping) -> str | None:
    value = record.get("_id", record.get("id"))
    return None if value is None else str(value)


def _salary_range(value: Any, field_name: str) -> SalaryRange | None:
    if not isinstance(value, Mapping):
        if value is not None:
            logger.warning("Ignoring malformed %s: %r", field_name, value)
        return None
    salary = SalaryRange(
        min=_non_negative(value.get("min"), f"{field_name}.min"),
        max=_non_negative(value.get("max"), f"{field_name}.max"),
    )
    return None if salary.is_empty else salary


def _skill_level(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    level = _LEVELS_BY_KEY.get(value.strip().lower())
    if level is None:
        logger.warning("Dropping unknown skill level: %r", value)
    return level


def parse_skills(value: Any) -> list[SkillEntry]:
    """Accept skills as plain strings or ``{"name": ..., "level": ...}`` mappings."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        logger.warning("Ignoring malformed skills field: %r", value)
        return []
    skills: list[SkillEntry] = []
    for item in value:
        if isinstance(item, str):
            name, level = item, None
        elif isinstance(item, Mapping):
            name, level = item.get("name"), _skill_level(item.get("level"))
        else:
            logger.warning("Skipping malformed skill entry: %r", item)
            continue
        name = _text(name)
        if name is None:
            continue
        skills.append(SkillEntry(name=name, level=level))
    return skills


def _location(value: Any) -> str | None:
    if isinstance(value, Mapping):
        parts = [_text(value.get(key)) for key in ("city", "state", "country")]
        joined = ", ".join(part for part in parts if part)
        return joined or None
    return _text(value)


def _full_name(record: Mapping) -> str | None:
    full = _text(record.get("fullName")) or _text(record.get("name"))
    if full:
        return full
    parts = [_text(record.get("firstName")), _text(record.get("lastName"))]
    return " ".join(part for part in parts if part) or None


def candidate_from_record(record: Mapping) -> CandidateProfile:
    expected = record.get("expectedSalary")
    if isinstance(expected, Mapping):
        expected_salary = _salary_range(expected, "expectedSalary")
    else:
        expected_salary = _non_negative(expected, "expectedSalary")

    return CandidateProfile(
        skills=parse_skills(record.get("skills")),
        experience_years=_non_negative(record.get("experienceYears"), "experienceYears"),
        location=_location(record.get("currentLocation")) or _location(record.get("location")),
        preferred_location=_location(record.get("preferredLocation")),
        expected_salary=expected_salary,
        candidate_id=_identifier(record),
        name=_full_name(record),
    )


def _required_skills(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        if value is not None:
            logger.warning("Ignoring malformed requiredSkills field: %r", value)
        return []
    required: list[str] = []
    for item in value:
        if isinstance(item, str):
            required.append(item)
        elif isinstance(item, (int, float)) and not isinstance(item, bool):
            logger.warning("Coercing numeric required skill to text: %r", item)
            required.append(str(item))
        else:
            logger.warning("Skipping malformed required skill: %r", item)
    return required


def job_from_record(record: Mapping) -> JobRequirement:
    return JobRequirement(
        required_skills=_required_skills(record.get("requiredSkills")),
        experience_min=_non_negative(record.get("experienceMin"), "experienceMin"),
        experience_max=_non_negative(record.get("experienceMax"), "experienceMax"),
        location=_text(record.get("location")),
        remote=record.get("remote") is True,
        salary_range=_salary_range(record.get("salaryRange"), "salaryRange"),
        job_id=_identifier(record),
        title=_text(record.get("title")),
    )


def load_records(path: str | Path) -> list[dict]:
    with Path(path).open("r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"Expected a JSON list of records in {path}")
    return [item for item in raw if isinstance(item, dict)]
