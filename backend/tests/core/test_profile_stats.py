"""Tests for profile_stats — dashboard summary and completeness percentage."""

from slate.core.profile_stats import build_dashboard_stats, compute_profile_completeness


def test_empty_profile_is_zero_percent_complete():
    assert compute_profile_completeness({}) == 0


def test_full_profile_is_one_hundred_percent_complete():
    profile = {
        "wgpa": 4.2, "uwgpa": 3.9, "sat_score": 1500,
        "graduation_year": 2027, "school_id": "s", "major_interest": ["cs"],
    }
    assert compute_profile_completeness(profile) == 100


def test_completeness_rounds_to_whole_percent():
    # 1/6 = 16.67 → 17, 2/6 = 33.33 → 33, 3/6 = 50
    assert compute_profile_completeness({"wgpa": 4.0}) == 17
    assert compute_profile_completeness({"wgpa": 4.0, "uwgpa": 3.5}) == 33
    assert compute_profile_completeness({"wgpa": 4.0, "uwgpa": 3.5, "sat_score": 1400}) == 50


def test_fields_outside_the_completeness_set_are_ignored():
    assert compute_profile_completeness({"act_score": 35, "class_rank": 1}) == 0


def test_dashboard_stats_shape():
    stats = build_dashboard_stats(
        {"wgpa": 4.1, "uwgpa": 3.8, "sat_score": 1450, "sat_math": 780, "act_score": None},
        courses_count=5,
        extracurriculars_count=2,
    )
    assert stats == {
        "gpa": {"weighted": 4.1, "unweighted": 3.8},
        "test_scores": {"sat": 1450, "sat_reading": None, "sat_math": 780, "act": None},
        "courses_count": 5,
        "extracurriculars_count": 2,
        "profile_completeness": 50,
    }
