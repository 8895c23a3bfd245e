"""Profile Stats — pure computation of the academics dashboard summary.

Invariants:
    - Inputs are plain values (profile dict + counts), no IO, no DB
    - profile_completeness is an integer percentage in [0, 100]
    - Missing keys count as incomplete, never raise
"""

COMPLETENESS_FIELDS = (
    "wgpa", "uwgpa", "sat_score", "graduation_year", "school_id", "major_interest",
)


def compute_profile_completeness(profile: dict) -> int:
    completed = sum(
        1 for name in COMPLETENESS_FIELDS if profile.get(name) is not None
    )
    # half-up rounding on whole percents
    return int(completed * 100 / len(COMPLETENESS_FIELDS) + 0.5)


def build_dashboard_stats(
    profile: dict, courses_count: int, extracurriculars_count: int,
) -> dict:
    """Assemble the dashboard summary returned by GET /api/academics/stats."""
    return {
        "gpa": {
            "weighted": profile.get("wgpa"),
            "unweighted": profile.get("uwgpa"),
        },
        "test_scores": {
            "sat": profile.get("sat_score"),
            "sat_reading": profile.get("sat_reading"),
            "sat_math": profile.get("sat_math"),
            "act": profile.get("act_score"),
        },
        "courses_count": courses_count,
        "extracurriculars_count": extracurriculars_count,
        "profile_completeness": compute_profile_completeness(profile),
    }
