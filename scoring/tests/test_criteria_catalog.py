"""
Tests for the criteria description catalog and display labels.
"""

import pytest

from scoring.logic.constants import UniversityType
from scoring.logic.criteria_catalog import (
    column_for_criterion,
    criteria_description,
    criteria_descriptions,
    criteria_label,
    criterion_from_column,
    criterion_name,
    university_type_display,
)
from scoring.logic.errors import InvalidArgument


@pytest.mark.parametrize("university_type", list(UniversityType))
def test_every_traditional_criterion_has_six_descriptions(university_type):
    descriptions = criteria_descriptions(university_type)
    for key in ("academics", "extracurriculars", "athletics", "personalQualities", "recommendations", "interview"):
        assert sorted(descriptions[key]) == [1, 2, 3, 4, 5, 6]
        assert all(descriptions[key].values())


def test_description_lookup():
    assert criteria_description("athletics", 6, "ivyLeague") == "No athletic participation."
    assert criteria_description("athletics_score", 6, "top30") == "No athletic experience."
    assert criteria_description("personalQualities", 3, UniversityType.TOP_30).startswith("Good teamwork ability")
    assert criteria_description("interview", 2, "ucSystem") == "Not applicable for UC System"


def test_core_factors_have_no_narrative():
    assert criteria_description("academic_excellence", 1, "ivyLeague") == ""
    assert criteria_description("uniqueNarrative", 4, "ucSystem") == ""


def test_catalog_is_read_only():
    descriptions = criteria_descriptions("ivyLeague")
    with pytest.raises(TypeError):
        descriptions["academics"] = {}
    with pytest.raises(TypeError):
        descriptions["academics"][1] = "changed"


def test_unknown_university_type_has_no_fallback_catalog():
    with pytest.raises(InvalidArgument):
        criteria_descriptions("liberalArts")


def test_uc_labels_override_defaults():
    assert criteria_label("athletics", "ucSystem") == "Personal Talents"
    assert criteria_label("recommendations_score", "ucSystem") == "Personal Insight Questions (PIQs)"
    assert criteria_label("interview", "ucSystem") == "Not Applicable for UC System"
    assert criteria_label("athletics", "ivyLeague") == "Athletics"
    assert criteria_label("personal_qualities") == "Personal Qualities"
    assert criteria_label("total_score", "top30") == "Total Score"


def test_university_type_display():
    assert university_type_display("ivyLeague") == "Ivy League Universities"
    assert university_type_display(UniversityType.TOP_30) == "Top 20-30 Universities"
    assert university_type_display("ucSystem") == "UC System Universities"
    assert university_type_display(None) == "General US University"


def test_column_mapping():
    assert criterion_from_column("personal_qualities_score") == "personal_qualities"
    assert criterion_from_column("unique_narrative_score") == "unique_narrative"
    assert column_for_criterion("impactLeadership") == "impact_leadership_score"
    assert column_for_criterion("total") == "total_score"
    assert column_for_criterion("total_score") == "total_score"
    assert criterion_name("academicExcellence") == "academic_excellence"
    with pytest.raises(InvalidArgument):
        criterion_from_column("gpa_score")
    with pytest.raises(InvalidArgument):
        criterion_name("charisma")
