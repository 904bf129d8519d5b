"""Tests for the reminder analyzer."""

import pytest

from models.reminder import ReminderCategory
from services.reminder_analyzer import (
    analyze_reminders,
    analyze_timing,
    describe_adherence_score,
    describe_coverage,
    get_time_of_day,
)


def test_empty_collection_is_valid():
    result = analyze_reminders([])

    assert result.adherence_score == 50
    assert result.score_description == "Room for improvement"
    assert [c.count for c in result.coverage_analysis] == [0, 0, 0, 0, 0]
    assert result.timing_analysis.morning == 0
    assert result.priority_percentages.critical == 0.0
    assert result.priority_percentages.low == 0.0
    assert result.insights == [
        "You have 0 total reminders, 0 are currently active",
        "0 reminders were AI-generated, 0 are custom",
    ]
    assert len(result.recommendations) == 5
    assert result.recommendations[0].startswith("💊")
    assert result.recommendations[-1].startswith("📈")


def test_coverage_follows_category_order(make_reminder):
    result = analyze_reminders([make_reminder(category="nutrition")])
    categories = [c.category for c in result.coverage_analysis]
    assert categories == [c.value for c in ReminderCategory]


def test_exercise_and_nutrition_reminders(make_reminder):
    reminders = [make_reminder(category="exercise")] + [
        make_reminder(category="nutrition") for _ in range(3)
    ]
    result = analyze_reminders(reminders)

    # 50 base + 4 reminders * 5 + 2 categories * 5
    assert result.adherence_score == 80
    assert result.score_description == "Excellent health tracking!"
    assert "Your primary focus area is nutrition with 3 reminders" in result.insights
    assert result.recommendations == [
        "💊 Add medication reminders to track prescriptions and supplements",
        "🏃‍♂️ Increase exercise reminders to maintain consistent physical activity",
        "📈 Add more reminders for comprehensive health management",
    ]

    nutrition = result.coverage_analysis[-1]
    assert nutrition.recommendation == "Well balanced nutrition coverage"
    assert nutrition.coverage_percent == 75


def test_focus_area_tie_goes_to_earlier_category(make_reminder):
    reminders = [
        make_reminder(category="wellness"),
        make_reminder(category="exercise"),
        make_reminder(category="wellness"),
        make_reminder(category="exercise"),
    ]
    result = analyze_reminders(reminders)
    assert "Your primary focus area is exercise with 2 reminders" in result.insights


def test_active_and_ai_generated_counts(make_reminder):
    reminders = [
        make_reminder(is_active=False, ai_generated=True),
        make_reminder(ai_generated=True),
        make_reminder(),
    ]
    result = analyze_reminders(reminders)
    assert result.insights[0] == "You have 3 total reminders, 2 are currently active"
    assert result.insights[1] == "2 reminders were AI-generated, 1 are custom"


def test_priority_mix(make_reminder):
    reminders = [make_reminder(priority="critical") for _ in range(3)]
    reminders.append(make_reminder(priority="low"))
    result = analyze_reminders(reminders)

    assert result.priority_distribution.critical == 3
    assert result.priority_percentages.critical == 75.0
    assert result.priority_percentages.low == 25.0
    assert "3 critical priority reminders require immediate attention" in result.insights
    assert "⚖️ Consider balancing priorities to avoid reminder fatigue" in result.recommendations


def test_priority_percentages_are_rounded(make_reminder):
    reminders = [
        make_reminder(priority="high"),
        make_reminder(priority="medium"),
        make_reminder(priority="low"),
    ]
    result = analyze_reminders(reminders)
    assert result.priority_percentages.high == 33.3


def test_adherence_score_is_capped(make_reminder):
    reminders = [
        make_reminder(category=category.value)
        for category in ReminderCategory
        for _ in range(2)
    ]
    result = analyze_reminders(reminders)
    assert result.adherence_score == 95
    assert result.recommendations == []


@pytest.mark.parametrize(
    "time, expected",
    [
        ("05:00", "morning"),
        ("11:59", "morning"),
        ("12:00", "afternoon"),
        ("16:30", "afternoon"),
        ("17:00", "evening"),
        ("20:59", "evening"),
        ("21:00", "night"),
        ("04:59", "night"),
        ("9am", "morning"),
        ("7:30 AM", "morning"),
        (" 18:00", "evening"),
        ("whenever", "night"),
        ("", "night"),
    ],
)
def test_time_of_day(time, expected):
    assert get_time_of_day(time) == expected


def test_timing_recommendations(make_reminder):
    assert analyze_timing([]).recommendation.startswith("Add morning reminders")

    morning_only = [make_reminder(time="07:30")]
    assert analyze_timing(morning_only).recommendation.startswith("Consider evening reminders")

    spread = [make_reminder(time="07:30"), make_reminder(time="19:00")]
    assert (
        analyze_timing(spread).recommendation
        == "Your reminders are well-distributed throughout the day"
    )


@pytest.mark.parametrize(
    "count, expected",
    [
        (0, "Consider adding exercise reminders for comprehensive health tracking"),
        (1, "Good start! Consider adding more exercise reminders"),
        (3, "Well balanced exercise coverage"),
        (4, "Excellent exercise tracking"),
    ],
)
def test_describe_coverage(count, expected):
    assert describe_coverage(ReminderCategory.EXERCISE, count) == expected


@pytest.mark.parametrize(
    "score, expected",
    [
        (95, "Excellent health tracking!"),
        (60, "Good progress, keep it up!"),
        (40, "Room for improvement"),
        (39, "Let's build better habits together"),
    ],
)
def test_describe_adherence_score(score, expected):
    assert describe_adherence_score(score) == expected


def test_analysis_serializes_with_camel_case(make_reminder):
    payload = analyze_reminders([make_reminder()]).model_dump(by_alias=True, mode="json")
    assert payload["adherenceScore"] == 60
    assert payload["coverageAnalysis"][3]["coveragePercent"] == 25
