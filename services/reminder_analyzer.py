import logging
import re
from collections import Counter
from typing import Dict, Iterable, List

import config
from models.reminder import (
    AnalysisResult,
    CategoryCoverage,
    PriorityDistribution,
    PriorityPercentages,
    Reminder,
    ReminderCategory,
    ReminderPriority,
    TimingAnalysis,
)
from utils.numbers import round_to

_LEADING_HOUR = re.compile(r"\s*(\d+)")


def describe_coverage(category: ReminderCategory, count: int) -> str:
    name = category.value
    if count == 0:
        return f"Consider adding {name} reminders for comprehensive health tracking"
    if count == 1:
        return f"Good start! Consider adding more {name} reminders"
    if count <= 3:
        return f"Well balanced {name} coverage"
    return f"Excellent {name} tracking"


def describe_adherence_score(score: int) -> str:
    if score >= 80:
        return "Excellent health tracking!"
    if score >= 60:
        return "Good progress, keep it up!"
    if score >= 40:
        return "Room for improvement"
    return "Let's build better habits together"


def get_time_of_day(time: str) -> str:
    """
    Buckets a time into morning, afternoon, evening or night. Only the leading
    digits are read as the hour, so '07:30', '9am' and '7:30 AM' all work.
    """
    match = _LEADING_HOUR.match(time) if isinstance(time, str) else None
    if match is None:
        logging.warning(f"Unparseable time of day '{time}', counting it as night.")
        return "night"
    hour = int(match.group(1))
    if config.MORNING_HOURS[0] <= hour < config.MORNING_HOURS[1]:
        return "morning"
    if config.AFTERNOON_HOURS[0] <= hour < config.AFTERNOON_HOURS[1]:
        return "afternoon"
    if config.EVENING_HOURS[0] <= hour < config.EVENING_HOURS[1]:
        return "evening"
    return "night"


def analyze_timing(reminders: List[Reminder]) -> TimingAnalysis:
    buckets = Counter(get_time_of_day(r.time) for r in reminders)
    if buckets["morning"] == 0:
        recommendation = "Add morning reminders to start your day with healthy habits"
    elif buckets["evening"] == 0:
        recommendation = "Consider evening reminders for end-of-day wellness routines"
    else:
        recommendation = "Your reminders are well-distributed throughout the day"
    return TimingAnalysis(
        morning=buckets["morning"],
        afternoon=buckets["afternoon"],
        evening=buckets["evening"],
        night=buckets["night"],
        recommendation=recommendation,
    )


def _priority_percentages(
    distribution: PriorityDistribution, total: int
) -> PriorityPercentages:
    if total == 0:
        return PriorityPercentages()
    return PriorityPercentages(
        **{
            priority: round_to(count / total * 100, 1)
            for priority, count in distribution.model_dump().items()
        }
    )


def _adherence_score(total: int, category_counts: Dict[ReminderCategory, int]) -> int:
    """Engagement proxy from reminder volume and category diversity."""
    score = config.ADHERENCE_BASE_SCORE
    score += min(
        total * config.ADHERENCE_POINTS_PER_REMINDER,
        config.ADHERENCE_MAX_VOLUME_POINTS,
    )
    covered = sum(1 for count in category_counts.values() if count > 0)
    score += covered * config.ADHERENCE_POINTS_PER_CATEGORY
    return min(score, config.ADHERENCE_MAX_SCORE)


def analyze_reminders(reminders: Iterable[Reminder]) -> AnalysisResult:
    """
    Summarizes a user's reminders: coverage per category, time-of-day spread,
    priority mix, an adherence score and plain-language advice.
    An empty collection is valid and yields zero counts.
    """
    reminders = list(reminders)
    total = len(reminders)

    category_counts = {category: 0 for category in ReminderCategory}
    for reminder in reminders:
        category_counts[reminder.category] += 1

    coverage_analysis = [
        CategoryCoverage(
            category=category,
            count=count,
            recommendation=describe_coverage(category, count),
            coverage_percent=min(count * config.COVERAGE_PERCENT_PER_REMINDER, 100),
        )
        for category, count in category_counts.items()
    ]

    timing = analyze_timing(reminders)

    priority_counts = Counter(r.priority for r in reminders)
    distribution = PriorityDistribution(
        **{priority.value: priority_counts[priority] for priority in ReminderPriority}
    )

    active = sum(1 for r in reminders if r.is_active)
    ai_generated = sum(1 for r in reminders if r.ai_generated)
    insights = [
        f"You have {total} total reminders, {active} are currently active",
        f"{ai_generated} reminders were AI-generated, {total - ai_generated} are custom",
    ]
    if distribution.critical > 0:
        insights.append(
            f"{distribution.critical} critical priority reminders require immediate attention"
        )
    # max() keeps the first of equal counts, i.e. the earlier category.
    top_category = max(category_counts, key=category_counts.get)
    if category_counts[top_category] > 0:
        insights.append(
            f"Your primary focus area is {top_category.value} "
            f"with {category_counts[top_category]} reminders"
        )

    recommendations = []
    if category_counts[ReminderCategory.MEDICATION] == 0:
        recommendations.append(
            "💊 Add medication reminders to track prescriptions and supplements"
        )
    if category_counts[ReminderCategory.EXERCISE] < config.MIN_EXERCISE_REMINDERS:
        recommendations.append(
            "🏃‍♂️ Increase exercise reminders to maintain consistent physical activity"
        )
    if category_counts[ReminderCategory.NUTRITION] < config.MIN_NUTRITION_REMINDERS:
        recommendations.append(
            "🥗 Add nutrition reminders for meal planning and hydration tracking"
        )
    if timing.morning < config.MIN_MORNING_REMINDERS:
        recommendations.append(
            "🌅 Morning reminders help establish positive daily routines"
        )
    if distribution.high + distribution.critical > total * config.HIGH_PRIORITY_SHARE_LIMIT:
        recommendations.append(
            "⚖️ Consider balancing priorities to avoid reminder fatigue"
        )
    if total < config.MIN_TOTAL_REMINDERS:
        recommendations.append(
            "📈 Add more reminders for comprehensive health management"
        )

    adherence_score = _adherence_score(total, category_counts)
    return AnalysisResult(
        adherence_score=adherence_score,
        score_description=describe_adherence_score(adherence_score),
        coverage_analysis=coverage_analysis,
        timing_analysis=timing,
        priority_distribution=distribution,
        priority_percentages=_priority_percentages(distribution, total),
        insights=insights,
        recommendations=recommendations,
    )
