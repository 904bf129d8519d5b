# main.py
import logging
import asyncio
from datetime import date, datetime, timedelta, timezone
from typing import Optional

import config
from services.firestore import FirestoreService
from services.body_metrics import (
    calculate_bmi,
    calculate_energy_expenditure,
    calculate_hydration,
)
from services.reminder_analyzer import analyze_reminders
from services.insight_engine import generate_insights, metrics_from_health_records
from services.health_summary import summarize_health_data
from models.body_metrics import BodyMetricsSnapshot
from models.profile import BodyMetrics
from models.user import UserInDB

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)


def build_body_metrics_snapshot(
    user: UserInDB, day: Optional[date] = None
) -> Optional[BodyMetricsSnapshot]:
    """
    Derives BMI, energy expenditure and hydration from the stored profile.
    Each value is left out when the profile lacks what it needs; None means
    nothing could be computed.
    """
    profile = user.health_profile
    if profile is None:
        return None

    energy = None
    if all([profile.sex, profile.age, profile.height_cm, profile.weight_kg]):
        energy = calculate_energy_expenditure(
            BodyMetrics(
                weight_kg=profile.weight_kg,
                height_cm=profile.height_cm,
                age_years=profile.age,
                sex=profile.sex,
                activity_level=profile.activity_level,
            )
        )
    else:
        logging.info(f"User {user.uid} has no complete profile. Skipping TDEE.")

    snapshot = BodyMetricsSnapshot(
        snapshot_date=day or date.today(),
        bmi=calculate_bmi(profile.weight_kg, profile.height_cm),
        energy=energy,
        hydration=calculate_hydration(profile.weight_kg),
    )
    if snapshot.bmi is None and snapshot.energy is None and snapshot.hydration is None:
        return None
    return snapshot


async def process_user(fs: FirestoreService, user: UserInDB):
    logging.info(f"--- Processing user: {user.uid} ({user.email}) ---")
    today = date.today()

    snapshot = build_body_metrics_snapshot(user, today)
    if snapshot:
        await fs.save_body_metrics(user.uid, snapshot)
    else:
        logging.warning(f"User {user.uid} is missing body measurements. Skipping.")

    reminders = await fs.get_reminders(user.uid)
    analysis = analyze_reminders(reminders)
    logging.info(
        f"Analyzed {len(reminders)} reminder(s) for user {user.uid}: "
        f"adherence score {analysis.adherence_score}."
    )
    await fs.save_reminder_analysis(user.uid, analysis, today)

    records = await fs.get_health_records(
        user.uid, today - timedelta(days=config.INSIGHT_LOOKBACK_DAYS), today
    )
    if records:
        insights = generate_insights(metrics_from_health_records(records))
        await fs.save_insights(user.uid, insights)

        summary = summarize_health_data(
            records,
            period=config.DEFAULT_SUMMARY_PERIOD,
            now=datetime.now(timezone.utc),
        )
        await fs.save_health_summary(user.uid, summary)
    else:
        logging.info(f"User {user.uid} has no recent health data. Skipping insights.")


async def run_daily_job():
    logging.info("Starting health insights daily job.")
    firestore_service = FirestoreService()
    user_count = 0
    async for user in firestore_service.get_all_users():
        user_count += 1
        try:
            await process_user(firestore_service, user)
        except Exception as e:
            logging.error(
                f"An unexpected error occurred while processing user {user.uid}: {e}",
                exc_info=True,
            )
    logging.info(f"Processed a total of {user_count} user(s).")
    logging.info("Health insights daily job finished.")


if __name__ == "__main__":
    asyncio.run(run_daily_job())
