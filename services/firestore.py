# services/firestore.py
import logging
import os
from datetime import date, datetime, timezone
from typing import AsyncGenerator, List, Optional

import firebase_admin
from firebase_admin import credentials, firestore_async
from google.cloud.firestore_v1.async_client import AsyncClient
from google.cloud.firestore_v1.base_query import FieldFilter
from pydantic import ValidationError

import config
from models.body_metrics import BodyMetricsSnapshot
from models.health_summary import HealthSummary
from models.insight import HealthRecord, Insight
from models.reminder import AnalysisResult, Reminder
from models.user import UserInDB


def initialize_firebase_app():
    if not firebase_admin._apps:
        cred_path = os.environ.get("GOOGLE_APPLICATION_CREDENTIALS") or os.path.join(
            os.path.dirname(__file__), "..", "service-account.json"
        )
        if not os.path.exists(cred_path):
            raise FileNotFoundError(f"Service account key not found at {cred_path}.")
        cred = credentials.Certificate(cred_path)
        firebase_admin.initialize_app(cred)
        logging.info("Firebase Admin SDK initialized successfully.")


class FirestoreService:
    def __init__(self, db: Optional[AsyncClient] = None):
        if db is None:
            initialize_firebase_app()
            db = firestore_async.client()
        self.db: AsyncClient = db

    def _user_collection(self, uid: str, name: str):
        return self.db.collection(config.USERS_COLLECTION).document(uid).collection(name)

    async def get_all_users(
        self, page_size: int = 1000
    ) -> AsyncGenerator[UserInDB, None]:
        users_ref = self.db.collection(config.USERS_COLLECTION)
        cursor = None
        while True:
            query = users_ref.order_by("__name__").limit(page_size)
            if cursor:
                query = query.start_after(cursor)
            docs = await query.get()
            if not docs:
                break
            for doc in docs:
                try:
                    yield UserInDB(uid=doc.id, **doc.to_dict())
                except ValidationError as e:
                    logging.warning(f"Skipping malformed user document {doc.id}: {e}")
            cursor = docs[-1]

    async def get_reminders(self, uid: str) -> List[Reminder]:
        docs = await self._user_collection(uid, config.REMINDERS_COLLECTION).get()
        reminders = []
        for doc in docs:
            try:
                reminders.append(Reminder.model_validate({"id": doc.id, **doc.to_dict()}))
            except ValidationError as e:
                logging.warning(
                    f"Skipping malformed reminder {doc.id} for user {uid}: {e}"
                )
        return reminders

    async def get_health_records(
        self, uid: str, start_date: date, end_date: date
    ) -> List[HealthRecord]:
        """Returns the user's health records in the date range, oldest first."""
        start_utc = datetime.combine(
            start_date, datetime.min.time(), tzinfo=timezone.utc
        )
        end_utc = datetime.combine(end_date, datetime.max.time(), tzinfo=timezone.utc)
        records_ref = self._user_collection(uid, config.HEALTH_DATA_COLLECTION)
        query = (
            records_ref.where(filter=FieldFilter("timestamp", ">=", start_utc))
            .where(filter=FieldFilter("timestamp", "<=", end_utc))
            .order_by("timestamp")
        )
        docs = await query.get()
        records = []
        for doc in docs:
            try:
                records.append(HealthRecord.model_validate(doc.to_dict()))
            except ValidationError as e:
                logging.warning(
                    f"Skipping malformed health record {doc.id} for user {uid}: {e}"
                )
        return records

    async def save_reminder_analysis(
        self, uid: str, analysis: AnalysisResult, day: date
    ):
        doc_ref = self._user_collection(
            uid, config.REMINDER_ANALYSIS_COLLECTION
        ).document(day.isoformat())
        await doc_ref.set(analysis.model_dump(by_alias=True, mode="json"))

    async def save_insights(self, uid: str, insights: List[Insight]):
        """Replaces the user's current insights, keyed by rank."""
        insights_ref = self._user_collection(uid, config.INSIGHTS_COLLECTION)
        batch = self.db.batch()
        for existing in await insights_ref.get():
            batch.delete(existing.reference)
        for rank, insight in enumerate(insights):
            batch.set(insights_ref.document(str(rank)), insight.model_dump(mode="json"))
        await batch.commit()
        logging.info(f"Saved {len(insights)} insights for user {uid}.")

    async def save_body_metrics(self, uid: str, snapshot: BodyMetricsSnapshot):
        doc_ref = self._user_collection(uid, config.BODY_METRICS_COLLECTION).document(
            snapshot.snapshot_date.isoformat()
        )
        await doc_ref.set(snapshot.model_dump(by_alias=True, mode="json"))

    async def save_health_summary(self, uid: str, summary: HealthSummary):
        doc_ref = self._user_collection(
            uid, config.HEALTH_SUMMARY_COLLECTION
        ).document(summary.period)
        await doc_ref.set(summary.model_dump(by_alias=True, mode="json"))
