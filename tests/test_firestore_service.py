"""Tests for the Firestore adapter against a mocked async client."""

from datetime import date, datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from models.body_metrics import BMIResult, BodyMetricsSnapshot
from models.insight import Insight
from services.firestore import FirestoreService
from services.health_summary import summarize_health_data
from services.reminder_analyzer import analyze_reminders


def _doc(doc_id, data):
    doc = MagicMock()
    doc.id = doc_id
    doc.to_dict.return_value = data
    return doc


@pytest.mark.asyncio
async def test_get_all_users_skips_malformed_documents(mock_firestore_db):
    first_page = mock_firestore_db.collection.return_value.order_by.return_value.limit.return_value
    first_page.get = AsyncMock(
        return_value=[
            _doc(
                "u1",
                {
                    "email": "ada@lovelace.org",
                    "firstName": "Ada",
                    "healthProfile": {"gender": "female", "weight": 60, "height": 165},
                },
            ),
            _doc("u2", {"email": "not-an-email"}),
        ]
    )
    first_page.start_after.return_value.get = AsyncMock(return_value=[])

    fs = FirestoreService(db=mock_firestore_db)
    users = [user async for user in fs.get_all_users()]

    assert [u.uid for u in users] == ["u1"]
    assert users[0].first_name == "Ada"
    assert users[0].health_profile.weight_kg == 60
    mock_firestore_db.collection.assert_any_call("users")


@pytest.mark.asyncio
async def test_get_reminders(mock_firestore_db):
    subcollection = mock_firestore_db.collection.return_value.document.return_value.collection.return_value
    subcollection.get = AsyncMock(
        return_value=[
            _doc(
                "r1",
                {
                    "title": "Vitamin D",
                    "time": "08:00",
                    "frequency": "daily",
                    "category": "medication",
                    "isActive": True,
                    "aiGenerated": True,
                    "priority": "high",
                },
            ),
            _doc("r2", {"title": "Broken", "category": "dancing"}),
        ]
    )

    reminders = await FirestoreService(db=mock_firestore_db).get_reminders("u1")

    assert len(reminders) == 1
    assert reminders[0].id == "r1"
    assert reminders[0].ai_generated is True
    mock_firestore_db.collection.return_value.document.assert_called_with("u1")
    mock_firestore_db.collection.return_value.document.return_value.collection.assert_called_with(
        "reminders"
    )


@pytest.mark.asyncio
async def test_get_health_records_filters_by_date(mock_firestore_db):
    subcollection = mock_firestore_db.collection.return_value.document.return_value.collection.return_value
    query = subcollection.where.return_value.where.return_value.order_by.return_value
    query.get = AsyncMock(
        return_value=[
            _doc(
                "h1",
                {
                    "type": "Heart Rate",
                    "value": 64,
                    "unit": "bpm",
                    "timestamp": datetime(2024, 6, 1, 7, 0, tzinfo=timezone.utc),
                },
            ),
            _doc("h2", {"type": "Steps"}),
        ]
    )

    records = await FirestoreService(db=mock_firestore_db).get_health_records(
        "u1", date(2024, 5, 2), date(2024, 6, 1)
    )

    assert [r.data_type for r in records] == ["Heart Rate"]
    subcollection.where.return_value.where.return_value.order_by.assert_called_once_with(
        "timestamp"
    )


@pytest.mark.asyncio
async def test_save_reminder_analysis_is_keyed_by_day(mock_firestore_db):
    subcollection = mock_firestore_db.collection.return_value.document.return_value.collection.return_value

    await FirestoreService(db=mock_firestore_db).save_reminder_analysis(
        "u1", analyze_reminders([]), date(2024, 6, 16)
    )

    subcollection.document.assert_called_with("2024-06-16")
    saved = subcollection.document.return_value.set.await_args.args[0]
    assert saved["adherenceScore"] == 50
    assert "scoreDescription" in saved


@pytest.mark.asyncio
async def test_save_insights_replaces_existing(mock_firestore_db):
    subcollection = mock_firestore_db.collection.return_value.document.return_value.collection.return_value
    stale = _doc("0", {})
    subcollection.get = AsyncMock(return_value=[stale])
    insights = [
        Insight(title="A", description="a", priority="high", category="wellness"),
        Insight(title="B", description="b", priority="low", category="exercise"),
    ]

    await FirestoreService(db=mock_firestore_db).save_insights("u1", insights)

    batch = mock_firestore_db.batch.return_value
    batch.delete.assert_called_once_with(stale.reference)
    assert batch.set.call_count == 2
    subcollection.document.assert_any_call("0")
    subcollection.document.assert_any_call("1")
    assert batch.set.call_args_list[1].args[1]["priority"] == "low"
    batch.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_save_body_metrics(mock_firestore_db):
    subcollection = mock_firestore_db.collection.return_value.document.return_value.collection.return_value
    snapshot = BodyMetricsSnapshot(
        snapshot_date=date(2024, 6, 16), bmi=BMIResult(bmi=22.9, category="Normal")
    )

    await FirestoreService(db=mock_firestore_db).save_body_metrics("u1", snapshot)

    subcollection.document.assert_called_with("2024-06-16")
    saved = subcollection.document.return_value.set.await_args.args[0]
    assert saved["date"] == "2024-06-16"
    assert saved["bmi"] == {"bmi": 22.9, "category": "Normal"}
    assert saved["energy"] is None


@pytest.mark.asyncio
async def test_save_health_summary_is_keyed_by_period(mock_firestore_db, sample_health_records):
    subcollection = mock_firestore_db.collection.return_value.document.return_value.collection.return_value
    summary = summarize_health_data(
        sample_health_records, "30d", now=datetime(2024, 6, 16, tzinfo=timezone.utc)
    )

    await FirestoreService(db=mock_firestore_db).save_health_summary("u1", summary)

    subcollection.document.assert_called_with("30d")
    saved = subcollection.document.return_value.set.await_args.args[0]
    assert len(saved["summary"]) == 7
    mock_firestore_db.collection.return_value.document.return_value.collection.assert_called_with(
        "healthSummary"
    )
