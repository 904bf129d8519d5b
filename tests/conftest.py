"""Pytest configuration and fixtures."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from models.insight import HealthRecord
from models.reminder import Reminder


@pytest.fixture
def make_reminder():
    """Factory for reminders with sensible defaults."""
    counter = {"n": 0}

    def _make(
        category="wellness",
        time="08:00",
        priority="medium",
        is_active=True,
        ai_generated=False,
        frequency="daily",
    ) -> Reminder:
        counter["n"] += 1
        return Reminder(
            id=f"reminder-{counter['n']}",
            title=f"{category} reminder",
            time=time,
            frequency=frequency,
            category=category,
            priority=priority,
            is_active=is_active,
            ai_generated=ai_generated,
        )

    return _make


@pytest.fixture
def sample_health_records():
    """The demo metrics shown to users who have not uploaded any data."""
    now = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)
    rows = [
        ("Blood Pressure Systolic", 128, "mmHg"),
        ("Blood Pressure Diastolic", 82, "mmHg"),
        ("Heart Rate", 72, "bpm"),
        ("Blood Glucose", 95, "mg/dL"),
        ("Weight", 75, "kg"),
        ("Height", 175, "cm"),
        ("Steps", 6500, "steps"),
    ]
    return [
        HealthRecord(type=data_type, value=value, unit=unit, timestamp=now)
        for data_type, value, unit in rows
    ]


@pytest.fixture
def mock_firestore_db():
    """
    A MagicMock standing in for the async Firestore client. Every
    `collection().document().collection()` chain resolves to the same
    subcollection mock.
    """
    db = MagicMock()
    subcollection = db.collection.return_value.document.return_value.collection.return_value
    subcollection.get = AsyncMock(return_value=[])
    subcollection.document.return_value.set = AsyncMock()
    batch = MagicMock()
    batch.commit = AsyncMock()
    db.batch.return_value = batch
    return db
