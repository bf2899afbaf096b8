# supervision_engine/tests/conftest.py

"""
Pytest configuration and fixtures for supervision engine tests.
"""

import pytest
import logging
from uuid import uuid4
from datetime import date, time

from supervision_engine.core.models import (
    AvailabilityEntry,
    CourseInstructions,
    ExamInstructions,
    SecretariatInstructions,
    Slot,
    Submission,
)

# Configure logging for tests
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


@pytest.fixture
def session_id():
    """Generate a test session ID"""
    return str(uuid4())


@pytest.fixture
def make_slot(session_id):
    """Factory for slots; required_count defaults to undefined capacity."""

    def _make(required_count=None, slot_id=None, day=None, start=None):
        return Slot(
            id=slot_id or str(uuid4()),
            session_id=session_id,
            date=day or date(2025, 1, 13),
            start_time=start or time(8, 15),
            end_time=time(12, 30),
            required_count=required_count,
        )

    return _make


@pytest.fixture
def make_submission():
    """Factory for submissions available on the given slot ids."""

    def _make(*slot_ids, supervisor_id=None, email=None, unavailable=()):
        entries = [AvailabilityEntry(slot_id=s, is_available=True) for s in slot_ids]
        entries += [AvailabilityEntry(slot_id=s, is_available=False) for s in unavailable]
        return Submission(
            id=str(uuid4()),
            supervisor_id=supervisor_id if supervisor_id is not None else str(uuid4()),
            email=email or f"{uuid4().hex[:8]}@uclouvain.be",
            entries=entries,
        )

    return _make


@pytest.fixture
def exam():
    return ExamInstructions(
        id=str(uuid4()),
        code="LBIO1111",
        secretariat_code="FASB",
        use_specific=False,
    )


@pytest.fixture
def course_with_text():
    return CourseInstructions(id=str(uuid4()), code="LBIO1111", general_text="Bring ID")


@pytest.fixture
def fasb_default():
    return SecretariatInstructions(
        code="FASB",
        name="Faculté de pharmacie",
        arrival_text="Présentez-vous 30 minutes avant le début",
        setup_text="Distribuez les copies",
        general_text="Vérifiez les cartes étudiant",
    )
