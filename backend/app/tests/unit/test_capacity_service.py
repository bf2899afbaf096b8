# backend/app/tests/unit/test_capacity_service.py

import pytest
from unittest.mock import AsyncMock
from uuid import uuid4

from backend.app.core.exceptions import DataRetrievalError, NotFoundError
from backend.app.services import CapacityService
from supervision_engine.config import CapacityConfig

pytestmark = pytest.mark.asyncio


class TestSessionCapacity:
    async def test_computes_slots_and_summary(
        self, capacity_svc, mock_data, session_row, slot_rows, submission_rows
    ):
        mock_data.get_session.return_value = session_row
        mock_data.get_slots.return_value = slot_rows
        mock_data.get_submissions.return_value = submission_rows

        result = await capacity_svc.get_session_capacity(session_row["id"])

        assert result["session_id"] == str(session_row["id"])
        slots = result["slots"]
        assert [s["id"] for s in slots] == [str(r["id"]) for r in slot_rows]

        morning, afternoon, reserve = slots
        assert morning["available_count"] == 2
        assert morning["fill_ratio"] == pytest.approx(50.0)
        assert morning["status"] == "alerte"
        assert afternoon["available_count"] == 1
        assert afternoon["status"] == "alerte"
        assert reserve["available_count"] == 1
        assert reserve["fill_ratio"] is None
        assert reserve["status"] == "non-defini"
        assert reserve["capacity_defined"] is False

        summary = result["summary"]
        assert summary["slots_with_capacity_defined"] == 2
        assert summary["alert_count"] == 2
        assert summary["critical_count"] == 0
        assert summary["average_fill_ratio"] == pytest.approx(50.0)
        assert summary["has_issues"] is True

    async def test_thresholds_come_from_config(
        self, mock_data, session_row, slot_rows, submission_rows
    ):
        service = CapacityService(AsyncMock(), CapacityConfig(critical_threshold=60.0))
        service.data = mock_data
        mock_data.get_session.return_value = session_row
        mock_data.get_slots.return_value = slot_rows
        mock_data.get_submissions.return_value = submission_rows

        result = await service.get_session_capacity(session_row["id"])

        assert result["summary"]["critical_count"] == 2
        assert result["slots"][0]["status"] == "critique"

    async def test_empty_session(self, capacity_svc, mock_data, session_row):
        mock_data.get_session.return_value = session_row

        result = await capacity_svc.get_session_capacity(session_row["id"])

        assert result["slots"] == []
        assert result["summary"]["slots_with_capacity_defined"] == 0
        assert result["summary"]["average_fill_ratio"] == 0.0
        assert result["summary"]["has_issues"] is False

    async def test_unknown_session_raises_not_found(self, capacity_svc, mock_data):
        missing = uuid4()

        with pytest.raises(NotFoundError) as exc_info:
            await capacity_svc.get_session_capacity(missing)

        assert exc_info.value.context["entity_id"] == str(missing)
        mock_data.get_slots.assert_not_awaited()

    async def test_store_errors_propagate(self, capacity_svc, mock_data, session_row):
        mock_data.get_session.return_value = session_row
        mock_data.get_slots.side_effect = DataRetrievalError(table="creneaux")

        with pytest.raises(DataRetrievalError):
            await capacity_svc.get_session_capacity(session_row["id"])


    async def test_slots_are_ordered_by_date_and_start(
        self, capacity_svc, mock_data, session_row, slot_rows
    ):
        mock_data.get_session.return_value = session_row
        mock_data.get_slots.return_value = list(reversed(slot_rows))

        result = await capacity_svc.get_session_capacity(session_row["id"])

        assert [s["id"] for s in result["slots"]] == [str(r["id"]) for r in slot_rows]


class TestActiveSessionCapacity:
    async def test_uses_active_session(
        self, capacity_svc, mock_data, session_row, slot_rows
    ):
        mock_data.get_active_session.return_value = session_row
        mock_data.get_session.return_value = session_row
        mock_data.get_slots.return_value = slot_rows

        result = await capacity_svc.get_active_session_capacity()

        assert result["session_id"] == str(session_row["id"])
        mock_data.get_slots.assert_awaited_once_with(session_row["id"])

    async def test_no_active_session(self, capacity_svc):
        with pytest.raises(NotFoundError):
            await capacity_svc.get_active_session_capacity()


class TestAvailabilityMatrix:
    async def test_tri_state_cells(
        self, capacity_svc, mock_data, session_row, slot_rows, submission_rows
    ):
        mock_data.get_session.return_value = session_row
        mock_data.get_slots.return_value = slot_rows
        mock_data.get_submissions.return_value = submission_rows
        morning, afternoon, reserve = (str(r["id"]) for r in slot_rows)

        matrix = await capacity_svc.get_availability_matrix(session_row["id"])

        assert len(matrix["slots"]) == 3
        bob, alice = matrix["supervisors"]
        assert bob["display_name"] == "Dupont Bob"
        assert bob["identity"] == "bob.dupont@example.org"
        assert bob["cells"] == {morning: True, afternoon: False, reserve: True}
        assert bob["available_count"] == 2
        assert alice["cells"][reserve] is None
        assert alice["available_count"] == 2

    async def test_unknown_session(self, capacity_svc):
        with pytest.raises(NotFoundError):
            await capacity_svc.get_availability_matrix(uuid4())

    async def test_duplicate_identity_keeps_latest_submission(
        self, capacity_svc, mock_data, session_row, slot_rows
    ):
        slot_id = str(slot_rows[0]["id"])
        mock_data.get_session.return_value = session_row
        mock_data.get_slots.return_value = slot_rows[:1]
        mock_data.get_submissions.return_value = [
            {
                "id": uuid4(),
                "email": "x@uclouvain.be",
                "nom": "Avant",
                "historique_disponibilites": [
                    {"creneau_id": slot_id, "est_disponible": True}
                ],
            },
            {
                "id": uuid4(),
                "email": "X@UCLouvain.be",
                "nom": "Apres",
                "historique_disponibilites": [
                    {"creneau_id": slot_id, "est_disponible": False}
                ],
            },
        ]

        matrix = await capacity_svc.get_availability_matrix(session_row["id"])

        [row] = matrix["supervisors"]
        assert row["identity"] == "x@uclouvain.be"
        assert row["display_name"] == "Apres"
        assert row["cells"] == {slot_id: False}
        assert row["available_count"] == 0
