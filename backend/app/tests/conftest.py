# backend/app/tests/conftest.py

import pytest
import pytest_asyncio
from typing import AsyncGenerator, Any, Dict, List
from unittest.mock import AsyncMock
from uuid import uuid4
from datetime import date, time

from httpx import AsyncClient, ASGITransport

from backend.app.main import app
from backend.app.api.deps import capacity_service, instructions_service
from backend.app.services import CapacityService, InstructionsService, SupervisionData
from supervision_engine.config import CapacityConfig


@pytest.fixture
def session_row() -> Dict[str, Any]:
    return {
        "id": uuid4(),
        "name": "Session de juin",
        "year": 2025,
        "period": 6,
        "is_active": True,
    }


@pytest.fixture
def slot_rows(session_row) -> List[Dict[str, Any]]:
    """Three slots: 4 required, 2 required, and one with no required count."""
    sid = session_row["id"]
    return [
        {
            "id": uuid4(),
            "session_id": sid,
            "date_surveillance": date(2025, 6, 2),
            "heure_debut_surveillance": time(8, 15),
            "heure_fin_surveillance": time(12, 0),
            "type_creneau": "PRINCIPAL",
            "nb_surveillants_requis": 4,
        },
        {
            "id": uuid4(),
            "session_id": sid,
            "date_surveillance": date(2025, 6, 2),
            "heure_debut_surveillance": time(13, 45),
            "heure_fin_surveillance": time(17, 30),
            "type_creneau": "PRINCIPAL",
            "nb_surveillants_requis": 2,
        },
        {
            "id": uuid4(),
            "session_id": sid,
            "date_surveillance": date(2025, 6, 3),
            "heure_debut_surveillance": time(8, 15),
            "heure_fin_surveillance": time(12, 0),
            "type_creneau": "RESERVE",
            "nb_surveillants_requis": None,
        },
    ]


@pytest.fixture
def submission_rows(slot_rows) -> List[Dict[str, Any]]:
    morning, afternoon, reserve = (row["id"] for row in slot_rows)
    return [
        {
            "id": uuid4(),
            "surveillant_id": uuid4(),
            "email": "alice.martin@example.org",
            "nom": "Martin",
            "prenom": "Alice",
            "historique_disponibilites": [
                {"creneau_id": str(morning), "est_disponible": True},
                {"creneau_id": str(afternoon), "est_disponible": True},
            ],
        },
        {
            "id": uuid4(),
            "surveillant_id": None,
            "email": "Bob.Dupont@Example.org",
            "nom": "Dupont",
            "prenom": "Bob",
            "historique_disponibilites": [
                {"creneau_id": str(morning), "est_disponible": True},
                {"creneau_id": str(afternoon), "est_disponible": False},
                {"creneau_id": str(reserve), "est_disponible": True},
            ],
        },
    ]


@pytest.fixture
def exam_row() -> Dict[str, Any]:
    return {
        "id": uuid4(),
        "code_examen": "LFSAB1105",
        "nom_examen": "Probabilités",
        "secretariat": "FSA",
        "cours_id": None,
        "utiliser_consignes_specifiques": False,
        "consignes_specifiques_arrivee": None,
        "consignes_specifiques_mise_en_place": None,
        "consignes_specifiques_generales": None,
        "is_mode_secretariat": False,
    }


@pytest.fixture
def secretariat_rows() -> List[Dict[str, Any]]:
    return [
        {
            "code_secretariat": "FSA",
            "nom_secretariat": "Secrétariat FSA",
            "consignes_arrivee": "Présentez-vous 30 minutes avant",
            "consignes_mise_en_place": "Vérifiez les places",
            "consignes_generales": "Pas de téléphone",
            "is_active": True,
        }
    ]


@pytest.fixture
def mock_data() -> AsyncMock:
    """Data source double; every getter is an AsyncMock."""
    data = AsyncMock(spec=SupervisionData)
    data.get_session.return_value = None
    data.get_active_session.return_value = None
    data.get_slots.return_value = []
    data.get_submissions.return_value = []
    data.get_exam.return_value = None
    data.get_course.return_value = None
    data.get_secretariat_defaults.return_value = []
    return data


@pytest.fixture
def capacity_svc(mock_data) -> CapacityService:
    service = CapacityService(AsyncMock(), CapacityConfig())
    service.data = mock_data
    return service


@pytest.fixture
def instructions_svc(mock_data) -> InstructionsService:
    service = InstructionsService(AsyncMock())
    service.data = mock_data
    return service


@pytest_asyncio.fixture
async def client(
    capacity_svc: CapacityService, instructions_svc: InstructionsService
) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTP client against the app with services backed by the mocked data source.
    """
    app.dependency_overrides[capacity_service] = lambda: capacity_svc
    app.dependency_overrides[instructions_service] = lambda: instructions_svc

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()
