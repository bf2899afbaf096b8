# supervision_engine/core/models.py

from __future__ import annotations
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field
from datetime import date, time
from enum import Enum
import logging

logger = logging.getLogger(__name__)


def _clean_text(value: Any) -> str:
    """Normalize an optional text column: None -> '', surrounding whitespace stripped."""
    if value is None:
        return ""
    return str(value).strip()


def _parse_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def _parse_time(value: Any) -> Optional[time]:
    if value is None or value == "":
        return None
    if isinstance(value, time):
        return value
    return time.fromisoformat(str(value))


def _parse_optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-integer required count: {value!r}")
        return None


class SlotTypeEnum(str, Enum):
    PRINCIPAL = "PRINCIPAL"
    RESERVE = "RESERVE"


class FillStatus(Enum):
    UNDEFINED = "non-defini"
    CRITICAL = "critique"
    ALERT = "alerte"
    OK = "ok"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]

    @property
    def severity(self) -> str:
        """Badge variant used by the rendering layer."""
        return _STATUS_SEVERITIES[self]


_STATUS_LABELS: Dict[FillStatus, str] = {
    FillStatus.UNDEFINED: "Non défini",
    FillStatus.CRITICAL: "Critique",
    FillStatus.ALERT: "Alerte",
    FillStatus.OK: "OK",
}

_STATUS_SEVERITIES: Dict[FillStatus, str] = {
    FillStatus.UNDEFINED: "default",
    FillStatus.CRITICAL: "destructive",
    FillStatus.ALERT: "warning",
    FillStatus.OK: "success",
}


class InstructionsSource(Enum):
    EXAM_SPECIFIC = "specifique"
    COURSE = "cours"
    PENDING = "en_attente"
    SECRETARIAT = "secretariat"


@dataclass(frozen=True)
class Slot:
    id: str
    session_id: Optional[str] = None
    date: Optional[date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    slot_type: str = SlotTypeEnum.PRINCIPAL.value
    required_count: Optional[int] = None

    @property
    def sort_key(self):
        return (self.date or date.max, self.start_time or time.max)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "session_id": self.session_id,
            "date": self.date.isoformat() if self.date else None,
            "start_time": self.start_time.isoformat() if self.start_time else None,
            "end_time": self.end_time.isoformat() if self.end_time else None,
            "slot_type": self.slot_type,
            "required_count": self.required_count,
        }

    @classmethod
    def from_backend_data(cls, data: Dict[str, Any]) -> "Slot":
        """Create Slot from a creneaux row."""
        session_id = data.get("session_id")
        return cls(
            id=str(data["id"]),
            session_id=str(session_id) if session_id is not None else None,
            date=_parse_date(data.get("date_surveillance")),
            start_time=_parse_time(data.get("heure_debut_surveillance")),
            end_time=_parse_time(data.get("heure_fin_surveillance")),
            slot_type=data.get("type_creneau") or SlotTypeEnum.PRINCIPAL.value,
            required_count=_parse_optional_int(data.get("nb_surveillants_requis")),
        )


@dataclass(frozen=True)
class AvailabilityEntry:
    slot_id: str
    is_available: bool = True

    @classmethod
    def from_backend_data(cls, data: Dict[str, Any]) -> "AvailabilityEntry":
        return cls(
            slot_id=str(data["creneau_id"]),
            is_available=bool(data.get("est_disponible", False)),
        )


@dataclass(frozen=True)
class Submission:
    id: str
    supervisor_id: Optional[str] = None
    email: str = ""
    last_name: str = ""
    first_name: str = ""
    entries: List[AvailabilityEntry] = field(default_factory=list)

    @property
    def supervisor_identity(self) -> str:
        """Stable key: the supervisor id, else the email, else the submission id."""
        if self.supervisor_id:
            return self.supervisor_id
        email = self.email.strip().lower()
        return email or f"submission:{self.id}"

    @property
    def display_name(self) -> str:
        return f"{self.last_name} {self.first_name}".strip() or self.email

    @classmethod
    def from_backend_data(cls, data: Dict[str, Any]) -> "Submission":
        """Create Submission from a soumissions_disponibilites row."""
        raw_entries = data.get("historique_disponibilites") or []
        if not isinstance(raw_entries, list):
            logger.warning(
                f"Submission {data.get('id')} has non-list availability history. "
                "Ignoring this field."
            )
            raw_entries = []

        entries = []
        for raw in raw_entries:
            if not isinstance(raw, dict) or raw.get("creneau_id") is None:
                logger.warning(
                    f"Skipping malformed availability entry on submission {data.get('id')}: {raw!r}"
                )
                continue
            entries.append(AvailabilityEntry.from_backend_data(raw))

        supervisor_id = data.get("surveillant_id")
        return cls(
            id=str(data["id"]),
            supervisor_id=str(supervisor_id) if supervisor_id else None,
            email=_clean_text(data.get("email")),
            last_name=_clean_text(data.get("nom")),
            first_name=_clean_text(data.get("prenom")),
            entries=entries,
        )


@dataclass(frozen=True)
class SlotWithStats:
    slot: Slot
    available_count: int
    fill_ratio: Optional[float]
    status: FillStatus
    capacity_defined: bool

    def to_dict(self) -> Dict[str, Any]:
        d = self.slot.to_dict()
        d.update(
            {
                "available_count": self.available_count,
                "fill_ratio": self.fill_ratio,
                "status": self.status.value,
                "status_label": self.status.label,
                "capacity_defined": self.capacity_defined,
            }
        )
        return d


@dataclass(frozen=True)
class SessionCapacitySummary:
    slots_with_capacity_defined: int = 0
    critical_count: int = 0
    alert_count: int = 0
    ok_count: int = 0
    average_fill_ratio: float = 0.0

    @property
    def has_issues(self) -> bool:
        return self.critical_count > 0 or self.alert_count > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slots_with_capacity_defined": self.slots_with_capacity_defined,
            "critical_count": self.critical_count,
            "alert_count": self.alert_count,
            "ok_count": self.ok_count,
            "average_fill_ratio": self.average_fill_ratio,
            "has_issues": self.has_issues,
        }


@dataclass(frozen=True)
class ExamInstructions:
    """Exam record as seen by the instructions cascade."""

    id: str
    code: str = ""
    secretariat_code: str = ""
    course_id: Optional[str] = None
    use_specific: bool = False
    arrival_text: str = ""
    setup_text: str = ""
    general_text: str = ""
    secretariat_assignment_mode: bool = False

    @classmethod
    def from_backend_data(cls, data: Dict[str, Any]) -> "ExamInstructions":
        """Create ExamInstructions from an examens row."""
        course_id = data.get("cours_id")
        return cls(
            id=str(data["id"]),
            code=_clean_text(data.get("code_examen")),
            secretariat_code=_clean_text(data.get("secretariat")),
            course_id=str(course_id) if course_id else None,
            use_specific=bool(data.get("utiliser_consignes_specifiques")),
            arrival_text=_clean_text(data.get("consignes_specifiques_arrivee")),
            setup_text=_clean_text(data.get("consignes_specifiques_mise_en_place")),
            general_text=_clean_text(data.get("consignes_specifiques_generales")),
            secretariat_assignment_mode=bool(data.get("is_mode_secretariat")),
        )


@dataclass(frozen=True)
class CourseInstructions:
    id: str
    code: str = ""
    general_text: str = ""

    @classmethod
    def from_backend_data(cls, data: Dict[str, Any]) -> "CourseInstructions":
        return cls(
            id=str(data["id"]),
            code=_clean_text(data.get("code")),
            general_text=_clean_text(data.get("consignes")),
        )


@dataclass(frozen=True)
class SecretariatInstructions:
    code: str
    name: str = ""
    arrival_text: str = ""
    setup_text: str = ""
    general_text: str = ""
    is_active: bool = True

    @classmethod
    def from_backend_data(cls, data: Dict[str, Any]) -> "SecretariatInstructions":
        """Create SecretariatInstructions from a consignes_secretariat row."""
        return cls(
            code=_clean_text(data.get("code_secretariat")),
            name=_clean_text(data.get("nom_secretariat")),
            arrival_text=_clean_text(data.get("consignes_arrivee")),
            setup_text=_clean_text(data.get("consignes_mise_en_place")),
            general_text=_clean_text(data.get("consignes_generales")),
            is_active=bool(data.get("is_active", True)),
        )


@dataclass(frozen=True)
class ResolvedInstructions:
    source: InstructionsSource
    arrival_text: str = ""
    setup_text: str = ""
    general_text: str = ""

    @property
    def is_pending(self) -> bool:
        return self.source is InstructionsSource.PENDING

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source.value,
            "arrival_text": self.arrival_text,
            "setup_text": self.setup_text,
            "general_text": self.general_text,
            "is_pending": self.is_pending,
        }


# Returned when the secretariat assigns rooms manually and no exam/course text applies
INSTRUCTIONS_PENDING = ResolvedInstructions(source=InstructionsSource.PENDING)
