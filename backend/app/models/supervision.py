# app/models/supervision.py

import uuid

from typing import List, Optional, Any

from sqlalchemy import (
    Date,
    DateTime,
    String,
    Text,
    Boolean,
    Integer,
    SmallInteger,
    Time,
    ForeignKey,
    Index,
)
from sqlalchemy.dialects.postgresql import UUID as PG_UUID, JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .base import Base, TimestampMixin
from datetime import date, datetime, time


class SupervisionSession(Base):
    """An exam session (January, June, August...) supervisors declare availability for."""

    __tablename__ = "sessions"
    id: Mapped[uuid.UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    period: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=False)
    lock_submissions: Mapped[bool | None] = mapped_column(Boolean, default=False)
    lock_message: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    creneaux: Mapped[List["Creneau"]] = relationship(back_populates="session")


class Creneau(Base):
    """A supervision slot."""

    __tablename__ = "creneaux"
    id: Mapped[uuid.UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True)
    session_id: Mapped[uuid.UUID] = mapped_column(
        PG_UUID(as_uuid=True), ForeignKey("sessions.id", ondelete="CASCADE")
    )
    examen_id: Mapped[uuid.UUID | None] = mapped_column(PG_UUID(as_uuid=True))
    date_surveillance: Mapped[date | None] = mapped_column(Date)
    heure_debut_surveillance: Mapped[time | None] = mapped_column(Time)
    heure_fin_surveillance: Mapped[time | None] = mapped_column(Time)
    type_creneau: Mapped[str | None] = mapped_column(String, default="PRINCIPAL")
    nb_surveillants_requis: Mapped[int | None] = mapped_column(Integer)
    created_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    session: Mapped["SupervisionSession"] = relationship(back_populates="creneaux")

    __table_args__ = (
        Index("idx_creneaux_session_date", "session_id", "date_surveillance"),
    )


class SoumissionDisponibilite(Base):
    """One supervisor's availability declaration for a session."""

    __tablename__ = "soumissions_disponibilites"
    id: Mapped[uuid.UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True)
    session_id: Mapped[uuid.UUID] = mapped_column(
        PG_UUID(as_uuid=True), ForeignKey("sessions.id", ondelete="CASCADE")
    )
    surveillant_id: Mapped[uuid.UUID | None] = mapped_column(PG_UUID(as_uuid=True))
    email: Mapped[str] = mapped_column(String, nullable=False)
    nom: Mapped[str | None] = mapped_column(String)
    prenom: Mapped[str | None] = mapped_column(String)
    type_surveillant: Mapped[str | None] = mapped_column(String)
    remarque_generale: Mapped[str | None] = mapped_column(Text)
    # [{"creneau_id": ..., "est_disponible": bool}, ...]
    historique_disponibilites: Mapped[list[dict[str, Any]]] = mapped_column(
        JSONB, default=list
    )
    submitted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    version: Mapped[int | None] = mapped_column(Integer)


class Cours(Base, TimestampMixin):
    """Course register entry; ``consignes`` holds course-level instructions."""

    __tablename__ = "cours"
    id: Mapped[uuid.UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True)
    code: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    intitule_complet: Mapped[str] = mapped_column(String, nullable=False)
    consignes: Mapped[str | None] = mapped_column(Text)

    examens: Mapped[List["Examen"]] = relationship(back_populates="cours")


class Examen(Base, TimestampMixin):
    __tablename__ = "examens"
    id: Mapped[uuid.UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True)
    session_id: Mapped[uuid.UUID] = mapped_column(
        PG_UUID(as_uuid=True), ForeignKey("sessions.id", ondelete="CASCADE")
    )
    cours_id: Mapped[uuid.UUID | None] = mapped_column(
        PG_UUID(as_uuid=True), ForeignKey("cours.id", ondelete="SET NULL")
    )
    code_examen: Mapped[str] = mapped_column(String, nullable=False)
    nom_examen: Mapped[str] = mapped_column(String, nullable=False)
    date_examen: Mapped[date | None] = mapped_column(Date)
    heure_debut: Mapped[time | None] = mapped_column(Time)
    heure_fin: Mapped[time | None] = mapped_column(Time)
    secretariat: Mapped[str | None] = mapped_column(String)
    nb_surveillants_requis: Mapped[int | None] = mapped_column(Integer)
    # Rooms assigned manually by the secretariat rather than by the system
    is_mode_secretariat: Mapped[bool | None] = mapped_column(Boolean, default=False)
    utiliser_consignes_specifiques: Mapped[bool | None] = mapped_column(
        Boolean, default=False
    )
    consignes_specifiques_arrivee: Mapped[str | None] = mapped_column(Text)
    consignes_specifiques_mise_en_place: Mapped[str | None] = mapped_column(Text)
    consignes_specifiques_generales: Mapped[str | None] = mapped_column(Text)

    cours: Mapped[Optional["Cours"]] = relationship(back_populates="examens")


class ConsigneSecretariat(Base):
    """Default instructions owned by a secretariat."""

    __tablename__ = "consignes_secretariat"
    id: Mapped[uuid.UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True)
    code_secretariat: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    nom_secretariat: Mapped[str] = mapped_column(String, nullable=False)
    consignes_arrivee: Mapped[str | None] = mapped_column(Text)
    consignes_mise_en_place: Mapped[str | None] = mapped_column(Text)
    consignes_generales: Mapped[str | None] = mapped_column(Text)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
