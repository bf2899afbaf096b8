# app/models/__init__.py

from .base import Base
from .supervision import (
    SupervisionSession,
    Creneau,
    SoumissionDisponibilite,
    Cours,
    Examen,
    ConsigneSecretariat,
)

__all__ = [
    "Base",
    "SupervisionSession",
    "Creneau",
    "SoumissionDisponibilite",
    "Cours",
    "Examen",
    "ConsigneSecretariat",
]
