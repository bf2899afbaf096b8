# backend/app/services/data_retrieval/__init__.py

"""
Data retrieval services package.

Reads the supervision tables from the hosted store and hands them over as
plain row dicts for the supervision engine to map.
"""

from .supervision_data import SupervisionData
from .helpers import model_to_dict, models_to_dicts

__all__ = [
    "SupervisionData",
    "model_to_dict",
    "models_to_dicts",
]
