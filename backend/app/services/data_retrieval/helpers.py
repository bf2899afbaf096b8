# backend/app/services/data_retrieval/helpers.py
"""
Reusable helper functions for data retrieval services
"""
from typing import Any, Dict, Iterable, List

from sqlalchemy import inspect


def model_to_dict(obj: Any) -> Dict[str, Any]:
    """
    Flatten an ORM instance into a plain dict keyed by column name
    """
    mapper = inspect(obj).mapper
    return {attr.key: getattr(obj, attr.key) for attr in mapper.column_attrs}


def models_to_dicts(objs: Iterable[Any]) -> List[Dict[str, Any]]:
    return [model_to_dict(obj) for obj in objs]
