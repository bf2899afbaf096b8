# tests/conftest.py
import logging
import pytest
from typing import Any, Dict, List, Type
from unittest.mock import AsyncMock, MagicMock


def pytest_configure(config):
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        filename="all_logs.log",
        filemode="w",
    )
    config.addinivalue_line(
        "markers", "integration: exercises several layers together"
    )


class InMemoryStore:
    """
    Stands in for an AsyncSession: every ``select(Model)`` returns the
    instances registered for that model, ignoring filters.
    """

    def __init__(self) -> None:
        self.rows: Dict[Type[Any], List[Any]] = {}

    def add(self, *objs: Any) -> None:
        for obj in objs:
            self.rows.setdefault(type(obj), []).append(obj)

    async def execute(self, stmt, *args, **kwargs):
        entity = stmt.column_descriptions[0]["entity"]
        objs = list(self.rows.get(entity, []))
        result = MagicMock()
        result.scalars.return_value.all.return_value = objs
        result.scalars.return_value.first.return_value = objs[0] if objs else None
        return result

    async def rollback(self) -> None:
        pass

    async def close(self) -> None:
        pass


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()
