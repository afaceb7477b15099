"""StaticModelHost — serves a fixed list of wall records."""

from __future__ import annotations

from collections.abc import Iterable

from biminsight.host.base import ModelHost
from biminsight.models.wall import WallRecord


class StaticModelHost(ModelHost):
    """Host backed by records gathered elsewhere (scripts, bridges, tests)."""

    def __init__(self, walls: Iterable[WallRecord | dict], *, name: str = "static") -> None:
        self._walls = [w if isinstance(w, WallRecord) else WallRecord(**w) for w in walls]
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def collect_walls(self) -> list[WallRecord]:
        return list(self._walls)
