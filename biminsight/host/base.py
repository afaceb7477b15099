"""Abstract host interfaces."""

from __future__ import annotations

import abc

from biminsight.models.wall import WallRecord


class ModelHost(abc.ABC):
    """A building model the command can query for walls."""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Human-readable model name, used in log lines."""

    @abc.abstractmethod
    def collect_walls(self) -> list[WallRecord]:
        """Return one record per wall instance in the model.

        Attributes the model does not carry are defaulted on the record;
        an empty list means the model has no walls.
        """


class Dialog(abc.ABC):
    """A modal message surface supplied by the host."""

    @abc.abstractmethod
    def show(self, title: str, body: str) -> None:
        """Display *body* under *title* and return once dismissed."""
