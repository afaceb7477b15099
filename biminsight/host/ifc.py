"""IfcModelHost — collect wall records from an IFC building model.

Walls are every ``IfcWall`` instance (``IfcWallStandardCase`` and other
subtypes included).  Length and area come from the ``Qto_WallBaseQuantities``
quantity set and are converted from project units to feet / square feet.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import ifcopenshell
import ifcopenshell.util.element
import ifcopenshell.util.unit

from biminsight.config import (
    METRES_PER_FOOT,
    NOT_AVAILABLE,
    SQ_METRES_PER_SQ_FOOT,
    WALL_CLASS,
    WALL_QTO,
)
from biminsight.host.base import ModelHost
from biminsight.models.wall import WallRecord

logger = logging.getLogger(__name__)


def _unit_scale(ifc_file: ifcopenshell.file, unit_type: str) -> float:
    """Return the factor from project units of *unit_type* to SI."""
    try:
        return float(ifcopenshell.util.unit.calculate_unit_scale(ifc_file, unit_type))
    except Exception:
        logger.debug("Could not resolve %s, assuming SI", unit_type, exc_info=True)
        return 1.0


def extract_type_name(element: ifcopenshell.entity_instance) -> str:
    """Return the wall type's name, falling back to ``ObjectType``."""
    try:
        wall_type = ifcopenshell.util.element.get_type(element)
    except Exception:
        logger.debug("Type lookup failed for %s", element.GlobalId, exc_info=True)
        wall_type = None
    if wall_type is not None and wall_type.Name:
        return wall_type.Name
    return getattr(element, "ObjectType", None) or NOT_AVAILABLE


def extract_level_name(element: ifcopenshell.entity_instance) -> str:
    """Return the name of the storey that contains *element*."""
    try:
        container = ifcopenshell.util.element.get_container(element)
    except Exception:
        logger.debug("Container lookup failed for %s", element.GlobalId, exc_info=True)
        return NOT_AVAILABLE

    # Walk up the aggregation tree when the wall sits in a space or zone
    while container is not None and not container.is_a("IfcBuildingStorey"):
        decomposes = getattr(container, "Decomposes", None)
        container = decomposes[0].RelatingObject if decomposes else None

    if container is None:
        return NOT_AVAILABLE
    return container.Name or NOT_AVAILABLE


def extract_quantities(element: ifcopenshell.entity_instance) -> dict[str, Any]:
    """Return the wall's base quantities, or an empty dict."""
    try:
        qtos = ifcopenshell.util.element.get_psets(element, qtos_only=True)
    except Exception:
        logger.debug("Quantity extraction failed for %s", element.GlobalId, exc_info=True)
        return {}
    return qtos.get(WALL_QTO, {})


def _as_float(value: Any) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class IfcModelHost(ModelHost):
    """Host backed by an ``ifcopenshell.file``.

    Parameters
    ----------
    model:
        An open IFC file, or a path to one.
    """

    def __init__(self, model: ifcopenshell.file | str | Path) -> None:
        if isinstance(model, (str, Path)):
            path = Path(model)
            logger.info("Opening %s", path)
            self._name = path.name
            self._file = ifcopenshell.open(str(path))
        else:
            self._name = f"<{model.schema} model>"
            self._file = model
        self._length_scale = _unit_scale(self._file, "LENGTHUNIT") / METRES_PER_FOOT
        self._area_scale = _unit_scale(self._file, "AREAUNIT") / SQ_METRES_PER_SQ_FOOT

    @property
    def name(self) -> str:
        return self._name

    def _to_record(self, element: ifcopenshell.entity_instance) -> WallRecord:
        quantities = extract_quantities(element)

        length = _as_float(quantities.get("Length"))
        area = _as_float(quantities.get("NetSideArea"))
        if area is None:
            area = _as_float(quantities.get("GrossSideArea"))

        return WallRecord(
            element_id=element.GlobalId,
            type_name=extract_type_name(element),
            length=length * self._length_scale if length is not None else 0.0,
            area=area * self._area_scale if area is not None else 0.0,
            level_name=extract_level_name(element),
        )

    def collect_walls(self) -> list[WallRecord]:
        walls = self._file.by_type(WALL_CLASS)
        logger.info("Found %d walls in %s", len(walls), self._name)
        return [self._to_record(w) for w in walls]
