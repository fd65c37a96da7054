# This project was developed with assistance from AI tools.
"""Static subdivision unit catalog shown on the project map."""

from ..schemas.calculator import CatalogUnit

_FLOOR_PLAN_BASE = "https://placehold.co/400x300/e2e8f0/0f172a?text="

UNITS: list[CatalogUnit] = [
    CatalogUnit(
        unit_id="Lot-12",
        plan="Plan-A",
        plan_type="Plan 1",
        price=650000,
        tax_rate=0.0078,
        address="112 Orchard Lane",
        map_x="18%",
        map_y="32%",
        floor_plan_image_url=f"{_FLOOR_PLAN_BASE}Plan+1",
    ),
    CatalogUnit(
        unit_id="Lot-14",
        plan="Plan-B",
        plan_type="Plan 2",
        price=700000,
        address="116 Orchard Lane",
        map_x="34%",
        map_y="41%",
        floor_plan_image_url=f"{_FLOOR_PLAN_BASE}Plan+2",
    ),
    CatalogUnit(
        unit_id="Lot-21",
        plan="Plan-C",
        plan_type="Plan 3",
        price=785000,
        tax_rate=0.0081,
        address="205 Meadow Court",
        map_x="57%",
        map_y="28%",
        floor_plan_image_url=f"{_FLOOR_PLAN_BASE}Plan+3",
    ),
    CatalogUnit(
        unit_id="Lot-23",
        plan="Plan-A",
        plan_type="Plan 1",
        price=665000,
        tax_rate=0.0078,
        address="209 Meadow Court",
        map_x="72%",
        map_y="55%",
        floor_plan_image_url=f"{_FLOOR_PLAN_BASE}Plan+1",
    ),
]

_BY_ID: dict[str, CatalogUnit] = {unit.unit_id: unit for unit in UNITS}


def list_units() -> list[CatalogUnit]:
    return list(UNITS)


def get_unit(unit_id: str) -> CatalogUnit | None:
    """Look up a catalog unit by id. Returns None when unknown."""
    return _BY_ID.get(unit_id)


def marker_label(unit: CatalogUnit) -> str:
    """Single character drawn inside the unit's map marker (``Plan 3`` -> ``3``)."""
    return unit.plan_type[-1:] if unit.plan_type else ""
