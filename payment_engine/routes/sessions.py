# This project was developed with assistance from AI tools.
"""Calculator session routes.

Every mutating route runs its controller call to completion without awaiting,
so the tax-then-payment derivation for one request always finishes before the
next request for the same session is handled.
"""

import logging
from collections.abc import Mapping
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from ..schemas.calculator import ParametersUpdate, SessionState, TaxOverrideUpdate
from ..services.coercion import normalize_unit, to_number, unit_from_query
from ..services.controller import DerivedStateController
from ..services.presentation import build_display
from ..services.sessions import SessionNotFoundError, get_session_registry
from ..services.units import get_unit

logger = logging.getLogger(__name__)

router = APIRouter()


def get_controller(session_id: str) -> DerivedStateController:
    """Resolve the session's controller or 404."""
    try:
        return get_session_registry().get(session_id)
    except SessionNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Session not found"
        ) from None


Controller = Annotated[DerivedStateController, Depends(get_controller)]


def _build_state(session_id: str, controller: DerivedStateController) -> SessionState:
    breakdown = controller.current_breakdown()
    return SessionState(
        session_id=session_id,
        unit=controller.unit,
        parameters=controller.parameters,
        effective_tax_rate=controller.effective_tax_rate,
        breakdown=breakdown,
        display=build_display(breakdown, controller.unit, controller.effective_tax_rate),
    )


@router.post("/", response_model=SessionState, status_code=status.HTTP_201_CREATED)
async def create_session(request: Request) -> SessionState:
    """Open a session.

    The query string may carry a unit (``?price=650000&unit_id=Lot-12&plan=A``)
    or just a catalog id (``?unit_id=Lot-12``).
    """
    query = dict(request.query_params)
    unit = unit_from_query(query)
    if unit is None and query.get("unit_id"):
        unit = get_unit(query["unit_id"])
    session_id, controller = get_session_registry().create(unit)
    return _build_state(session_id, controller)


@router.get("/{session_id}", response_model=SessionState)
async def get_session(session_id: str, controller: Controller) -> SessionState:
    return _build_state(session_id, controller)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_session(session_id: str, _controller: Controller) -> Response:
    get_session_registry().close(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{session_id}/unit", response_model=SessionState)
async def set_unit(
    session_id: str,
    controller: Controller,
    payload: Annotated[Any, Body()] = None,
) -> SessionState:
    """Host-page port for injecting a unit.

    Malformed payloads are ignored and the unchanged state is returned.
    """
    unit = normalize_unit(payload) if isinstance(payload, Mapping) else None
    controller.select_unit(unit)
    return _build_state(session_id, controller)


@router.put("/{session_id}/unit/{unit_id}", response_model=SessionState)
async def select_catalog_unit(
    session_id: str,
    unit_id: str,
    controller: Controller,
) -> SessionState:
    unit = get_unit(unit_id)
    if unit is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unit not found")
    controller.select_unit(unit)
    return _build_state(session_id, controller)


@router.delete("/{session_id}/unit", response_model=SessionState)
async def clear_unit(session_id: str, controller: Controller) -> SessionState:
    controller.clear_unit()
    return _build_state(session_id, controller)


@router.patch("/{session_id}/parameters", response_model=SessionState)
async def update_parameters(
    session_id: str,
    body: ParametersUpdate,
    controller: Controller,
) -> SessionState:
    """Apply form edits. Each field present in the body is coerced to a number."""
    setters = {
        "down_payment_percent": controller.set_down_payment_percent,
        "interest_rate_percent": controller.set_interest_rate,
        "loan_term_years": controller.set_loan_term,
        "insurance_yearly": controller.set_insurance_yearly,
    }
    for field, setter in setters.items():
        if field in body.model_fields_set:
            setter(to_number(getattr(body, field)))
    return _build_state(session_id, controller)


@router.put("/{session_id}/tax", response_model=SessionState)
async def update_tax(
    session_id: str,
    body: TaxOverrideUpdate,
    controller: Controller,
) -> SessionState:
    """Set or clear the tax-rate and yearly-tax overrides. Null clears a field."""
    if "tax_rate" in body.model_fields_set:
        controller.set_tax_rate(None if body.tax_rate is None else to_number(body.tax_rate))
    if "property_tax_yearly" in body.model_fields_set:
        amount = body.property_tax_yearly
        controller.set_property_tax_yearly(None if amount is None else to_number(amount))
    return _build_state(session_id, controller)


@router.post("/{session_id}/reset", response_model=SessionState)
async def reset_session(session_id: str, controller: Controller) -> SessionState:
    controller.reset()
    logger.debug("Session %s reset to defaults", session_id)
    return _build_state(session_id, controller)
