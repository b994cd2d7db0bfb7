"""Splits router: per-person totals and assignment validation for a receipt."""

import logging
from fastapi import APIRouter

import schemas
from utils.splits import calculate_person_totals
from utils.validation import (
    validate_item_assignments,
    get_unassigned_items,
    validate_receipt_invariants
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/splits", tags=["splits"])


@router.post("/calculate", response_model=schemas.SplitCalculateResponse)
def calculate_split(request: schemas.SplitCalculateRequest):
    """
    Calculate what each person owes for a receipt.

    Totals are computed even when some items are not fully assigned, so a
    partially assigned receipt can be shown while people are still claiming
    items. Use is_fully_assigned / unassigned_items to tell if the split is final.
    """
    people = calculate_person_totals(request.receipt, request.people, request.assignments)
    unassigned = get_unassigned_items(request.receipt, request.assignments)

    logger.debug(
        "Calculated split for %d people over %d items (%d unassigned)",
        len(people), len(request.receipt.items), len(unassigned)
    )

    return schemas.SplitCalculateResponse(
        people=people,
        is_fully_assigned=validate_item_assignments(request.receipt, request.assignments),
        unassigned_items=unassigned
    )


@router.post("/validate", response_model=schemas.SplitValidateResponse)
def validate_split(request: schemas.SplitValidateRequest):
    # Recalculate totals so the person checks see fresh amounts
    people = calculate_person_totals(request.receipt, request.people, request.assignments)
    invariants = validate_receipt_invariants(request.receipt, request.assignments, people)

    if not invariants.is_valid:
        logger.warning(
            "Receipt failed invariant checks: %s",
            ", ".join(error.type for error in invariants.errors)
        )

    return schemas.SplitValidateResponse(
        is_fully_assigned=validate_item_assignments(request.receipt, request.assignments),
        unassigned_items=get_unassigned_items(request.receipt, request.assignments),
        invariants=invariants
    )
