"""Validation utilities for item assignments and receipt-level invariants."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

import schemas
from config import ASSIGNMENT_TOLERANCE, SPLIT_DEVIATION_PER_PERSON
from utils.currency import to_decimal
from utils.splits import calculate_item_share


def _assigned_percentage(assignments: schemas.AssignmentMap, item_index: int) -> Decimal:
    """Sum of all share percentages claimed for one item (0 if nobody claimed it)."""
    return sum(
        (to_decimal(a.share_percentage) for a in assignments.get(item_index, [])),
        Decimal(0)
    )


def _is_item_fully_assigned(assignments: schemas.AssignmentMap, item_index: int, tolerance: Decimal) -> bool:
    return abs(_assigned_percentage(assignments, item_index) - 100) <= tolerance


def validate_item_assignments(
    receipt: Optional[schemas.Receipt],
    assignments: schemas.AssignmentMap,
    tolerance: float = ASSIGNMENT_TOLERANCE
) -> bool:
    """Check that every item on the receipt is 100% assigned (within tolerance)."""
    if receipt is None or not receipt.items:
        return False

    tolerance = to_decimal(tolerance)
    return all(
        _is_item_fully_assigned(assignments, i, tolerance)
        for i in range(len(receipt.items))
    )


def get_unassigned_items(
    receipt: Optional[schemas.Receipt],
    assignments: schemas.AssignmentMap,
    tolerance: float = ASSIGNMENT_TOLERANCE
) -> list[int]:
    """Indices of items whose share percentages don't add up to 100, in ascending order."""
    if receipt is None or not receipt.items:
        return []

    tolerance = to_decimal(tolerance)
    return [
        i for i in range(len(receipt.items))
        if not _is_item_fully_assigned(assignments, i, tolerance)
    ]


def _negative_error(error_type: str, message: str, actual: float, **extra) -> schemas.ReceiptValidationError:
    return schemas.ReceiptValidationError(
        type=error_type,
        message=message,
        expected=0,
        actual=actual,
        **extra
    )


CENT = Decimal("0.01")


def _exceeds_tolerance(difference: Decimal, tolerance: Decimal) -> bool:
    # Compare at cent precision (half up) to avoid flagging sub-cent noise
    return difference.quantize(CENT, rounding=ROUND_HALF_UP) > tolerance.quantize(CENT, rounding=ROUND_HALF_UP)


def validate_receipt_invariants(
    receipt: Optional[schemas.Receipt],
    assignments: schemas.AssignmentMap,
    people: list[schemas.Person]
) -> schemas.ReceiptValidationResult:
    """
    Validate receipt-level invariants to catch inconsistent state.

    Checks that:
    - The receipt and its items carry no negative amounts
    - Items sum to the subtotal (1 cent of tolerance per item)
    - Each assigned item's splits sum to the item's price (1 cent per participant)
    - No person ends up with a negative total or item amount

    Args:
        receipt: The receipt to validate (None is treated as valid)
        assignments: Map of item index to share assignments
        people: People with calculated amounts

    Returns:
        ReceiptValidationResult listing every violation found
    """
    if receipt is None:
        return schemas.ReceiptValidationResult(is_valid=True, errors=[])

    errors = []
    deviation = to_decimal(SPLIT_DEVIATION_PER_PERSON)

    # 1. Receipt-level amounts
    if receipt.subtotal < 0:
        errors.append(_negative_error("NEGATIVE_SUBTOTAL", "Receipt subtotal cannot be negative", receipt.subtotal))
    if receipt.tax < 0:
        errors.append(_negative_error("NEGATIVE_TAX", "Receipt tax cannot be negative", receipt.tax))
    if receipt.tip is not None and receipt.tip < 0:
        errors.append(_negative_error("NEGATIVE_TIP", "Receipt tip cannot be negative", receipt.tip))
    if receipt.total < 0:
        errors.append(_negative_error("NEGATIVE_TOTAL", "Receipt total cannot be negative", receipt.total))

    # 2. Item amounts
    for index, item in enumerate(receipt.items):
        if item.price < 0:
            errors.append(_negative_error(
                "NEGATIVE_ITEM_PRICE",
                f'Item "{item.name}" has negative price',
                item.price,
                item_id=str(index),
                item_name=item.name
            ))
        if item.quantity < 0:
            errors.append(_negative_error(
                "NEGATIVE_ITEM_QUANTITY",
                f'Item "{item.name}" has negative quantity',
                item.quantity,
                item_id=str(index),
                item_name=item.name
            ))

    # 3. Items sum to subtotal
    if receipt.items:
        items_total = sum(
            (to_decimal(item.price) * to_decimal(item.quantity or 1) for item in receipt.items),
            Decimal(0)
        )
        subtotal = to_decimal(receipt.subtotal)
        difference = abs(items_total - subtotal)
        tolerance = deviation * len(receipt.items)

        if _exceeds_tolerance(difference, tolerance):
            errors.append(schemas.ReceiptValidationError(
                type="ITEMS_SUBTOTAL_MISMATCH",
                message="Sum of item prices does not match subtotal",
                expected=float(subtotal),
                actual=float(items_total),
                diff=float(difference),
                tolerance=float(tolerance)
            ))

    # 4. Each assigned item's splits sum to its price
    for index, item in enumerate(receipt.items):
        item_assignments = assignments.get(index, [])
        if not item_assignments:
            continue

        total_item_price = to_decimal(item.price) * to_decimal(item.quantity or 1)
        splits_total = sum(
            (calculate_item_share(item, a.share_percentage) for a in item_assignments),
            Decimal(0)
        )
        difference = abs(splits_total - total_item_price)
        tolerance = deviation * len(item_assignments)

        if _exceeds_tolerance(difference, tolerance):
            errors.append(schemas.ReceiptValidationError(
                type="ITEM_SPLITS_MISMATCH",
                message=f'Sum of splits for item "{item.name}" does not match item price',
                item_id=str(index),
                item_name=item.name,
                expected=float(total_item_price),
                actual=float(splits_total),
                diff=float(difference),
                tolerance=float(tolerance)
            ))

    # 5. Person amounts
    for person in people:
        if person.total_before_tax < 0:
            errors.append(_negative_error(
                "NEGATIVE_PERSON_TOTAL",
                f'Person "{person.name}" has negative total before tax',
                person.total_before_tax
            ))
        if person.tax < 0:
            errors.append(_negative_error("NEGATIVE_PERSON_TAX", f'Person "{person.name}" has negative tax', person.tax))
        if person.tip < 0:
            errors.append(_negative_error("NEGATIVE_PERSON_TIP", f'Person "{person.name}" has negative tip', person.tip))
        if person.final_total < 0:
            errors.append(_negative_error(
                "NEGATIVE_PERSON_FINAL_TOTAL",
                f'Person "{person.name}" has negative final total',
                person.final_total
            ))

        for person_item in person.items:
            if person_item.amount < 0:
                errors.append(_negative_error(
                    "NEGATIVE_PERSON_ITEM_AMOUNT",
                    f'Person "{person.name}" has negative amount for item "{person_item.item_name}"',
                    person_item.amount,
                    item_id=str(person_item.item_id),
                    item_name=person_item.item_name
                ))

    return schemas.ReceiptValidationResult(is_valid=not errors, errors=errors)
