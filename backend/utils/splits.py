"""Split calculation utilities for itemized receipts."""

from decimal import Decimal

import schemas
from utils.currency import to_decimal


def calculate_item_share(item: schemas.ReceiptItem, share_percentage: float) -> Decimal:
    """Exact amount owed for share_percentage of an item's line total (price x quantity)."""
    total_item_price = to_decimal(item.price) * to_decimal(item.quantity or 1)

    # $0 items are assigned $0 without calculation
    if total_item_price.is_zero():
        return Decimal(0)
    return total_item_price * to_decimal(share_percentage) / 100


def calculate_person_totals(
    receipt: schemas.Receipt,
    people: list[schemas.Person],
    assignments: schemas.AssignmentMap
) -> list[schemas.Person]:
    """
    Calculate each person's items, pre-tax total, tax, tip and final total.

    Algorithm:
    1. For each person, walk the assignment map and collect their share of each item
    2. Sum the shares into the person's pre-tax total
    3. Distribute tax/tip proportionally to pre-tax total / receipt subtotal
    4. Return new Person records; the input list is left untouched

    All intermediate sums are Decimal; values are converted to float only when
    the result records are built. Stale item indices and people without
    assignments simply produce zero totals.
    """
    subtotal = to_decimal(receipt.subtotal)
    tax = to_decimal(receipt.tax)
    tip = to_decimal(receipt.tip)

    updated_people = []
    for person in people:
        person_items = []
        total_before_tax = Decimal(0)

        for item_index, item_assignments in assignments.items():
            if item_index < 0 or item_index >= len(receipt.items):
                continue
            item = receipt.items[item_index]

            # Find this person's assignment for this item
            assignment = next(
                (a for a in item_assignments if a.person_id == person.id),
                None
            )
            if assignment is None:
                continue

            person_share = calculate_item_share(item, assignment.share_percentage)
            total_before_tax += person_share

            person_items.append(schemas.PersonItem(
                item_id=item_index,
                item_name=item.name,
                original_price=item.price,
                quantity=item.quantity or 1,
                share_percentage=assignment.share_percentage,
                amount=float(person_share)
            ))

        person_tax = Decimal(0)
        person_tip = Decimal(0)

        if not subtotal.is_zero():
            proportion = total_before_tax / subtotal
            person_tax = tax * proportion
            person_tip = tip * proportion

        final_total = total_before_tax + person_tax + person_tip

        updated_people.append(person.model_copy(update={
            "items": person_items,
            "total_before_tax": float(total_before_tax),
            "tax": float(person_tax),
            "tip": float(person_tip),
            "final_total": float(final_total),
        }))

    return updated_people
