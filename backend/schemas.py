from pydantic import BaseModel
from typing import Optional

# Receipt schemas
class ReceiptItem(BaseModel):
    name: str
    price: float  # Per-unit price in major units
    quantity: int = 1

class Receipt(BaseModel):
    restaurant: Optional[str] = None
    date: Optional[str] = None
    subtotal: float = 0
    tax: float = 0
    tip: Optional[float] = None
    total: float = 0
    items: list[ReceiptItem] = []

# Assignment schemas
class PersonItemAssignment(BaseModel):
    person_id: str
    share_percentage: float  # 0-100

# item index (position in Receipt.items) -> assignments for that item
AssignmentMap = dict[int, list[PersonItemAssignment]]

# Person schemas
class PersonItem(BaseModel):
    item_id: int  # Index into Receipt.items
    item_name: str
    original_price: float
    quantity: int
    share_percentage: float
    amount: float

class Person(BaseModel):
    id: str
    name: str
    items: list[PersonItem] = []
    total_before_tax: float = 0
    tax: float = 0
    tip: float = 0
    final_total: float = 0

# Validation schemas
class ReceiptValidationError(BaseModel):
    type: str
    message: str
    item_id: Optional[str] = None
    item_name: Optional[str] = None
    expected: Optional[float] = None
    actual: Optional[float] = None
    diff: Optional[float] = None
    tolerance: Optional[float] = None

class ReceiptValidationResult(BaseModel):
    is_valid: bool
    errors: list[ReceiptValidationError] = []

# Currency schemas
class CurrencyInfo(BaseModel):
    code: str
    name: str
    symbol: str
    locale: str
    minor_units: int  # Decimal places, e.g. 2 for USD, 0 for JPY

class FormattedAmount(BaseModel):
    currency: str
    amount: float
    formatted: str
    minor_units: int  # Amount expressed in the currency's minor units


# Request/Response models for the splits router
class SplitCalculateRequest(BaseModel):
    receipt: Receipt
    people: list[Person]
    assignments: AssignmentMap = {}

class SplitCalculateResponse(BaseModel):
    people: list[Person]
    is_fully_assigned: bool
    unassigned_items: list[int]

class SplitValidateRequest(BaseModel):
    receipt: Receipt
    assignments: AssignmentMap = {}
    people: list[Person] = []

class SplitValidateResponse(BaseModel):
    is_fully_assigned: bool
    unassigned_items: list[int]
    invariants: ReceiptValidationResult
