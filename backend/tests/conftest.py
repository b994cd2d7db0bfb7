import pytest
from fastapi.testclient import TestClient

from main import app
import schemas


@pytest.fixture(scope="function")
def client():
    """Create a FastAPI TestClient for the app."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def receipt():
    """Burger and two fries with a $100 subtotal, $10 tax and $15 tip."""
    return schemas.Receipt(
        restaurant="Test Restaurant",
        date="2023-01-01",
        subtotal=100,
        tax=10,
        tip=15,
        total=125,
        items=[
            schemas.ReceiptItem(name="Burger", price=50, quantity=1),
            schemas.ReceiptItem(name="Fries", price=25, quantity=2),
        ]
    )


@pytest.fixture
def people():
    """Two people with no items or totals yet."""
    return [
        schemas.Person(id="a", name="Alice"),
        schemas.Person(id="b", name="Bob"),
    ]


def assign(*shares):
    """Build an assignment list from (person_id, share_percentage) pairs."""
    return [
        schemas.PersonItemAssignment(person_id=person_id, share_percentage=share)
        for person_id, share in shares
    ]
