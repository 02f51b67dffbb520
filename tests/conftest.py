"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from freelance_flow.milestones import FixedPriceMilestone, HourlyMilestone
from freelance_flow.models import Client, Freelancer
from freelance_flow.payments import DirectPayment, EscrowPayment
from freelance_flow.receipts import FileReceiptSink

FIXED_TIME = datetime(2024, 3, 1, 12, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """Clock returning a constant timestamp."""
    return lambda: FIXED_TIME


@pytest.fixture
def client() -> Client:
    """Sample client."""
    return Client("John Smith", "john@company.com", company_name="TechCorp")


@pytest.fixture
def freelancer() -> Freelancer:
    """Sample freelancer."""
    return Freelancer(
        "Alice Johnson",
        "alice@freelance.com",
        skill_set="Python Development",
        hourly_rate=Decimal("75"),
    )


@pytest.fixture
def fixed_milestone() -> FixedPriceMilestone:
    """Pending fixed-price milestone paid through escrow."""
    return FixedPriceMilestone(
        "Website", "Full stack", EscrowPayment(Decimal("2500.00")), Decimal("2500.00")
    )


@pytest.fixture
def hourly_milestone() -> HourlyMilestone:
    """Pending hourly milestone with a zero-amount direct payment placeholder."""
    return HourlyMilestone("API Integration", "Payment gateway", DirectPayment(), Decimal("80"))


@pytest.fixture
def receipt_path(tmp_path):
    """Path of the receipt log inside a temporary directory."""
    return tmp_path / "receipts" / "payment_receipts.txt"


@pytest.fixture
def file_sink(receipt_path, fixed_clock) -> FileReceiptSink:
    """File receipt sink writing into a temporary directory."""
    return FileReceiptSink(receipt_path, clock=fixed_clock)


@pytest.fixture
def sample_project_data():
    """Raw project input as it would be parsed from YAML."""
    return {
        "project_name": "Data Pipeline Migration",
        "client": {"name": "Maria Lopez", "email": "maria@datacorp.example", "company": "DataCorp"},
        "freelancer": {
            "name": "Sam Lee",
            "email": "sam@freelance.example",
            "skills": "Python, Airflow",
            "hourly_rate": "80",
        },
        "milestone": {
            "title": "Migrate ingestion jobs",
            "description": "Port nightly jobs",
            "type": "hourly",
            "hours_worked": "12.5",
        },
        "payment": "direct",
    }
