"""Unit tests for participant models."""

import dataclasses
from decimal import Decimal

import pytest

from freelance_flow.models import Client, Freelancer, Party, PartyRole


class TestParties:
    """Test suite for Client and Freelancer."""

    def test_client_display_info(self, client) -> None:
        """Test client summary line and role."""
        assert client.display_info() == "Client: John Smith (TechCorp) - john@company.com"
        assert client.role == PartyRole.CLIENT

    def test_freelancer_display_info(self, freelancer) -> None:
        """Test freelancer summary line and role."""
        info = freelancer.display_info()
        assert info.startswith("Freelancer: Alice Johnson - Skills: Python Development")
        assert "Rate: $75/hr" in info
        assert info.endswith("alice@freelance.com")
        assert freelancer.role == PartyRole.FREELANCER

    def test_display_prefix_follows_role(self, client, freelancer) -> None:
        """Test that the display prefix is derived from the party role."""
        assert client.label == "Client"
        assert freelancer.label == "Freelancer"
        assert client.display_info().startswith(f"{client.label}: ")
        assert freelancer.display_info().startswith(f"{freelancer.label}: ")

    def test_parties_are_immutable(self, client) -> None:
        """Test that parties cannot be modified after construction."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            client.name = "Someone Else"

    def test_freelancer_rate_coerced_to_decimal(self) -> None:
        """Test that a float hourly rate is stored as an exact Decimal."""
        freelancer = Freelancer("Bob", "bob@example.com", skill_set="Go", hourly_rate=62.5)
        assert freelancer.hourly_rate == Decimal("62.5")
        assert isinstance(freelancer.hourly_rate, Decimal)

    def test_negative_freelancer_rate_rejected(self) -> None:
        """Test that a negative hourly rate is rejected."""
        with pytest.raises(ValueError):
            Freelancer("Bob", "bob@example.com", skill_set="Go", hourly_rate=Decimal("-1"))

    def test_party_base_is_abstract(self) -> None:
        """Test that the Party base cannot be instantiated."""
        with pytest.raises(TypeError):
            Party("Nobody", "nobody@example.com")
