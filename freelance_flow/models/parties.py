"""
Participant data models.

Parties carry identity data only. They are immutable and owned by the
workflow engine for the lifetime of one run.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from ..utils.money import to_decimal


class PartyRole(str, Enum):
    """Role a party plays in a project."""
    CLIENT = "client"
    FREELANCER = "freelancer"


@dataclass(frozen=True)
class Party(ABC):
    """Base identity shared by clients and freelancers."""

    name: str
    email: str

    @property
    @abstractmethod
    def role(self) -> PartyRole:
        """Role discriminator."""

    @property
    def label(self) -> str:
        """Display prefix derived from the role ("Client", "Freelancer")."""
        return self.role.value.capitalize()

    @abstractmethod
    def display_info(self) -> str:
        """Human-readable one-line description."""


@dataclass(frozen=True)
class Client(Party):
    """Party commissioning the work."""

    company_name: str = ""

    @property
    def role(self) -> PartyRole:
        return PartyRole.CLIENT

    def display_info(self) -> str:
        return f"{self.label}: {self.name} ({self.company_name}) - {self.email}"


@dataclass(frozen=True)
class Freelancer(Party):
    """Party delivering the work."""

    skill_set: str = ""
    hourly_rate: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        object.__setattr__(self, "hourly_rate", to_decimal(self.hourly_rate))
        if self.hourly_rate < 0:
            raise ValueError(f"hourly_rate cannot be negative, got {self.hourly_rate}")

    @property
    def role(self) -> PartyRole:
        return PartyRole.FREELANCER

    def display_info(self) -> str:
        return (
            f"{self.label}: {self.name} - Skills: {self.skill_set}"
            f" - Rate: ${self.hourly_rate}/hr - {self.email}"
        )
