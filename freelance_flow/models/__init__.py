"""
Participant models for the freelance workflow.
"""

from .parties import Client, Freelancer, Party, PartyRole

__all__ = ["Client", "Freelancer", "Party", "PartyRole"]
