"""
Freelance Flow - Milestone Completion and Payment Workflow

Models a freelance project in which a client and a freelancer collaborate on
a single milestone. Completing the milestone determines the amount owed, the
chosen payment method transfers it and a receipt is appended to a durable log.
"""

__version__ = "0.1.0"
__author__ = "Freelance Flow Team"
