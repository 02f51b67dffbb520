#!/usr/bin/env python3
"""
Demo Scenarios - Freelance Flow

Runs the fixed demonstration scenarios:
- Fixed-price milestone paid through escrow (succeeds, writes a receipt)
- Hourly milestone given negative hours (rejected before the workflow starts)

Optionally builds and runs one more project from a YAML file.

Run: python examples/demo_scenarios.py [project.yaml]
"""

import sys
from decimal import Decimal

from freelance_flow.builder import build_project, load_project_file
from freelance_flow.config.loader import ConfigLoader
from freelance_flow.engine import WorkflowEngine
from freelance_flow.errors import DomainError, InvalidHoursError
from freelance_flow.logging import configure_logging
from freelance_flow.milestones import FixedPriceMilestone, HourlyMilestone
from freelance_flow.models import Client, Freelancer
from freelance_flow.payments import DirectPayment, EscrowPayment
from freelance_flow.receipts import ReceiptSink, create_receipt_sink


def run_fixed_price_demo(sink: ReceiptSink) -> None:
    """Fixed-price milestone paid through escrow."""
    print("\n--- Demo 1: Fixed Price ---")
    client = Client("John Smith", "john@company.com", company_name="TechCorp")
    freelancer = Freelancer("Alice Johnson", "alice@freelance.com",
                            skill_set="Python Development", hourly_rate=Decimal("75"))
    milestone = FixedPriceMilestone("Website", "Full stack",
                                    EscrowPayment(Decimal("2500.00")), Decimal("2500.00"))

    WorkflowEngine("E-Commerce Website", client, freelancer, milestone, sink).run()


def run_invalid_hours_demo(sink: ReceiptSink) -> None:
    """Hourly milestone rejected at the setter; the workflow never starts."""
    print("\n--- Demo 2: Exception Handling ---")
    client = Client("Test Client", "test@test.com", company_name="TestCo")
    freelancer = Freelancer("Test Freelancer", "test@free.com",
                            skill_set="Testing", hourly_rate=Decimal("50"))
    milestone = HourlyMilestone("Test Milestone", "Testing exceptions",
                                DirectPayment(), Decimal("50"))

    try:
        milestone.set_hours_worked(Decimal("-5"))
    except InvalidHoursError as e:
        print(f"Caught expected exception: {e}")
        return

    WorkflowEngine("Test Project", client, freelancer, milestone, sink).run()


def run_project_file(path: str, sink: ReceiptSink, default_payment_kind: str) -> None:
    """Build and run a project described in a YAML file."""
    print(f"\n--- Custom Project: {path} ---")
    try:
        engine = build_project(load_project_file(path), sink, default_payment_kind)
    except (DomainError, OSError) as e:
        print(f"Invalid project input. Aborting: {e}")
        return

    engine.run()


def main() -> None:
    """Run all demo scenarios."""
    config = ConfigLoader.create().merge_config()
    configure_logging(**config["logging"])
    sink = create_receipt_sink(config["receipts"])

    print("=== Freelance Workflow Engine ===")
    run_fixed_price_demo(sink)
    run_invalid_hours_demo(sink)

    if len(sys.argv) > 1:
        run_project_file(sys.argv[1], sink, config["workflow"]["default_payment_kind"])


if __name__ == "__main__":
    main()
