"""
Logging configuration and utilities for the freelance workflow.
"""
from .config import configure_logging, get_logger, get_workflow_logger

__all__ = ["configure_logging", "get_logger", "get_workflow_logger"]
