"""
Configuration defaults, loading and validation for the freelance workflow.
"""
