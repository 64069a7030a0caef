"""
Configuration loading and validation for settings.

Provides strongly typed settings objects for comparison tolerances and
display precision, loaded from environment variables with upfront validation.
"""
