"""Domain layer — durations, adjustments, dosimetry, and reports.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
