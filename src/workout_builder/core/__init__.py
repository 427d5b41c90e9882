"""Core utilities shared across layers."""

from workout_builder.core.result import Result

__all__ = ["Result"]
