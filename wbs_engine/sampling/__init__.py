"""Sample data generation."""

from .generator import WorkItemGenerator

__all__ = ['WorkItemGenerator']
