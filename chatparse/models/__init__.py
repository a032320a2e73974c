"""Data models for parse results."""

from .base import Category, ClassificationResult
from .result import Failure, Link, Result

__all__ = ["Category", "ClassificationResult", "Failure", "Link", "Result"]
