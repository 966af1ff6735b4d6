"""
Shared testing utilities for Adresse components.

Provides standardized test structure:
- LaborantTest: Base class for all tests
- Test result models and JSON output markers

All tests MUST inherit from LaborantTest.
"""

from shared.tests.models import (
    SCHEMA_VERSION,
    CaseResult,
    ResultStatus,
    SuiteResult,
    format_output,
)
from shared.tests.test_base import LaborantTest

__all__ = [
    "LaborantTest",
    "ResultStatus",
    "CaseResult",
    "SuiteResult",
    "SCHEMA_VERSION",
    "format_output",
]
