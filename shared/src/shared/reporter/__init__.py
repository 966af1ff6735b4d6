"""
Reporting utilities shared by Adresse components.
"""

from shared.reporter.system_reporter import SystemReporter

__all__ = ["SystemReporter"]
