"""Run artifacts: state list, CSV map and JSON report."""

from .report import build_report, write_report
from .sink import AuditSink

__all__ = ["AuditSink", "build_report", "write_report"]
