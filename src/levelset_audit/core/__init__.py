"""Core types and utilities for level-set audits.

This package contains the asset reference model, the report type
definitions and report schema validation used across the auditor,
the packaging selector and the CLI.
"""

from .types import (
    ArchiveReportEntry,
    AssetBundle,
    AssetKind,
    AssetRef,
    AuditReport,
    ReportEntry,
)
from .validator import load_schema, report_errors, validate_report

__all__ = [
    "ArchiveReportEntry",
    "AssetBundle",
    "AssetKind",
    "AssetRef",
    "AuditReport",
    "ReportEntry",
    "validate_report",
    "load_schema",
    "report_errors",
]
