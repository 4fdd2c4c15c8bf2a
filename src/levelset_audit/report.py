"""Report formatting for audit results."""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from .core.types import ArchiveReportEntry, AssetRef, AuditReport, ReportEntry

if TYPE_CHECKING:
    from .pipeline import AuditResult


def format_missing(ref: AssetRef) -> str:
    """Format a missing asset as "not-found:<kind>:<path>:<parent or _>"."""
    return f"not-found:{ref.kind.value}:{ref.path}:{ref.parent_path or '_'}"


def report_entry(ref: AssetRef) -> ReportEntry:
    return {"kind": ref.kind.value, "path": ref.path, "parent": ref.parent_path}


def report_entries(refs: Iterable[AssetRef]) -> list[ReportEntry]:
    return [report_entry(ref) for ref in refs]


def build_report(result: "AuditResult") -> AuditReport:
    """Build the JSON-serializable report of an audit.

    Args:
        result: Result of AuditPipeline.run()

    Returns:
        Dictionary conforming to schemas/audit_report.schema.json
    """
    archive: list[ArchiveReportEntry] = [
        {"source": entry.source, "name": entry.name} for entry in result.archive_entries
    ]

    return {
        "set_file": result.set_path,
        "base_dir": result.base_dir,
        "addon_dir": result.addon_dir,
        "ok": result.ok,
        "found": report_entries(result.outcome.found),
        "missing": report_entries(result.outcome.missing),
        "archive": archive,
    }
