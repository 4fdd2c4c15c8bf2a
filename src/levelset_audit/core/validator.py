"""Schema checks for the JSON audit report."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterator

from jsonschema import Draft202012Validator, ValidationError

from .types import AuditReport

SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "audit_report.schema.json"


@lru_cache(maxsize=1)
def load_schema() -> dict[str, Any]:
    """Load the bundled report schema.

    Raises:
        FileNotFoundError: If the schema file is not installed
        json.JSONDecodeError: If the schema file is not valid JSON
    """
    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def report_errors(report: AuditReport) -> Iterator[ValidationError]:
    """Yield every schema violation in a report."""
    yield from Draft202012Validator(load_schema()).iter_errors(report)


def validate_report(report: AuditReport) -> None:
    """Check a report against the schema.

    Raises:
        ValidationError: The first violation found
    """
    for error in report_errors(report):
        raise error
