"""Grouping and summaries of validation findings."""

from pydantic import BaseModel, ConfigDict, Field

from spaceweirdos.models.validation import ValidationCategory, ValidationError, ValidationSeverity


class ErrorGrouping(BaseModel):
    """Validation findings indexed three ways."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    by_category: dict[ValidationCategory, list[ValidationError]] = Field(
        default_factory=lambda: {category: [] for category in ValidationCategory},
        description="Findings per validation level",
    )
    by_severity: dict[ValidationSeverity, list[ValidationError]] = Field(
        default_factory=lambda: {severity: [] for severity in ValidationSeverity},
        description="Findings per severity",
    )
    by_field: dict[str, list[ValidationError]] = Field(default_factory=dict, description="Findings per field path")


def group_errors(records: list[ValidationError]) -> ErrorGrouping:
    """Group findings by category, severity and field, keeping input order in each group."""
    by_category: dict[ValidationCategory, list[ValidationError]] = {category: [] for category in ValidationCategory}
    by_severity: dict[ValidationSeverity, list[ValidationError]] = {severity: [] for severity in ValidationSeverity}
    by_field: dict[str, list[ValidationError]] = {}

    for record in records:
        by_category[record.category].append(record)
        by_severity[record.severity].append(record)
        if record.field:
            by_field.setdefault(record.field, []).append(record)

    return ErrorGrouping(by_category=by_category, by_severity=by_severity, by_field=by_field)


def _count(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


def generate_error_summary(records: list[ValidationError]) -> str:
    """One-line summary such as '2 errors, 1 warning found.'"""
    if not records:
        return "No errors found."

    grouping = group_errors(records)
    parts = []
    error_count = len(grouping.by_severity[ValidationSeverity.ERROR])
    warning_count = len(grouping.by_severity[ValidationSeverity.WARNING])
    if error_count:
        parts.append(_count(error_count, "error"))
    if warning_count:
        parts.append(_count(warning_count, "warning"))
    return ", ".join(parts) + " found."
