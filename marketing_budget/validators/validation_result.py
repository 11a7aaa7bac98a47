"""Validation result for collecting and formatting budget validation issues."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class ValidationIssue:
    """Represents a single failed validation rule.

    Attributes:
        rule: Identifier of the rule that failed (e.g. "address_required")
        message: Human-readable description of the problem
    """

    rule: str
    message: str

    def __str__(self) -> str:
        """Return string representation of the issue.

        Returns:
            Formatted string with rule and message
        """
        return f"[{self.rule}] {self.message}"


@dataclass
class ValidationResult:
    """Collects the issues found while validating a budget.

    A result without errors is valid. Rules append to the result instead of
    raising, so every failing rule is reported at once.

    Example:
        >>> result = ValidationResult()
        >>> result.add_error("address_required", "Property address is required.")
        >>> result.is_valid
        False
        >>> result.messages
        ['Property address is required.']
    """

    errors: List[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when no rule failed."""
        return not self.errors

    @property
    def error_count(self) -> int:
        """Number of failed rules."""
        return len(self.errors)

    @property
    def messages(self) -> List[str]:
        """Error messages in rule order."""
        return [issue.message for issue in self.errors]

    def add_error(self, rule: str, message: str) -> None:
        """Add a failed rule to the result.

        Args:
            rule: Identifier of the failed rule
            message: Human-readable error description
        """
        self.errors.append(ValidationIssue(rule=rule, message=message))

    def merge(self, other: "ValidationResult") -> None:
        """Merge another validation result into this one.

        Args:
            other: Another ValidationResult to merge
        """
        self.errors.extend(other.errors)

    def summary(self) -> str:
        """Get a one-line summary of the result."""
        if self.is_valid:
            return "No issues found"
        return f"{self.error_count} error(s)"

    def format(self) -> str:
        """Format the validation result for display.

        Returns:
            Formatted string with all issues
        """
        if self.is_valid:
            return "Validation successful - no issues found"

        lines = [f"Validation Result - {self.summary()}", "=" * 60]
        for issue in self.errors:
            lines.append(f"  - {issue}")
        return "\n".join(lines)
