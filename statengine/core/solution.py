"""
Shared accessors for user-facing solution wrappers.

Every domain Solution is a dataclass holding `_result: Result[...]`;
mixing in ResultAccessors exposes the envelope metadata uniformly.
"""

from typing import Any

from statengine.core.result import Result


class ResultAccessors:
    """Metadata properties of the wrapped Result."""

    _result: Result

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return self._result.has_warning(substring)


def format_pvalue(p: float) -> str:
    """Format a p-value for reports."""
    if p != p:
        return "NaN"
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"


def significance_stars(p: float | None) -> str:
    """Significance code for a p-value."""
    if p is None or p != p:
        return ""
    if p < 0.001:
        return "***"
    if p < 0.01:
        return "**"
    if p < 0.05:
        return "*"
    if p < 0.1:
        return "."
    return ""
