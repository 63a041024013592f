"""Parameter validation against documented GeckoTerminal API limits.

The ``check_*`` functions are pure: each returns the list of issues found
and never raises or logs. ``ParameterValidator`` decides what happens to
those issues: they are always logged and forwarded to an optional callback,
and in strict mode the call is rejected before any request is sent.
"""

import enum
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Literal

from geckoterminal_client import limits
from geckoterminal_client.config.value_objects import ValidationMode
from geckoterminal_client.exceptions import ParameterValidationError
from geckoterminal_client.infrastructure.observability import get_validation_logger

Severity = Literal["warning", "error"]


class IncludeCategory(str, enum.Enum):
    """Include-list families; each owns the related resources it may expand."""

    POOL = "pool"
    NETWORK_POOL = "network_pool"
    TOKEN = "token"
    TOKEN_INFO = "token_info"

    @property
    def allowed(self) -> tuple[str, ...]:
        return _ALLOWED_INCLUDES[self]


_ALLOWED_INCLUDES = {
    IncludeCategory.POOL: limits.POOL_INCLUDES,
    IncludeCategory.NETWORK_POOL: limits.NETWORK_POOL_INCLUDES,
    IncludeCategory.TOKEN: limits.TOKEN_INCLUDES,
    IncludeCategory.TOKEN_INFO: limits.TOKEN_INFO_INCLUDES,
}


@dataclass(frozen=True)
class ValidationIssue:
    """One violated limit."""

    check: str
    message: str
    value: Any = None
    severity: Severity = "warning"


def check_page(page: int, max_page: int = limits.MAX_PAGE) -> list[ValidationIssue]:
    if page > max_page:
        return [ValidationIssue("page", f"page must be at most {max_page}", page)]
    return []


def check_addresses(
    addresses: Sequence[str], max_addresses: int = limits.MAX_ADDRESSES
) -> list[ValidationIssue]:
    if len(addresses) > max_addresses:
        return [
            ValidationIssue(
                "addresses",
                f"at most {max_addresses} addresses are allowed, got {len(addresses)}",
                len(addresses),
            )
        ]
    return []


def check_include(
    include: Iterable[str], category: IncludeCategory | str
) -> list[ValidationIssue]:
    """One issue per include value the category does not recognise.

    Raises:
        ValueError: If ``category`` is a string naming no known category
    """
    category = IncludeCategory(category)
    allowed = category.allowed
    return [
        ValidationIssue(
            "include",
            f"{value} not in {list(allowed)} for {category.value} includes",
            value,
        )
        for value in include
        if value not in allowed
    ]


def check_timeframe(timeframe: str) -> list[ValidationIssue]:
    if timeframe not in limits.TIMEFRAMES:
        return [
            ValidationIssue(
                "timeframe", f"timeframe not in {list(limits.TIMEFRAMES)}", timeframe
            )
        ]
    return []


def check_aggregate(aggregate: int, timeframe: str) -> list[ValidationIssue]:
    allowed = limits.AGGREGATES_BY_TIMEFRAME.get(timeframe)
    if allowed is None:
        return [
            ValidationIssue(
                "aggregate",
                f"invalid timeframe {timeframe}, cannot check aggregate",
                timeframe,
                severity="error",
            )
        ]
    if aggregate not in allowed:
        return [
            ValidationIssue(
                "aggregate",
                f"aggregate not in {list(allowed)} for timeframe {timeframe}",
                aggregate,
            )
        ]
    return []


def check_ohlcv_limit(
    limit: int, max_limit: int = limits.OHLCV_LIMIT
) -> list[ValidationIssue]:
    if limit > max_limit:
        return [ValidationIssue("limit", f"limit must be at most {max_limit}", limit)]
    return []


def check_currency(currency: str) -> list[ValidationIssue]:
    if currency not in limits.CURRENCIES:
        return [
            ValidationIssue(
                "currency", f"currency not in {list(limits.CURRENCIES)}", currency
            )
        ]
    return []


def check_token(token: str) -> list[ValidationIssue]:
    if token not in limits.TOKENS:
        return [ValidationIssue("token", f"token not in {list(limits.TOKENS)}", token)]
    return []


class ParameterValidator:
    """Reports validation issues and enforces the configured mode."""

    def __init__(
        self,
        mode: ValidationMode = ValidationMode.ADVISORY,
        on_issue: Callable[[ValidationIssue], None] | None = None,
    ):
        """
        Args:
            mode: ADVISORY logs and lets the call proceed, STRICT rejects it
            on_issue: Optional diagnostic callback receiving every issue
        """
        self.mode = ValidationMode(mode)
        self.on_issue = on_issue
        self._log = get_validation_logger(mode=self.mode.value)

    def report(self, issues: Iterable[ValidationIssue], endpoint: str | None = None):
        """Log and forward issues; raise in strict mode.

        Raises:
            ParameterValidationError: In strict mode, if any issue was found
        """
        issues = list(issues)
        for issue in issues:
            log_method = self._log.error if issue.severity == "error" else self._log.warning
            log_method(
                "parameter_validation_issue",
                check=issue.check,
                value=issue.value,
                detail=issue.message,
                endpoint=endpoint,
            )
            if self.on_issue is not None:
                self.on_issue(issue)

        if issues and self.mode is ValidationMode.STRICT:
            raise ParameterValidationError(issues)
        return issues
