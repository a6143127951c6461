"""
Per-phase query deadlines.

A Deadline is started when a phase begins (count, primary fetch or
relation hydration). `apply()` pushes the remaining budget to PostgreSQL
as a transaction-local statement_timeout so the server cancels
statements that run past it; `check()` refuses to start a new statement
once the budget is spent.
"""

import time
from dataclasses import dataclass

from sqlalchemy import text
from sqlalchemy.orm import Session


class QueryDeadlineExceeded(TimeoutError):
    """Raised when a query phase runs out of time before issuing a statement."""
    pass


@dataclass(frozen=True)
class QueryTimeouts:
    """Per-phase budgets in seconds."""
    count: float = 5.0
    fetch: float = 10.0
    hydrate: float = 15.0


class Deadline:
    """
    Monotonic time budget for one query phase.

    Usage:
        deadline = Deadline(10.0, "articles fetch")
        deadline.apply(session)
        ...
        deadline.check()
    """

    def __init__(self, seconds: float, label: str = "query"):
        self.seconds = seconds
        self.label = label
        self.expires_at = time.monotonic() + seconds

    def remaining(self) -> float:
        """Seconds left before the deadline (never negative)."""
        return max(self.expires_at - time.monotonic(), 0.0)

    def expired(self) -> bool:
        return self.remaining() <= 0.0

    def check(self) -> None:
        """
        Raises:
            QueryDeadlineExceeded: If the budget is already spent
        """
        if self.expired():
            raise QueryDeadlineExceeded(
                f"{self.label} exceeded its {self.seconds:g}s deadline"
            )

    def apply(self, session: Session) -> None:
        """
        Bind the remaining budget to the session's current transaction.

        Only PostgreSQL understands statement_timeout; on other dialects
        this just checks the budget.
        """
        self.check()
        if session.get_bind().dialect.name != "postgresql":
            return
        timeout_ms = max(int(self.remaining() * 1000), 1)
        session.execute(
            text("SELECT set_config('statement_timeout', :timeout, true)"),
            {"timeout": str(timeout_ms)},
        )

