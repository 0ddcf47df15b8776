"""
Login Policy

Failed-login lockout rules. Limits come from settings; time comes from
the injected clock.
"""

from datetime import datetime, timedelta

from storefront.core.interfaces.clock import IClock
from storefront.core.shared.clock import SystemClock

from ..entities.user import User

DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_LOCKOUT_DURATION = timedelta(hours=2)


class LoginPolicy:
    """
    Lockout rules for password authentication.

    Example:
        ```python
        policy = LoginPolicy(max_attempts=5, lockout_duration=timedelta(hours=2), clock=clock)
        user.increment_login_attempts()
        if policy.should_lock(user):
            user.lock_account(policy.lockout_until())
        ```
    """

    def __init__(
        self,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        lockout_duration: timedelta = DEFAULT_LOCKOUT_DURATION,
        clock: IClock | None = None,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts
        self.lockout_duration = lockout_duration
        self.clock = clock or SystemClock()

    def should_lock(self, user: User) -> bool:
        return user.login_attempts >= self.max_attempts

    def lockout_until(self) -> datetime:
        return self.clock.add_time(self.clock.now(), self.lockout_duration)

    def remaining_lockout(self, user: User) -> timedelta:
        """Time left until the account unlocks; zero when not locked."""
        if user.locked_until is None or not user.is_account_locked():
            return timedelta(0)
        return max(timedelta(0), user.locked_until - self.clock.now())
