import logging
import time
from dataclasses import dataclass
from typing import Callable

from .errors import TransientNetworkError, RetryExhaustedError

logger = logging.getLogger(__name__)


def exponential(attempt):
    return 2 ** attempt


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 3
    backoff: Callable[[int], float] = exponential

    def delays(self):
        """Seconds slept between attempts; nothing after the last one."""
        return [self.backoff(i) for i in range(self.max_attempts - 1)]


SUBMIT_POLICY = RetryPolicy()


def attempt_with_retry(fn, policy=SUBMIT_POLICY, sleep=time.sleep):
    """Call fn until it returns without TransientNetworkError.

    Other exceptions propagate immediately. When every attempt fails,
    RetryExhaustedError carries the last failure.
    """
    last_error = None
    for attempt in range(policy.max_attempts):
        try:
            return fn()
        except TransientNetworkError as e:
            last_error = e
            logger.warning("Attempt %d/%d failed: %s", attempt + 1, policy.max_attempts, e)
            if attempt < policy.max_attempts - 1:
                sleep(policy.backoff(attempt))
    raise RetryExhaustedError(policy.max_attempts, last_error)
