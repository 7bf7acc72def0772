from .errors import ApiError, TransientNetworkError, RetryExhaustedError
from .retry import RetryPolicy, attempt_with_retry, SUBMIT_POLICY
from .api import MealApiClient
from .view import ViewController
