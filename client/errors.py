class ClientError(Exception):
    pass


class ApiError(ClientError):
    """The router answered with an error envelope."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class TransientNetworkError(ClientError):
    pass


class RetryExhaustedError(ClientError):
    def __init__(self, attempts, last_error):
        super().__init__(f"API call failed after {attempts} attempts: {last_error}")
        self.attempts = attempts
        self.last_error = last_error
