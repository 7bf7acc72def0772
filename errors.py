class MealRegisterError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class InvalidRequest(MealRegisterError):
    status_code = 400


# A missing table is reported as a server fault, not a 404.
class NotFound(MealRegisterError):
    status_code = 500


class ServerFault(MealRegisterError):
    status_code = 500
