class AppException(Exception):
    def __init__(self, code: str, message: str, status_code: int = 400):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotFoundException(AppException):
    def __init__(self, code: str, message: str):
        super().__init__(code, message, status_code=404)


class InvalidArgumentException(AppException):
    def __init__(self, message: str, argument: str | None = None):
        super().__init__("INVALID_ARGUMENT", message, status_code=400)
        self.argument = argument
