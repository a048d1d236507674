"""
Пользовательская иерархия исключений приложения.
"""


class AppException(Exception):
    def __init__(self, detail: str, error_code: str | None = None):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code


class NotFoundException(AppException):
    def __init__(self, resource: str, identifier):
        super().__init__(f"{resource} с id {identifier} не найден", "NOT_FOUND")
        self.resource = resource
        self.identifier = identifier

