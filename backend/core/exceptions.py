class AppError(Exception):
    """Base class for errors reported to the client as {"message": ...}."""

    status_code: int = 400

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class UnauthorizedError(AppError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class ValidationError(AppError):
    status_code = 400


class NotFoundError(AppError):
    status_code = 404


# Both are reported as 400 to keep the response codes clients already rely on.
class TableNotFoundError(AppError):
    status_code = 400

    def __init__(self, table_number: int) -> None:
        self.table_number = table_number
        super().__init__(f"Table {table_number} not found")


class SlotConflictError(AppError):
    status_code = 400

    def __init__(self, table_number: int, date: str) -> None:
        self.table_number = table_number
        self.date = date
        super().__init__(f"Table {table_number} is already reserved for the requested time slot on {date}")


class TableNumberTakenError(AppError):
    status_code = 400

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"Table number {number} already exists")


class StoreUnavailableError(AppError):
    status_code = 500

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)
