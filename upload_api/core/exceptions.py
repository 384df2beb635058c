# upload_api/core/exceptions.py

class AppError(Exception):
    def __init__(self, message: str, *, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


class NoFilesProvidedError(AppError):
    def __init__(self, message: str = "No files uploaded") -> None:
        super().__init__(message, status_code=400)


class TooManyFilesError(AppError):
    def __init__(self, max_files: int) -> None:
        super().__init__(f"Too many files: at most {max_files} per upload", status_code=400)
        self.max_files = max_files


class InvalidFileNameError(AppError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid file name: '{name}'", status_code=400)
        self.name = name


class StorageWriteError(AppError):
    def __init__(self, message: str = "Failed to store uploaded files") -> None:
        super().__init__(message, status_code=500)


class StorageConfigError(AppError):
    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=500)


class NotifierError(Exception):
    """Webhook delivery failed. Logged by the background notifier, never sent to clients."""
