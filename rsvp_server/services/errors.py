"""Service-layer errors.

Services raise these; the application turns them into JSON error
responses (see ``rsvp_server.main``).
"""


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(ServiceError):
    """Lookup by guest number found nothing."""
    status_code = 404


class ValidationError(ServiceError):
    """Missing or malformed input."""
    status_code = 400


class StorageError(ServiceError):
    """The database is unreachable or rejected a write."""
    status_code = 500


class CapacityExceeded(ServiceError):
    """The invitation link already has the maximum number of devices."""
    status_code = 403

    def __init__(self, message: str, device_count: int):
        super().__init__(message)
        self.device_count = device_count
