"""
Domain exceptions raised by the service layer

Routes let these propagate; the handlers registered in app.main turn them
into JSON error responses.
"""


class CarRentalError(Exception):
    """Base class for domain errors"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(CarRentalError):
    """A referenced entity does not exist"""
    status_code = 404


class InvalidStateError(CarRentalError):
    """Operation attempted from a disallowed lifecycle state"""
    status_code = 400


class ValidationError(CarRentalError):
    """The store rejected the input"""
    status_code = 400


class TransientStoreError(CarRentalError):
    """I/O failure against the database"""
    status_code = 503
