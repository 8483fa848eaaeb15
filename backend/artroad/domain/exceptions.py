class ContentError(Exception):
    """
    Base class for errors surfaced to API callers as `{error, code}`.

    Subclasses pin the HTTP status; the code is a stable, machine-readable
    string chosen at the raise site.
    """

    status_code = 400

    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.message = message
        self.code = code

    def to_dict(self):
        return {"error": self.message, "code": self.code}


class ValidationError(ContentError):
    status_code = 400


class NotFoundError(ContentError):
    status_code = 404


class DuplicateKeyError(ContentError):
    # Settings insert path answers 400, not 409
    status_code = 400

    def __init__(self, message: str = "Setting with this key already exists"):
        super().__init__(message, "DUPLICATE_KEY")


class ConflictError(ContentError):
    status_code = 409


class AuthError(ContentError):
    status_code = 401


class ForbiddenError(ContentError):
    status_code = 403
