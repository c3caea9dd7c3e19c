class RegistrationError(Exception):
    """Base class for failures that end a submission request.

    ``message`` is what the caller sees; anything more detailed belongs in the
    server log only.
    """

    kind = "registration"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RegistrationError, ValueError):
    kind = "validation"


class ConfigurationError(RegistrationError):
    kind = "configuration"


class UpstreamError(RegistrationError):
    kind = "upstream"

    def __init__(self, message: str, upstream_status: int | None = None, upstream_body: str = ""):
        super().__init__(message)
        self.upstream_status = upstream_status
        self.upstream_body = upstream_body
