"""Error taxonomy shared by services, adapters and the HTTP layer."""


class NutriTrackError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code = 500


class ClientInputError(NutriTrackError):
    """A required field is missing or an input is malformed."""

    status_code = 400


class NotFoundError(NutriTrackError):
    """No record matches the request."""

    status_code = 404


class ConflictError(NutriTrackError):
    """A write violated a unique key."""

    status_code = 409


class UpstreamServiceError(NutriTrackError):
    """The external file host failed or answered unexpectedly."""

    status_code = 500


class StoreError(NutriTrackError):
    """A document store fault not otherwise classified."""

    status_code = 500
