"""Infrastructure layer errors.

Provider and cache failures are raised as domain errors directly, since the
login flow branches on them. Errors here never leave the adapter's caller.
"""


class AdapterError(Exception):
    """Base infrastructure error."""


class FileServiceError(AdapterError):
    """Image download or upload failed.

    Only raised into the avatar pipeline, which treats it as "no avatar".
    """
