# backend/app/services/errors.py


class AssessmentError(Exception):
    """Base class for failures surfaced by the assessment services"""


class ValidationError(AssessmentError):
    """Missing or malformed submission input"""


class ReferentialError(AssessmentError):
    """The submission references a user that does not exist"""


class StorageError(AssessmentError):
    """The database is unavailable or rejected the write"""
