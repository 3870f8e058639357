class BlogError(Exception):
    """Base class for errors raised by the blog backend."""


class UploadError(BlogError):
    """A file upload could not be completed."""


class MissingFileError(UploadError):
    def __init__(self, message: str = "No file uploaded"):
        super().__init__(message)


class StorageError(UploadError):
    """Writing an uploaded file to the storage root failed."""


class PersistenceError(BlogError):
    """The database rejected or failed a read/write."""


class FormBusyError(BlogError):
    """A submit was attempted while the form was still uploading or saving."""


class InvalidPostError(BlogError):
    """The server rejected the post payload (4xx)."""
