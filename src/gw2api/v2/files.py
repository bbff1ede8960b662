from .base import BulkEndpoint


class File(BulkEndpoint):
    """A commonly requested in-game asset."""

    path = "/v2/files"
    id_type = str

    id: str
    icon: str
