from .base import BulkEndpoint


class Quaggan(BulkEndpoint):
    path = "/v2/quaggans"
    id_type = str

    id: str
    url: str
