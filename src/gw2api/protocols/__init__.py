"""Protocol interfaces for the request executors.

Endpoint models only talk to a RequestExecutor, so the same model code
serves the asynchronous client and the blocking facade.

Usage:
    ```python
    from gw2api.protocols import RequestExecutor

    client: RequestExecutor = gw2api.Client()           # works
    client: RequestExecutor = gw2api.blocking.Client()  # also works
    ```
"""

from .executor import RequestExecutor

__all__ = [
    "RequestExecutor",
]
