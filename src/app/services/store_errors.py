"""Store error taxonomy

Exceptions raised by repositories and the connection manager. Use cases
translate them into coded Result errors; they never reach the HTTP layer.
"""


class StoreError(Exception):
    """Base class for failures talking to the invoice store"""

    code = "STORE_ERROR"


class StoreConnectionError(StoreError):
    """The store is unreachable or the connection attempt failed"""

    code = "STORE_UNAVAILABLE"


class StoreTimeoutError(StoreError):
    """A query exceeded its time budget"""

    code = "QUERY_TIMEOUT"


class StoreQueryError(StoreError):
    """A query failed for a reason other than connectivity or timeout"""

    code = "STORE_QUERY_FAILED"
