"""Cliente Python para a REST API da Netmera.

Uso:
    from netmera import FutureCallback, NetmeraApiBuilder
    from netmera.models import AddTagToUsersRequest

    with NetmeraApiBuilder("https://restapi.netmera.com", api_key).build() as api:
        callback = FutureCallback()
        api.send_request(AddTagToUsersRequest(tag="vip", ext_ids=["u-1"]), callback)
        callback.result(timeout=30)
"""

from netmera.api.errors import ErrorBody
from netmera.api.http import RetryPolicy, TransportConfig, create_connection_pool
from netmera.app.bootstrap import NetmeraApiBuilder, create_netmera_client
from netmera.app.callback import FunctionCallback, FutureCallback, NetmeraCallback
from netmera.app.dispatcher import NetmeraDispatcher
from netmera.app.protocols import NetmeraProtocol
from netmera.utils.errors import (
    CallbackAlreadyInvokedError,
    ConfigurationError,
    NetmeraApiError,
    NetmeraException,
    RequestValidationError,
    ResponseDecodeError,
    TransportFailure,
)

__version__ = "0.1.0"

__all__ = [
    "CallbackAlreadyInvokedError",
    "ConfigurationError",
    "ErrorBody",
    "FunctionCallback",
    "FutureCallback",
    "NetmeraApiBuilder",
    "NetmeraApiError",
    "NetmeraCallback",
    "NetmeraDispatcher",
    "NetmeraException",
    "NetmeraProtocol",
    "RequestValidationError",
    "ResponseDecodeError",
    "RetryPolicy",
    "TransportConfig",
    "TransportFailure",
    "__version__",
    "create_connection_pool",
    "create_netmera_client",
]
