"""HTTP utilities package.

Exposes pooled httpx clients and the request header builder.
"""

from .client import get_httpx_client, close_all_clients
from .headers import build_headers

__all__ = ["get_httpx_client", "close_all_clients", "build_headers"]
