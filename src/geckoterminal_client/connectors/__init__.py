"""Transport adapters implementing IHttpClient."""

from .aiohttp_client import AiohttpClient

__all__ = ["AiohttpClient"]
