from typing import Any, override

import requests

from lenny_corpus.utils.config import USER_AGENT

__all__ = ["HttpClient", "http_client"]

_CUSTOM_HEADERS = {"User-Agent": USER_AGENT}
# (connect, read) - the read timeout applies per chunk, not to the whole download
_HTTP_TIMEOUT = (15, 60)


class HttpClient(requests.Session):
    def __init__(self):
        super().__init__()
        self.headers.update(_CUSTOM_HEADERS)

    @override
    def get(self, *args: Any, raise_for_status: bool = True, **kwargs: Any) -> requests.Response:
        return self._request("GET", *args, raise_for_status=raise_for_status, **kwargs)

    def _request(self, *args: Any, raise_for_status: bool, **kwargs: Any) -> requests.Response:
        timeout = kwargs.pop("timeout", _HTTP_TIMEOUT)

        response = self.request(*args, **kwargs, timeout=timeout)

        if raise_for_status:
            response.raise_for_status()

        return response


http_client = HttpClient()
