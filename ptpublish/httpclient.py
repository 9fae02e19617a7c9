"""A small HTTP client built on requests."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
from urllib.parse import quote, urlsplit, urlunsplit

import requests

from ptpublish.textutil import trim

_VERSIONS = {9: "HTTP/0.9", 10: "HTTP/1.0", 11: "HTTP/1.1", 20: "HTTP/2"}
_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class HttpError(RuntimeError):
    """Raised when a request cannot be completed."""


@dataclass
class Proxy:
    proxy: str = ""
    username: str = ""
    password: str = ""

    def url(self) -> str:
        """Proxy URL with the credentials embedded."""
        target = self.proxy if "://" in self.proxy else f"http://{self.proxy}"
        if not (self.username or self.password):
            return target
        parts = urlsplit(target)
        host = parts.netloc.rpartition("@")[2]
        creds = f"{quote(self.username, safe='')}:{quote(self.password, safe='')}"
        return urlunsplit(parts._replace(netloc=f"{creds}@{host}"))


@dataclass
class Timeout:
    connect_timeout_ms: int = 10000
    read_timeout_ms: int = 10000

    def as_seconds(self) -> tuple[float, float]:
        return self.connect_timeout_ms / 1000, self.read_timeout_ms / 1000


class Method(Enum):
    GET = "GET"
    POST = "POST"


@dataclass
class Request:
    url: str = ""
    method: Method = Method.GET
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""
    proxy: Optional[Proxy] = None
    timeout: Optional[Timeout] = None

    def add_header(self, key: str, value: str) -> None:
        self.headers[key] = value


@dataclass
class Response:
    status_code: int = 0
    version: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""


def split_header(line: str, delimiter: str) -> tuple[str, str]:
    """Split a header line at the first ``delimiter``.

    Returns ``("", "")`` when the delimiter is empty or absent.
    """
    if not delimiter or delimiter not in line:
        return "", ""
    name, _, value = line.partition(delimiter)
    return name, trim(value)


class Client:
    """Sends :class:`Request` objects over a shared session."""

    def __init__(self) -> None:
        self._session = requests.Session()

    def send(self, request: Request) -> Response:
        headers = dict(request.headers)
        data = None
        if request.method is Method.POST:
            data = request.body.encode("utf-8")
            if not any(key.lower() == "content-type" for key in headers):
                headers["Content-Type"] = _FORM_CONTENT_TYPE

        proxies = None
        if request.proxy is not None:
            proxy_url = request.proxy.url()
            proxies = {"http": proxy_url, "https": proxy_url}

        timeout = request.timeout.as_seconds() if request.timeout else None

        try:
            reply = self._session.request(
                request.method.value,
                request.url,
                headers=headers,
                data=data,
                proxies=proxies,
                timeout=timeout,
                allow_redirects=False,
            )
        except requests.RequestException as exc:
            raise HttpError(f"request to {request.url} failed: {exc}") from exc

        with reply:
            return Response(
                status_code=reply.status_code,
                version=_VERSIONS.get(getattr(reply.raw, "version", None), ""),
                headers=dict(reply.headers.items()),
                body=reply.content.decode("utf-8", errors="replace"),
            )

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()