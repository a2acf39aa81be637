"""
HTTP request layer, identifier validation, and security helpers for trello-cli.
"""

import http.client
import json
import re
import socket
import sys
import threading
import time
import urllib.parse

from trello_cli import config
from trello_cli.exceptions import (
    ApiError,
    NetworkError,
    ParseError,
    RequestTimeoutError,
    ValidationError,
)

TIMEOUT_MS = config.TIMEOUT_MS

_ID_RE = re.compile(r"[A-Za-z0-9]{8,24}")


# ---------------------------------------------------------------------------
# Security helpers
# ---------------------------------------------------------------------------


def validate_id(value, field_name):
    """Return *value* if it is an 8-24 char alphanumeric Trello id or shortLink.

    The ValidationError message never includes the rejected value.
    """
    if not isinstance(value, str) or not _ID_RE.fullmatch(value):
        raise ValidationError(f"Invalid {field_name} format")
    return value


def _log_http_event(**fields):
    """Emit structured HTTP logs to stderr when enabled."""
    if not config.HTTP_LOG_ENABLED:
        return
    print("[HTTP] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def auth_header(credentials):
    """Trello header authentication (OAuth consumer key + token)."""
    return (
        f'OAuth oauth_consumer_key="{credentials.key}", '
        f'oauth_token="{credentials.token}"'
    )


def build_url(path, query=None):
    """Join the base endpoint, *path*, and URL-encoded *query* (insertion order)."""
    url = config.BASE_URL + path
    if query:
        url += "?" + urllib.parse.urlencode(list(query.items()))
    return url


# ---------------------------------------------------------------------------
# Bounded wait
# ---------------------------------------------------------------------------


class _Deadline:
    """Scoped per-request deadline.

    Entering arms a timer; when it fires, ``expired`` becomes true and the
    attached socket is shut down, which wakes any blocked connect/send/recv in
    the request thread. Exiting always cancels the timer.
    """

    def __init__(self, timeout_ms):
        self.timeout_ms = timeout_ms
        self._expired = threading.Event()
        self._lock = threading.Lock()
        self._timer = None
        self._sock = None
        self._start = None

    def __enter__(self):
        self._start = time.monotonic()
        self._timer = threading.Timer(self.timeout_ms / 1000, self._abort)
        self._timer.daemon = True
        self._timer.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self._timer.cancel()
        return False

    @property
    def expired(self):
        return self._expired.is_set()

    def remaining(self):
        """Seconds left before the deadline, floored so a socket timeout is never 0."""
        left = self.timeout_ms / 1000 - (time.monotonic() - self._start)
        return max(left, 0.001)

    def attach(self, sock):
        with self._lock:
            self._sock = sock
            if self._expired.is_set():
                _shutdown(sock)

    def _abort(self):
        with self._lock:
            self._expired.set()
            if self._sock is not None:
                _shutdown(self._sock)


def _shutdown(sock):
    # socket.socket.shutdown, not SSLSocket.shutdown: the latter drops the SSL
    # object out from under a concurrent read.
    try:
        socket.socket.shutdown(sock, socket.SHUT_RDWR)
    except OSError:
        # Already closed or never connected.
        pass


# ---------------------------------------------------------------------------
# HTTP request layer
# ---------------------------------------------------------------------------


def _open_connection(url, timeout):
    """Return an unconnected HTTP(S) connection for *url* and its request target."""
    parts = urllib.parse.urlsplit(url)
    if parts.scheme == "https":
        conn = http.client.HTTPSConnection(parts.netloc, timeout=timeout)
    else:
        conn = http.client.HTTPConnection(parts.netloc, timeout=timeout)
    target = parts.path + (f"?{parts.query}" if parts.query else "")
    return conn, target


def _http_get(url, headers, deadline):
    """Perform one GET bounded by *deadline*. Returns parsed JSON on success."""
    conn, target = _open_connection(url, deadline.remaining())
    start = time.perf_counter()
    _log_http_event(phase="request", method="GET", url=url, timeout_ms=deadline.timeout_ms)
    try:
        conn.connect()
        deadline.attach(conn.sock)
        conn.request("GET", target, headers=headers)
        resp = conn.getresponse()
        status = resp.status
        reason = resp.reason
        content_type = resp.getheader("Content-Type", "")
        raw = resp.read(config.HTTP_MAX_RESPONSE_BYTES + 1) if 200 <= status < 300 else b""
    except (OSError, http.client.HTTPException, ValueError) as e:
        if deadline.expired or isinstance(e, TimeoutError):
            _log_http_event(phase="network_error", method="GET", url=url, error="timeout")
            raise RequestTimeoutError(deadline.timeout_ms) from e
        _log_http_event(phase="network_error", method="GET", url=url, error=type(e).__name__)
        raise NetworkError(f"Network error: {e}") from e
    except Exception as e:
        # A read racing the shutdown can fail in arbitrary ways inside http.client.
        if deadline.expired:
            raise RequestTimeoutError(deadline.timeout_ms) from e
        raise
    finally:
        conn.close()

    if deadline.expired:
        raise RequestTimeoutError(deadline.timeout_ms)
    _log_http_event(
        phase="response",
        method="GET",
        url=url,
        status=status,
        content_type=content_type,
        bytes=len(raw),
        latency_ms=round((time.perf_counter() - start) * 1000, 2),
    )
    if not 200 <= status < 300:
        raise ApiError(status, reason)
    if len(raw) > config.HTTP_MAX_RESPONSE_BYTES:
        raise ParseError(
            f"Response too large from Trello API (>{config.HTTP_MAX_RESPONSE_BYTES} bytes)."
        )
    try:
        return json.loads(raw.decode("utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"Failed to parse API response: {e}") from e


def request(credentials, path, query=None):
    """Make one authenticated GET against the Trello API.

    Raises RequestTimeoutError, NetworkError, ApiError or ParseError.
    """
    url = build_url(path, query)
    headers = {
        "Authorization": auth_header(credentials),
        "Accept": "application/json",
    }
    with _Deadline(TIMEOUT_MS) as deadline:
        return _http_get(url, headers, deadline)
