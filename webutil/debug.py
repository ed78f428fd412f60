"""Wire-level dumps of outgoing HTTP requests."""

from typing import TextIO

import h11
import httpx


def render_request_out(request: httpx.Request) -> bytes:
    """Render request as HTTP/1.1 bytes, exactly as a client would send it.

    The whole body is read. Requests streaming from an async iterator must be
    read with ``await request.aread()`` first.
    """
    body = request.read()
    conn = h11.Connection(our_role=h11.CLIENT)

    out = bytearray()
    out += conn.send(
        h11.Request(
            method=request.method,
            target=request.url.raw_path,
            headers=request.headers.raw,
        )
    )
    if body:
        out += conn.send(h11.Data(data=body))
    out += conn.send(h11.EndOfMessage())
    return bytes(out)


def dump_request_out(sink: TextIO, request: httpx.Request) -> None:
    """Write the wire form of an outgoing request to sink.

    Host comes first among the headers; chunked requests keep their chunk
    framing. Non UTF-8 body bytes are replaced.

    Usage:
        request = client.build_request("POST", url, content=payload)
        dump_request_out(sys.stderr, request)
    """
    sink.write(render_request_out(request).decode("utf-8", errors="replace"))
