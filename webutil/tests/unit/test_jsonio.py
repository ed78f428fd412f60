"""Unit tests for JSON request decoding and response writing.

Tests cover:
- read_json success, failure and body truncation
- Buffer pool reuse and release on failure
- must_read_json error conversion
- write_json / write_json_code rendering
- close_body
"""

import json
from datetime import datetime
from unittest.mock import MagicMock

import pytest
from pydantic import BaseModel

from webutil.jsonio import (
    BufferPool,
    InvalidJSONError,
    close_body,
    must_read_json,
    read_json,
    write_json,
    write_json_code,
)
from webutil.shared.errors import BadRequestError


class Deck(BaseModel):
    name: str
    cards: int = 0


# ==================== Reading ====================


class TestReadJSON:
    """Tests for read_json."""

    @pytest.mark.asyncio
    async def test_object(self, make_request, pool):
        """Test a well-formed body is decoded exactly."""
        chunks = [b'{"name": "Spanish", ', b'"tags": ["a", "b"]}']
        request = make_request(method="POST", chunks=chunks)
        assert await read_json(request, pool=pool) == {"name": "Spanish", "tags": ["a", "b"]}

    @pytest.mark.asyncio
    async def test_into_model(self, make_request, pool):
        """Test the body is validated into a model."""
        request = make_request(method="POST", chunks=[b'{"name": "Spanish", "cards": 3}'])
        deck = await read_json(request, Deck, pool=pool)
        assert deck == Deck(name="Spanish", cards=3)

    @pytest.mark.asyncio
    async def test_model_validation_failure(self, make_request, pool):
        """Test a model mismatch is reported as invalid JSON data."""
        request = make_request(method="POST", chunks=[b'{"cards": "many"}'])
        with pytest.raises(InvalidJSONError):
            await read_json(request, Deck, pool=pool)

    @pytest.mark.asyncio
    async def test_deeply_nested(self, make_request, pool):
        """Test nesting deeper than the decoder stack is invalid JSON data."""
        request = make_request(method="POST", chunks=[b"[" * 200000])
        with pytest.raises(InvalidJSONError) as exc_info:
            await read_json(request, pool=pool)
        assert isinstance(exc_info.value.cause, RecursionError)
        assert pool.idle == 1

    @pytest.mark.asyncio
    async def test_invalid_body(self, make_request, pool):
        """Test the error text embeds the cause and the bytes read."""
        request = make_request(method="POST", chunks=[b"{not json"])
        with pytest.raises(InvalidJSONError) as exc_info:
            await read_json(request, pool=pool)
        error = exc_info.value
        assert str(error).startswith("invalid JSON data: ")
        assert str(error).endswith(", on input: {not json")
        assert error.data == b"{not json"
        assert isinstance(error.cause, json.JSONDecodeError)

    @pytest.mark.asyncio
    async def test_empty_body(self, make_request, pool):
        """Test an empty body is invalid."""
        with pytest.raises(InvalidJSONError):
            await read_json(make_request(method="POST"), pool=pool)

    @pytest.mark.asyncio
    async def test_trailing_data_ignored(self, make_request, pool):
        """Test only the first JSON value is decoded."""
        request = make_request(method="POST", chunks=[b'  {"a": 1}\n{"b": 2}'])
        assert await read_json(request, pool=pool) == {"a": 1}

    @pytest.mark.asyncio
    async def test_truncated_at_limit(self, make_request, pool):
        """Test bodies over the limit are cut off and fail to decode."""
        request = make_request(method="POST", chunks=[b'{"name": ', b'"Spanish"}'])
        with pytest.raises(InvalidJSONError) as exc_info:
            await read_json(request, pool=pool, max_bytes=12)
        assert exc_info.value.data == b'{"name": "Sp'

    @pytest.mark.asyncio
    async def test_default_limit_is_8_mib(self, make_request, pool):
        """Test the default limit keeps the first 8 MiB of a larger body."""
        chunk = b"a" * (1 << 20)
        request = make_request(method="POST", chunks=[b'"'] + [chunk] * 9 + [b'"'])
        with pytest.raises(InvalidJSONError) as exc_info:
            await read_json(request, pool=pool)
        assert len(exc_info.value.data) == 8 << 20

    @pytest.mark.asyncio
    async def test_buffer_released_on_success(self, make_request, pool):
        """Test the scratch buffer goes back to the pool."""
        await read_json(make_request(method="POST", chunks=[b"[1, 2]"]), pool=pool)
        assert pool.idle == 1

    @pytest.mark.asyncio
    async def test_buffer_released_on_failure(self, make_request, pool):
        """Test the scratch buffer goes back to the pool on decode errors."""
        with pytest.raises(InvalidJSONError):
            await read_json(make_request(method="POST", chunks=[b"]"]), pool=pool)
        assert pool.idle == 1

    @pytest.mark.asyncio
    async def test_buffer_reused(self, make_request, pool):
        """Test sequential reads share one buffer."""
        for _ in range(3):
            await read_json(make_request(method="POST", chunks=[b"true"]), pool=pool)
        assert pool.idle == 1


class TestMustReadJSON:
    """Tests for must_read_json."""

    @pytest.mark.asyncio
    async def test_success(self, make_request, pool):
        """Test a valid body is returned."""
        request = make_request(method="POST", chunks=[b'{"name": "Spanish"}'])
        deck = await must_read_json(request, Deck, pool=pool)
        assert deck.name == "Spanish"

    @pytest.mark.asyncio
    async def test_failure_is_bad_request(self, make_request, pool):
        """Test decode failures raise BadRequestError wrapping the cause."""
        with pytest.raises(BadRequestError) as exc_info:
            await must_read_json(make_request(method="POST", chunks=[b"{"]), pool=pool)
        error = exc_info.value
        assert str(error) == "Invalid JSON data"
        assert error.status_code == 400
        assert isinstance(error.unwrap(), InvalidJSONError)

    @pytest.mark.asyncio
    async def test_deeply_nested_is_bad_request(self, make_request, pool):
        """Test a deeply nested body is a client error."""
        request = make_request(method="POST", chunks=[b"[" * 200000])
        with pytest.raises(BadRequestError):
            await must_read_json(request, pool=pool)


# ==================== Buffer Pool ====================


class TestBufferPool:
    """Tests for BufferPool."""

    def test_acquire_returns_cleared_buffer(self):
        """Test buffers come back empty."""
        pool = BufferPool(max_idle=2)
        with pool.acquire() as buf:
            buf.extend(b"data")
        with pool.acquire() as again:
            assert again is buf
            assert len(again) == 0

    def test_released_on_exception(self):
        """Test the buffer is returned when the block raises."""
        pool = BufferPool(max_idle=2)
        with pytest.raises(RuntimeError):
            with pool.acquire():
                raise RuntimeError("boom")
        assert pool.idle == 1

    def test_max_idle(self):
        """Test surplus buffers are dropped."""
        pool = BufferPool(max_idle=1)
        pool.put(bytearray(b"a"))
        pool.put(bytearray(b"b"))
        assert pool.idle == 1

    def test_default_max_idle_from_settings(self):
        """Test the idle limit defaults to the configured value."""
        assert BufferPool().max_idle == 64


# ==================== Writing ====================


class TestWriteJSON:
    """Tests for write_json and write_json_code."""

    def test_write_json(self):
        """Test 200, content type, indentation and trailing newline."""
        response = write_json({"name": "Spanish", "cards": [1, 2]})
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.body == b'{\n  "name": "Spanish",\n  "cards": [\n    1,\n    2\n  ]\n}\n'

    def test_write_json_code(self):
        """Test a custom status code."""
        response = write_json_code(201, {"id": 1})
        assert response.status_code == 201
        assert json.loads(response.body) == {"id": 1}

    def test_models_and_datetimes(self):
        """Test pydantic models and datetimes are encoded."""
        response = write_json({"deck": Deck(name="x"), "at": datetime(2024, 1, 2, 3, 4, 5)})
        assert json.loads(response.body) == {
            "deck": {"name": "x", "cards": 0},
            "at": "2024-01-02T03:04:05",
        }

    def test_non_ascii_kept(self):
        """Test non-ASCII text is written as UTF-8."""
        assert "Jörg".encode() in write_json({"name": "Jörg"}).body

    def test_unserializable_keeps_status(self):
        """Test NaN leaves a bare newline body with the status kept."""
        response = write_json_code(201, {"score": float("nan")})
        assert response.status_code == 201
        assert response.body == b"\n"


class TestCloseBody:
    """Tests for close_body."""

    def test_none(self):
        """Test None is ignored."""
        close_body(None)

    def test_closes(self):
        """Test close() is called."""
        body = MagicMock()
        close_body(body)
        body.close.assert_called_once()

    def test_close_error_swallowed(self):
        """Test errors from close() do not propagate."""
        body = MagicMock()
        body.close.side_effect = OSError("already closed")
        close_body(body)
        body.close.assert_called_once()
