from __future__ import annotations

import re
from typing import Callable
from urllib.parse import parse_qsl

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse
from starlette.formparsers import MultiPartException, MultiPartParser

from Security.input_length_limits import DEFAULT_MAX_BODY_BYTES, read_limited_body
from Security.input_validation import ValidationOutcome, validate_permissive, validate_strict

from .rendering import render_data_from_outcome, render_page

router = APIRouter()

INPUT_FIELD = "input"

_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class MalformedFormError(ValueError):
    pass


def parse_urlencoded(body: bytes) -> list[tuple[str, str]]:
    """Decode an x-www-form-urlencoded body or query string, refusing anything ambiguous."""
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedFormError("form data is not valid UTF-8") from exc
    if _BAD_PERCENT_ESCAPE.search(text):
        raise MalformedFormError("form data has an invalid percent escape")
    try:
        return parse_qsl(text, keep_blank_values=True, errors="strict")
    except (UnicodeDecodeError, ValueError) as exc:
        raise MalformedFormError("form data could not be decoded") from exc


async def _replay(body: bytes):
    yield body


async def _parse_multipart(request: Request, body: bytes) -> list[tuple[str, str]]:
    parser = MultiPartParser(request.headers, _replay(body))
    try:
        form = await parser.parse()
    except (MultiPartException, KeyError, ValueError) as exc:
        raise MalformedFormError("multipart body could not be parsed") from exc
    try:
        # Uploaded files are not form values.
        return [(key, value) for key, value in form.multi_items() if isinstance(value, str)]
    finally:
        await form.close()


async def _body_fields(request: Request) -> list[tuple[str, str]]:
    content_type = request.headers.get("content-type") or ""
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type not in ("application/x-www-form-urlencoded", "multipart/form-data"):
        return []

    max_bytes = request.app.state.settings.get("MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES)
    body = await read_limited_body(request, max_bytes)
    if media_type == "multipart/form-data":
        return await _parse_multipart(request, body)
    return parse_urlencoded(body)


async def read_input_field(request: Request) -> str:
    """
    Value of the ``input`` field, body first and query string second.

    The query string is held to the same decoding rules as the body, even
    when the body already supplies the field. A missing field is an empty
    string, not an error.
    """
    query_fields = parse_urlencoded(request.scope.get("query_string", b""))
    for key, value in await _body_fields(request) + query_fields:
        if key == INPUT_FIELD:
            return value
    return ""


async def _handle_submission(request: Request, validate: Callable[[str], ValidationOutcome]):
    try:
        raw_input = await read_input_field(request)
    except MalformedFormError as exc:
        raise HTTPException(status_code=400, detail="Invalid form data") from exc
    outcome = validate(raw_input)
    return render_page(request, render_data_from_outcome(outcome))


@router.post("/insecure/input", response_class=HTMLResponse)
async def insecure_input(request: Request):
    return await _handle_submission(request, validate_permissive)


@router.post("/secure/input", response_class=HTMLResponse)
async def secure_input(request: Request):
    return await _handle_submission(request, validate_strict)
