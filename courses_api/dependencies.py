import json
from collections.abc import Iterator

from fastapi import Request

from courses_api.errors import MalformedBody
from courses_api.store import Store


def get_store(request: Request) -> Iterator[Store]:
    with request.app.state.database.session() as db:
        yield Store(db)


async def get_json_body(request: Request) -> dict:
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except (UnicodeDecodeError, ValueError) as exc:
        raise MalformedBody("Request body must be valid JSON") from exc
    if not isinstance(payload, dict):
        raise MalformedBody("Request body must be a JSON object")
    return payload
