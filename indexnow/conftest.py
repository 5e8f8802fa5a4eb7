"""Shared pytest fixtures: a local IndexNow endpoint that records requests."""

import asyncio
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer


@dataclass
class RecordedRequest:
    path: str
    headers: Mapping[str, str]
    body: bytes


@dataclass
class FakeSearchEngine:
    """Answers every POST with a configurable status and body."""

    status: int = 200
    text: str = ""
    body: Optional[bytes] = None
    content_type: str = "text/plain"
    charset: Optional[str] = None
    requests: List[RecordedRequest] = field(default_factory=list)
    gate: Optional[asyncio.Event] = None
    arrived: asyncio.Event = field(default_factory=asyncio.Event)
    base_url: str = ""

    async def handle(self, request: web.Request) -> web.Response:
        self.requests.append(
            RecordedRequest(
                path=request.path,
                headers=request.headers.copy(),
                body=await request.read(),
            )
        )
        self.arrived.set()
        if self.gate is not None:
            await self.gate.wait()
        if self.body is not None:
            return web.Response(
                status=self.status, body=self.body, content_type=self.content_type, charset=self.charset
            )
        return web.Response(status=self.status, text=self.text)


@pytest_asyncio.fixture
async def search_engine():
    engine = FakeSearchEngine()
    app = web.Application()
    app.router.add_post("/{tail:.*}", engine.handle)
    server = TestServer(app)
    await server.start_server()
    engine.base_url = f"http://{server.host}:{server.port}"
    try:
        yield engine
    finally:
        if engine.gate is not None:
            engine.gate.set()
        await server.close()
