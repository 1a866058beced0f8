from __future__ import annotations

from typing import Any

from ports.rest import RestApiFactoryPort, RestApiPort, RestContextPort


class FakeRestContext(RestContextPort):
    """Records headers and POSTs; can be told to fail."""

    def __init__(self, base_url: str, raises: BaseException | None = None, status: int = 200) -> None:
        self.base_url = base_url
        self.raises = raises
        self.status = status
        self.headers: list[str] = []
        self.posts: list[tuple[str, str]] = []

    def set_header(self, content_type: str) -> None:
        self.headers.append(content_type)

    def post(self, path: str, body: str) -> Any:
        self.posts.append((path, body))
        if self.raises is not None:
            raise self.raises
        return {"status": self.status}


class FakeRestApi(RestApiPort):
    def __init__(self, context: FakeRestContext | None = None, no_context: bool = False) -> None:
        self.context = context
        self.no_context = no_context
        self.requested: list[str] = []

    def get_context(self, base_url: str) -> FakeRestContext | None:
        self.requested.append(base_url)
        if self.no_context:
            return None
        if self.context is None:
            self.context = FakeRestContext(base_url)
        return self.context


class FakeRestApiFactory(RestApiFactoryPort):
    """`existing` is returned by get(); `created` by create()."""

    def __init__(self, existing: FakeRestApi | None = None, created: FakeRestApi | None = None) -> None:
        self.existing = existing
        self.created = created
        self.calls: list[str] = []

    def get(self) -> FakeRestApi | None:
        self.calls.append("get")
        return self.existing

    def create(self) -> FakeRestApi | None:
        self.calls.append("create")
        if self.created is not None:
            self.existing = self.created
        return self.created
