from .fakes import FakeRestApi, FakeRestApiFactory, FakeRestContext
from .requests_api import RequestsRestApi, RequestsRestApiFactory, RequestsRestContext

__all__ = [
    "FakeRestApi",
    "FakeRestApiFactory",
    "FakeRestContext",
    "RequestsRestApi",
    "RequestsRestApiFactory",
    "RequestsRestContext",
]
