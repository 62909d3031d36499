"""Test doubles shared by the test modules."""

import requests

from prompt_architect.errors import CompletionGatewayError
from prompt_architect.inference.base import CompletionGateway

NOT_JSON = object()


class FakeGateway(CompletionGateway):
    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def complete(self, system_instruction, user_content):
        self.calls.append((system_instruction, user_content))
        if self.error is not None:
            raise self.error
        return self.reply


class FailingGateway(FakeGateway):
    def __init__(self):
        super().__init__(error=CompletionGatewayError())


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(
                f"{self.status_code} Error: {self.text}", response=self
            )

    def json(self):
        if self._payload is NOT_JSON:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    """Stands in for requests.Session; records every POST."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response
