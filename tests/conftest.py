import types

import pytest


class FakeSession:
    def __init__(self, status_code=200, text='ok', exc=None):
        self.calls = []
        self.status_code = status_code
        self.text = text
        self.exc = exc

    def post(self, url, data=None, headers=None):
        self.calls.append((url, data, headers))
        if self.exc is not None:
            raise self.exc
        return types.SimpleNamespace(
            status_code=self.status_code, text=self.text, reason='Reason'
        )


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    # Keep .env discovery away from the developer's working tree.
    monkeypatch.chdir(tmp_path)
    return tmp_path
