import pytest
from django.core.management import call_command
from django.db import OperationalError


class FakeConnection:
    settings_dict = {"NAME": "blog-test"}

    def __init__(self, error=None):
        self.error = error

    def ensure_connection(self):
        if self.error is not None:
            raise self.error


def test_serve_exits_when_database_unreachable(monkeypatch):
    monkeypatch.setattr(
        "blog.management.commands.serve.connection",
        FakeConnection(OperationalError("connection refused")),
    )
    with pytest.raises(SystemExit) as exc:
        call_command("serve")
    assert exc.value.code == 1


def test_serve_starts_runserver_on_port(monkeypatch):
    calls = []
    monkeypatch.setattr("blog.management.commands.serve.connection", FakeConnection())
    monkeypatch.setattr(
        "blog.management.commands.serve.call_command",
        lambda *args, **kwargs: calls.append((args, kwargs)),
    )

    call_command("serve", port=8123)
    assert calls[0][0] == ("runserver", "0.0.0.0:8123")
