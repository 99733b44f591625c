import pytest

from airplane_tickets import logging_service
from airplane_tickets.controller import TicketController


@pytest.fixture(autouse=True)
def action_log(tmp_path, monkeypatch):
    log_file = tmp_path / "user_actions.log"
    monkeypatch.setattr(logging_service, "LOG_FILE", log_file)
    return log_file


@pytest.fixture
def controller():
    return TicketController()
