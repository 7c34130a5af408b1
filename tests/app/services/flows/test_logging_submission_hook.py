"""Testes do hook padrão de submissão do Flow."""

from __future__ import annotations

import logging

import pytest

from app.protocols import FlowSubmissionHookProtocol
from app.services import LoggingSubmissionHook
from fsm import FlowStep


def test_hook_satisfies_protocol() -> None:
    hook: FlowSubmissionHookProtocol = LoggingSubmissionHook()
    assert callable(hook.on_submission)


def test_hook_logs_field_names_without_values(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="app.services.flow_submission"):
        LoggingSubmissionHook().on_submission(
            FlowStep.INTERMEDIATE,
            "tok-1",
            {"screen_0_Email_address_1": "john@x.com", "screen_0_Full_name_0": "John"},
        )

    record = next(r for r in caplog.records if r.getMessage() == "flow_submission_received")
    assert record.step == "INTERMEDIATE"
    assert record.fields == ["screen_0_Email_address_1", "screen_0_Full_name_0"]
    assert record.has_flow_token is True
    assert "john@x.com" not in caplog.text
    assert "tok-1" not in caplog.text
