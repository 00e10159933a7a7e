import logging

from cookie_api.config import log_event


def test_log_event_renders_context(caplog):
    caplog.set_level(logging.DEBUG, logger="cookie_api")

    log_event(logging.WARNING, "score_lookup_failed", username="bob", user_id="7")

    record = caplog.records[-1]
    assert record.name == "cookie_api"
    assert record.levelno == logging.WARNING
    assert record.getMessage() == "score_lookup_failed | context={'username': 'bob', 'user_id': '7'}"


def test_services_share_log_event():
    from cookie_api.services import cookie_service, profile_service

    assert cookie_service.log_event is log_event
    assert profile_service.log_event is log_event
