import logging

import structlog

from basket_pricing.core.logging_config import setup_logging
from basket_pricing.core.settings import BasketSettings


def test_setup_logging_applies_level_and_renderer(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    monkeypatch.setattr(structlog, "configure", lambda **kw: calls.update(kw))

    setup_logging(BasketSettings(_env_file=None, LOG_LEVEL="debug", LOG_JSON=False))

    assert calls["level"] == logging.DEBUG
    assert isinstance(calls["processors"][-1], structlog.dev.ConsoleRenderer)
    assert calls["cache_logger_on_first_use"] is True
