"""Logging stays quiet until an entry point configures it."""

import logging

from storefront.utils import logging as storefront_logging


class TestLogging:

    def test_package_logger_has_null_handler(self):
        handlers = logging.getLogger("storefront").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_get_logger_does_not_configure_root(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        logger = storefront_logging.get_logger("storefront.repos.customer_repo")

        assert logger.name == "storefront.repos.customer_repo"
        assert calls == []

    def test_configure_logging_sets_root_level(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        storefront_logging.configure_logging("DEBUG")

        assert len(calls) == 1
        assert calls[0]["level"] == "DEBUG"
