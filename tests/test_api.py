import logging

import pytest

import nano_ioc
from nano_ioc import ApplicationContext, NamespaceNotFoundError, init


def test_init_returns_initialized_container():
    ctx = init("sample_shop")

    assert isinstance(ctx, ApplicationContext)
    assert ctx.initialized
    assert ctx.root_namespace == "sample_shop"
    assert "orderService" in ctx


def test_init_creates_independent_containers():
    a = init("sample_shop")
    b = init("sample_shop")

    assert a is not b
    assert a.get("clock") is not b.get("clock")


def test_init_propagates_scan_errors():
    with pytest.raises(NamespaceNotFoundError):
        init("definitely_not_a_package")


def test_init_uses_given_logger(caplog):
    logger = logging.getLogger("shop.wiring")
    with caplog.at_level(logging.INFO, logger="shop.wiring"):
        init("sample_shop", logger=logger)

    assert any(r.name == "shop.wiring" and "beans registered" in r.getMessage() for r in caplog.records)


def test_init_summary_logged_to_framework_logger(logs):
    init("sample_shop")
    assert any("7 beans registered" in line for line in logs)


def test_public_api_exports():
    for name in nano_ioc.__all__:
        assert hasattr(nano_ioc, name), name
    assert nano_ioc.__version__
