"""Test public API surface - ensure imports work correctly and no side effects.

This test verifies:
- stickyparam.api exposes resolve_default, create_value
- the package root re-exports the public names in __all__
- importing the package configures no logging handlers
"""

import logging


def test_api_exports_core_functions():
    """Test that stickyparam.api exports the resolution entry points."""
    from stickyparam.api import resolve_default, default_value, create_value, coerce_boolean

    assert callable(resolve_default)
    assert callable(default_value)
    assert callable(create_value)
    assert callable(coerce_boolean)


def test_root_exports_match_all():
    import stickyparam

    for name in stickyparam.__all__:
        assert hasattr(stickyparam, name), f"{name} listed in __all__ but missing"
    from stickyparam import api
    assert stickyparam.resolve_default is api.resolve_default


def test_root_api_works_on_tiny_input():
    from stickyparam import resolve_default, DefaultSource

    result = resolve_default({"name": "DEPLOY", "static_default": True}, [])
    assert result.value is True
    assert result.source == DefaultSource.STATIC


def test_import_adds_no_log_handlers():
    """Library code must leave logging configuration to the application."""
    import stickyparam.kernel.resolver  # noqa: F401

    assert logging.getLogger("stickyparam.kernel.resolver").handlers == []
    assert logging.getLogger("stickyparam").handlers == []
