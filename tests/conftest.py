"""Pytest configuration and fixtures."""

import pytest

import zp_logger
from zp_sys import set_env_mapping, set_translator
from zp_tag import TRenderContext
from zp_request import TRequest
from zp_container import TForm


# ============================================================================
# Environment
# ============================================================================

@pytest.fixture(autouse=True)
def isolated_env():
    """Every test reads and writes its own env mapping."""
    env = {}
    set_env_mapping(env)
    yield env
    set_env_mapping(None)
    set_translator(None)
    zp_logger.reset_log_router()


@pytest.fixture
def log_router():
    """Global log router collecting lines in memory."""
    return zp_logger.init_log_router()


# ============================================================================
# Rendering
# ============================================================================

@pytest.fixture
def ctx():
    """Fresh render context."""
    return TRenderContext()


# ============================================================================
# Requests and forms
# ============================================================================

@pytest.fixture
def submitted():
    """Factory: request that submits form `form_id` with `data` and signed hidden fields."""
    def factory(form_id, data=None, hidden=None):
        signer = TForm()
        post = {TForm.PROCESS_FIELD: form_id}
        post.update(data or {})
        if hidden:
            post[TForm.HIDDEN_FIELD] = signer.serialize_value(list(hidden))
            for name, value in hidden.items():
                post[TForm.SERIALIZED_PREFIX + name] = signer.serialize_value(value)
        return TRequest(post=post)
    return factory


@pytest.fixture
def form_with():
    """Factory: form 'f' bound to `request` holding `widgets`."""
    def factory(request=None, *widgets):
        form = TForm("f", request)
        for widget in widgets:
            form.add(widget)
        return form
    return factory
