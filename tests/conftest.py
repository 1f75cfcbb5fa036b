import pytest

from verify_that.config import VerifySettings, settings_scope
from verify_that.context import match_context_scope


@pytest.fixture(autouse=True)
def match_context():
    """Give every test its own match context and default settings."""
    with settings_scope(VerifySettings()), match_context_scope() as ctx:
        yield ctx
