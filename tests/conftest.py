import pytest

from veneer import push_helpers
from veneer.conf import settings as veneer_settings
from veneer.registry import decorators as decorator_registry


# Keep explicit registrations from leaking between tests
@pytest.fixture(autouse=True)
def isolated_registry():
    saved = dict(decorator_registry._store)
    yield decorator_registry
    decorator_registry._store.clear()
    decorator_registry._store.update(saved)


@pytest.fixture(autouse=True)
def isolated_settings():
    overrides = veneer_settings.overrides
    saved = dict(overrides)
    yield veneer_settings
    overrides.clear()
    overrides.update(saved)


class RecordingHelpers:
    """Helpers backend that records calls instead of rendering anything."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple, dict]] = []

    def localize(self, *args, **kwargs):
        self.calls.append(("localize", args, kwargs))
        return "localized"

    def shout(self, text):
        return f"{text.upper()}!"


@pytest.fixture
def recording_helpers():
    helpers = RecordingHelpers()
    with push_helpers(helpers):
        yield helpers
