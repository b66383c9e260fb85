from tests.fakes.fake_classifier import FakeEventClassifier
from tests.fakes.fake_settings_store import FakeSettingsStore
from tests.fakes.fake_table_store import FakeTableStore

__all__ = ["FakeEventClassifier", "FakeSettingsStore", "FakeTableStore"]
