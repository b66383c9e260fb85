import sys

from loguru import logger

from relnet.api import create_app
from relnet.config import settings
from relnet.llms.http_classifier import HttpEventClassifier
from relnet.session import NetworkSession
from relnet.settings_stores.local import LocalSettingsStore
from relnet.table_stores.workbook import WorkbookTableStore

logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

if settings.workbook_path:
    logger.info(f"Opening relationship network workbook {settings.workbook_path}")
    table_store = WorkbookTableStore.load(settings.workbook_path)
else:
    logger.info("No workbook configured, waiting for an upload")
    table_store = WorkbookTableStore.template()

settings_store = LocalSettingsStore(settings.settings_store_path)
classifier = HttpEventClassifier(timeout=settings.llm_timeout_seconds)
session = NetworkSession(
    store=table_store,
    classifier=classifier,
    settings_store=settings_store,
)
app = create_app(session=session, settings_store=settings_store)
