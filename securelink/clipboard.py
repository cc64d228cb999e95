"""
System clipboard access through Qt.
"""

import sys
import logging
from PyQt5.QtWidgets import QApplication

logger = logging.getLogger(__name__)


def _application() -> QApplication:
    """Return the running QApplication, creating one if needed."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv[:1])
    return app


def read_text() -> str:
    """Return the text currently on the clipboard, or an empty string."""
    _application()
    text = QApplication.clipboard().text()
    logger.debug(f"Read {len(text)} characters from clipboard")
    return text


def write_text(text: str) -> None:
    """Put text on the clipboard."""
    _application()
    clipboard = QApplication.clipboard()
    clipboard.setText(text)
