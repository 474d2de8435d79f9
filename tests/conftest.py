"""Pytest configuration and shared fixtures for the plugdoc test suite."""

import io
import logging

import pytest

from plugdoc.constants import NOISY_LOGGERS

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)

    import os

    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")
    config.addinivalue_line("markers", "network: Tests that exercise the HTTP fetch path (mocked)")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def output_stream() -> io.StringIO:
    """Provide an in-memory text stream to capture terminal output."""
    return io.StringIO()


@pytest.fixture
def no_network_env(monkeypatch):
    """Make sure the network kill switch and user agent override are unset."""
    monkeypatch.delenv("PLUGDOC_DISABLE_NETWORK", raising=False)
    monkeypatch.delenv("PLUGDOC_USER_AGENT", raising=False)


@pytest.fixture
def sample_markdown() -> str:
    """Provide Markdown covering every line kind the renderer knows."""
    return """# Sample Document

This is a **sample document** with plain text.

## Section 2

- Item 1
* Item 2
1. First item

---

```python
def hello_world():
    print("Hello, World!")
```
"""


@pytest.fixture
def restore_root_logger():
    """Remove the handlers ``configure_logging`` installs on the root logger."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)
