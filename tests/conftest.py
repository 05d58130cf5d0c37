"""Root conftest — shared test configuration."""

import os

# Ensure tests never pick up a developer's real settings
os.environ.setdefault("BAGSTORE_BASE_URI", "http://bagstore.test/stores/")
os.environ.setdefault("BAGSTORE_LOG_FORMAT", "text")
