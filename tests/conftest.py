"""Root conftest: shared test configuration."""

import os

# Ensure tests never point at the real users API
os.environ.setdefault("REQRES_BASE_URL", "https://reqres.test/api")
