"""Root conftest — shared test configuration."""

import os

# Tests assert on Settings defaults; drop any overrides from the shell
for _key in ("PORT", "HOST", "SERVER_URL", "APP_TITLE", "APP_VERSION", "LOG_FORMAT", "LOG_LEVEL"):
    os.environ.pop(_key, None)
