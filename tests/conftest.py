# Test configuration
import os
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).parent.parent

# Add repo root to path so tests can import modules
sys.path.insert(0, str(REPO_ROOT))

# Deterministic settings for every test run
os.environ["OFFICIAL_EMAIL"] = "ops@example.com"
os.environ["GEMINI_API_KEY"] = "test-key"
os.environ["RATE_LIMIT_REQUESTS_PER_MINUTE"] = "60"


@pytest.fixture(autouse=True)
def fresh_rate_limiter():
    """Give every test its own empty rate limit ledger."""
    from bfhl.ratelimit import reset_rate_limiter

    reset_rate_limiter()
    yield
    reset_rate_limiter()
