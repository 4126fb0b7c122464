"""
Test Configuration and Fixtures

Architecture:
- Unit tests (test/**/unit/): use cases and checkers against the in-memory store or AsyncMocks
- Integration tests (test/**/integration/): the HTTP app via TestClient, and the SQLAlchemy
  repositories against an in-memory aiosqlite database
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the log sinks are configured at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('SECRET_KEY', 'test_secret_key_change_in_production')
    os.environ.setdefault('POSTGRES_DB', 'event_lodging_test_db')


# Call immediately to set env vars before any imports
_early_setup_test_environment()
