# leaselib/settings.py - environment driven settings used across modules
from dotenv import load_dotenv
import logging
import os
from typing import Optional

load_dotenv()

LOG_LEVEL = os.getenv('LEASE_LOG_LEVEL', 'INFO')

# what subtract_range returns when the withdrawal engulfs the whole split range
SUPERSET_POLICIES = ('keep', 'consume')
SUPERSET_POLICY = os.getenv('LEASE_SUPERSET_POLICY', 'keep')

# one day in milliseconds, used for inclusive day boundaries
DAY_MS = 1000 * 60 * 60 * 24

logger = logging.getLogger(__name__)


def setup_logging(level: Optional[str] = None):
    level = (level or LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO))


def superset_policy(value: Optional[str] = None) -> str:
    policy = (value or SUPERSET_POLICY).strip().lower()
    if policy not in SUPERSET_POLICIES:
        logger.warning('Unknown superset policy %r, falling back to keep', policy)
        return 'keep'
    return policy
