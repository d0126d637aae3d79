"""
Startup sequencing for the Inventory service.

Before the API accepts traffic the database has to be reachable and its
schema provisioned. In containerised deployments the database often starts
after the service, so the connection is attempted a bounded number of times
with a fixed delay between attempts.
"""
import enum
import logging
import os
import time
from typing import Callable

from .database import SchemaAction, SchemaResult, StoreGateway
from .exceptions import StoreUnavailable

logger = logging.getLogger(__name__)

STARTUP_MAX_ATTEMPTS = int(os.getenv("STARTUP_MAX_ATTEMPTS", "10"))
STARTUP_RETRY_DELAY = float(os.getenv("STARTUP_RETRY_DELAY", "5"))  # seconds


class StartupState(str, enum.Enum):
    ATTEMPTING = "attempting"
    PROVISIONING = "provisioning"
    READY = "ready"
    FATAL = "fatal"


class StartupSequencer:
    """
    Bounded connect-and-provision loop run once before serving.

    Args:
        store: Gateway to the inventory database
        max_attempts: Number of connection attempts before giving up
        delay: Seconds to wait between attempts
        sleep: Blocking wait function, replaceable in tests
    """

    def __init__(
        self,
        store: StoreGateway,
        max_attempts: int = STARTUP_MAX_ATTEMPTS,
        delay: float = STARTUP_RETRY_DELAY,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.store = store
        self.max_attempts = max_attempts
        self.delay = delay
        self.sleep = sleep
        self.state = StartupState.ATTEMPTING
        self.attempts = 0

    def run(self) -> SchemaResult:
        """
        Connect to the database and provision its schema.

        Returns:
            SchemaResult describing the provisioning path taken

        Raises:
            StoreUnavailable: when every attempt failed
        """
        while True:
            self.attempts += 1
            self.state = StartupState.ATTEMPTING
            logger.info(f"Attempt {self.attempts}/{self.max_attempts}: connecting to the inventory database...")
            try:
                self.store.can_connect()
                self.state = StartupState.PROVISIONING
                result = self.store.ensure_schema()
            except StoreUnavailable as e:
                logger.warning(f"Connection error: {e}")
                if self.attempts >= self.max_attempts:
                    self.state = StartupState.FATAL
                    logger.error("Maximum number of connection attempts reached, aborting startup")
                    raise
                logger.info(f"Waiting {self.delay:g} seconds before the next attempt...")
                self.sleep(self.delay)
                continue

            _log_schema_result(result)
            self.state = StartupState.READY
            return result


def _log_schema_result(result: SchemaResult) -> None:
    if result.action == SchemaAction.CREATED:
        logger.info(f"No inventory tables found, created schema at revision {result.revision}")
    elif result.action == SchemaAction.UPGRADED:
        logger.info(f"Applied pending migrations, schema now at revision {result.revision}")
    elif result.action == SchemaAction.UNCHANGED:
        logger.info(f"Inventory tables present, no migrations to apply (revision {result.revision})")
    else:
        logger.warning(f"Could not apply migrations, continuing at revision {result.revision}: {result.error}")
