"""Setup Sentry."""

import logging
import os

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration


def init_sentry() -> bool:
    """Initialise Sentry if a DSN is configured.

    :returns: True if Sentry was initialised, False if SENTRY_DSN is unset.
    """
    dsn = os.environ.get("SENTRY_DSN")
    if not dsn:
        return False

    # Capture ERROR logs as events, and keep INFO+ as breadcrumbs
    logging_integration = LoggingIntegration(
        level=logging.INFO,
        event_level=logging.ERROR,
    )

    sentry_sdk.init(
        dsn=dsn,
        integrations=[
            FastApiIntegration(),
            logging_integration,
        ],
        environment=os.environ.get("APP_ENV", "local"),
        # Form submissions carry visitor names and addresses
        send_default_pii=False,
        traces_sample_rate=float(os.environ.get("SENTRY_TRACES_SAMPLE_RATE", "0.1")),
    )
    return True
