import sentry_sdk

from nylas_calendar import config


def get_sentry_kwargs():
    """
    Returns Sentry configuration kwargs.

    Only errors classified by the request dispatcher are captured, see
    core.exceptions.handle_exception.
    """
    return {
        "dsn": config.SENTRY_DSN,
        "environment": config.SENTRY_ENVIRONMENT or "unknown",
        "traces_sample_rate": config.SENTRY_SAMPLE_RATE or 1.0,
    }


def init_sentry() -> bool:
    """Initialize Sentry once, when a DSN is configured."""
    if not config.SENTRY_DSN or sentry_sdk.get_client().is_active():
        return False
    sentry_sdk.init(**get_sentry_kwargs())
    return True
