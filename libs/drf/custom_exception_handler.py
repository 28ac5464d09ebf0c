import logging

import sentry_sdk
from drf_standardized_errors.handler import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


def exception_handler(exc, context):
    response = drf_exception_handler(exc, context)

    # Unhandled by DRF: report and let Django turn it into a 500
    if response is None:
        view = context.get("view")
        logger.exception("Unhandled API exception in %s", view.__class__.__name__ if view else "unknown view")
        sentry_sdk.capture_exception(exc)
        raise exc

    if response.status_code >= 500:
        sentry_sdk.capture_exception(exc)

    return response
