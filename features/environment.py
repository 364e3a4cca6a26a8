import os
from unittest.mock import patch

from prompipe.logging_utils import setup_logging


def before_all(context):
    # Setup behave's logging
    context.config.setup_logging()

    # Initialize logging with ISO 8601 UTC timestamps
    setup_logging()


def before_scenario(context, scenario):
    # Every scenario starts without PROMPIPE_* variables; patch.dict restores them afterwards
    context.environ_patcher = patch.dict(os.environ)
    context.environ_patcher.start()
    for name in [k for k in os.environ if k.startswith("PROMPIPE_")]:
        del os.environ[name]

    context.env_labels = ""
    context.gateway_patcher = None


def after_scenario(context, scenario):
    if context.gateway_patcher is not None:
        context.gateway_patcher.stop()
    context.environ_patcher.stop()
