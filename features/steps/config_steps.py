import os
from unittest.mock import patch

from behave import *
from hamcrest import assert_that, equal_to

from prompipe.config import Settings


@given('the environment variable {name} is "{value}"')
def step_impl(context, name, value):
    # os.environ is restored by the patch started in before_scenario
    os.environ[name] = value


@when("the settings are loaded")
def step_impl(context):
    context.settings = None
    context.error = None
    try:
        # only the patched os.environ counts; a stray .env must not leak in
        with patch("prompipe.config.load_dotenv"):
            context.settings = Settings()
    except ValueError as e:
        context.error = e


@then('the gateway URL is "{url}"')
def step_impl(context, url):
    assert_that(context.settings.GATEWAY_URL, equal_to(url))


@then("the timeout is {seconds:f} seconds")
def step_impl(context, seconds):
    assert_that(context.settings.TIMEOUT, equal_to(seconds))


@then("the environment labels are empty")
def step_impl(context):
    assert_that(context.settings.LABELS, equal_to(""))


@then('the environment labels are "{labels}"')
def step_impl(context, labels):
    assert_that(context.settings.LABELS, equal_to(labels))


@then('loading the settings fails with "{message}"')
def step_impl(context, message):
    assert_that(context.settings, equal_to(None))
    assert_that(str(context.error), equal_to(message))
