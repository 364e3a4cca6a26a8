import io
import logging
import shlex
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import requests
from behave import *
from hamcrest import assert_that, contains_string, equal_to, has_item, is_not

from prompipe.cli import run


class RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__(logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)

    def messages(self, level=logging.DEBUG):
        return [r.getMessage() for r in self.records if r.levelno >= level]


def stub_gateway(context, base_url, **post_kwargs):
    if context.gateway_patcher is not None:
        context.gateway_patcher.stop()
    context.gateway_url = base_url
    context.gateway_patcher = patch("requests.Session.post", **post_kwargs)
    context.gateway_post = context.gateway_patcher.start()


@given('a Pushgateway at "{base_url}" answering {status:d}')
def step_impl(context, base_url, status):
    response = MagicMock(status_code=status, reason="", text="")
    if status >= 400:
        response.text = "text format parsing error"
    stub_gateway(context, base_url, return_value=response)


@given("an unreachable Pushgateway")
def step_impl(context):
    stub_gateway(
        context,
        "http://localhost:9091",
        side_effect=requests.ConnectionError("Connection refused"),
    )


@given('stdin contains "{value}"')
def step_impl(context, value):
    context.stdin = MagicMock(wraps=io.StringIO(value + "\n"))


@given("stdin is empty")
def step_impl(context):
    context.stdin = MagicMock(wraps=io.StringIO(""))


@when('prompipe is run with "{args}"')
def step_impl(context, args):
    settings = SimpleNamespace(
        LABELS=context.env_labels, GATEWAY_URL=context.gateway_url, TIMEOUT=5.0
    )
    context.stdout = io.StringIO()
    context.log = RecordingHandler()
    # same starting level as main(); -v raises it inside run()
    root = logging.getLogger()
    old_level = root.level
    root.setLevel(logging.INFO)
    root.addHandler(context.log)
    try:
        context.exit_code = run(
            shlex.split(args),
            stdin=context.stdin,
            stdout=context.stdout,
            settings=settings,
        )
    finally:
        root.removeHandler(context.log)
        root.setLevel(old_level)


@then("the exit code is {code:d}")
def step_impl(context, code):
    assert_that(context.exit_code, equal_to(code))


@then('the gateway received a POST to "{url}"')
def step_impl(context, url):
    assert_that(context.gateway_post.call_count, equal_to(1))
    assert_that(context.gateway_post.call_args.args[0], equal_to(url))
    assert_that(
        context.gateway_post.call_args.kwargs["headers"]["Content-Type"],
        equal_to("text/plain"),
    )


@then("the pushed payload is")
def step_impl(context):
    payload = context.gateway_post.call_args.kwargs["data"].decode("utf-8")
    assert_that(payload, equal_to(context.text + "\n"))


@then("the gateway received no request")
def step_impl(context):
    assert_that(context.gateway_post.called, equal_to(False))


@then("stdin was not read")
def step_impl(context):
    assert_that(context.stdin.readline.called, equal_to(False))


@then("stdout is '{expected}'")
def step_impl(context, expected):
    assert_that(context.stdout.getvalue(), equal_to(expected + "\n"))


@then("nothing is printed to stdout")
def step_impl(context):
    assert_that(context.stdout.getvalue(), equal_to(""))


@then("the error '{text}' is logged")
@then('the error "{text}" is logged')
def step_impl(context, text):
    assert_that(context.log.messages(logging.ERROR), has_item(contains_string(text)))


@then('the label trace "{message}" is logged')
def step_impl(context, message):
    assert_that(context.log.messages(logging.DEBUG), has_item(equal_to(message)))


@then("no label trace is logged")
def step_impl(context):
    assert_that(
        context.log.messages(logging.DEBUG),
        is_not(has_item(contains_string("Formatting label"))),
    )
