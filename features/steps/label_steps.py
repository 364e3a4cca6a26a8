import logging

from behave import *
from hamcrest import assert_that, calling, equal_to, empty, raises

from prompipe.errors import LabelFormatError
from prompipe.label_utils import (
    combine_labels,
    format_label,
    format_labels,
    resolve_labels,
)


class TraceHandler(logging.Handler):
    def __init__(self):
        super().__init__(logging.DEBUG)
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


def trace_logger(context):
    handler = TraceHandler()
    logger = logging.getLogger(f"prompipe.trace.{id(context)}")
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    context.trace = handler
    return logger


def format_into_context(context, func, *args):
    context.formatted = None
    context.error = None
    try:
        context.formatted = func(*args, trace_logger(context))
    except LabelFormatError as e:
        context.error = e


@then("combining the label sources gives")
def step_impl(context):
    for row in context.table:
        assert_that(
            combine_labels(row["env_labels"], row["cli_labels"]),
            equal_to(row["combined"]),
        )


@then("formatting each label gives")
def step_impl(context):
    for row in context.table:
        assert_that(format_label(row["token"]), equal_to(row["formatted"]))


@then("formatting each label fails")
def step_impl(context):
    for row in context.table:
        assert_that(
            calling(format_label).with_args(row["token"]),
            raises(LabelFormatError, f"invalid label: {row['token']}"),
            row["reason"],
        )


@when('the label list "{raw}" is formatted')
def step_impl(context, raw):
    format_into_context(context, format_labels, raw)


@when("an empty label list is formatted")
def step_impl(context):
    format_into_context(context, format_labels, "")


@given('the environment labels "{labels}"')
def step_impl(context, labels):
    context.env_labels = labels


@given("the environment labels '{labels}'")
def step_impl(context, labels):
    context.env_labels = labels


@when('the command-line labels "{labels}" are resolved')
def step_impl(context, labels):
    format_into_context(context, resolve_labels, labels, context.env_labels)


@when("no command-line labels are resolved")
def step_impl(context):
    format_into_context(context, resolve_labels, "", context.env_labels)


@then("the formatted labels are '{expected}'")
def step_impl(context, expected):
    assert_that(context.error, equal_to(None))
    assert_that(context.formatted, equal_to(expected))


@then("the formatted labels are empty")
def step_impl(context):
    assert_that(context.error, equal_to(None))
    assert_that(context.formatted, equal_to(""))


@then('formatting fails with "{message}"')
def step_impl(context, message):
    assert_that(context.formatted, equal_to(None))
    assert_that(str(context.error), equal_to(message))


@then('the labels "{tokens}" were traced')
def step_impl(context, tokens):
    expected = [f"Formatting label {token}" for token in tokens.split(",")]
    assert_that(context.trace.messages, equal_to(expected))


@then("no labels were traced")
def step_impl(context):
    assert_that(context.trace.messages, empty())
