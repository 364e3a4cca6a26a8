import io

from behave import *
from hamcrest import assert_that, equal_to, instance_of

from prompipe.errors import InputReadError
from prompipe.exposition import read_metric_value
from prompipe.model import MetricSample


def unescape(cell: str) -> str:
    return cell.replace("\\r", "\r").replace("\\n", "\n")


@given('a temp sample with value "{value}" and labels \'{labels}\'')
def step_impl(context, value, labels):
    context.sample = MetricSample(name="temp", value=value, labels=labels)


@given('a temp sample with value "{value}" and no labels')
def step_impl(context, value):
    context.sample = MetricSample(name="temp", value=value)


@given('the help text "{help_text}"')
def step_impl(context, help_text):
    context.sample.help_text = help_text


@given('the metric type "{metric_type}"')
def step_impl(context, metric_type):
    context.sample.metric_type = metric_type


@then("the payload is")
def step_impl(context):
    assert_that(context.sample.payload(), equal_to(context.text + "\n"))


@then("the metric line is '{line}'")
def step_impl(context, line):
    assert_that(context.sample.metric_line(), equal_to(line + "\n"))


@then("reading stdin gives")
def step_impl(context):
    for row in context.table:
        stream = io.StringIO(unescape(row["stdin"]))
        assert_that(read_metric_value(stream), equal_to(row["value"]))


@when("the metric value is read from an empty stdin")
def step_impl(context):
    context.error = None
    try:
        read_metric_value(io.StringIO(""))
    except InputReadError as e:
        context.error = e


@then("reading fails with an input error")
def step_impl(context):
    assert_that(context.error, instance_of(InputReadError))
