"""Render a single sample in Prometheus text exposition format."""

from typing import TextIO

from jinja2 import Template

from prompipe.errors import InputReadError

METRIC_LINE_TEMPLATE = Template(
    """{{ metric_name }}{{ "{" }}{{ labels }}{{ "}" }} {{ value }}
""",
    keep_trailing_newline=True,
)

TEMPLATE = Template(
    """{% if description %}# HELP {{ metric_name }} {{ description }}
{% endif %}# TYPE {{ metric_name }} {{ metric_type }}
{{ metric_line }}""",
    keep_trailing_newline=True,
)


def build_metric_line(metric_name: str, labels: str, value: str) -> str:
    return METRIC_LINE_TEMPLATE.render(
        metric_name=metric_name, labels=labels, value=value
    )


def build_payload(
    metric_name: str,
    value: str,
    metric_type: str = "gauge",
    description: str = "",
    labels: str = "",
) -> str:
    """Build the HELP/TYPE/sample payload; the value is inserted verbatim."""
    return TEMPLATE.render(
        metric_name=metric_name,
        metric_type=metric_type,
        description=description,
        metric_line=build_metric_line(metric_name, labels, value),
    )


def read_metric_value(stream: TextIO) -> str:
    """Read one line from stream and strip its line terminator."""
    line = stream.readline()
    if line == "":
        raise InputReadError("no metric value available on stdin")
    return line.removesuffix("\n").removesuffix("\r")
