from pydantic import BaseModel

from prompipe.exposition import build_metric_line, build_payload


class MetricSample(BaseModel):
    name: str
    value: str
    metric_type: str = "gauge"
    help_text: str = ""
    labels: str = ""

    def metric_line(self) -> str:
        return build_metric_line(self.name, self.labels, self.value)

    def payload(self) -> str:
        return build_payload(
            self.name,
            self.value,
            metric_type=self.metric_type,
            description=self.help_text,
            labels=self.labels,
        )
