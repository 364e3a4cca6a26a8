"""Error kinds raised while building and pushing a metric.

Every error is terminal for the invocation; the CLI logs it and exits with 1.
"""


class PromPipeError(Exception):
    pass


class MissingRequiredArgument(PromPipeError):
    pass


class LabelFormatError(PromPipeError, ValueError):
    def __init__(self, token: str):
        super().__init__(f"invalid label: {token}")
        self.token = token


class InputReadError(PromPipeError):
    pass


class NetworkError(PromPipeError):
    pass


class GatewayRejection(PromPipeError):
    def __init__(self, status_code: int, reason: str, body: str):
        super().__init__(f"{status_code} {reason}: {body}")
        self.status_code = status_code
        self.reason = reason
        self.body = body
