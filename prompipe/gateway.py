"""Pushgateway client: one POST per invocation, no retries."""

import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util import Retry

from prompipe.errors import GatewayRejection, NetworkError


def job_url(base_url: str, job_name: str) -> str:
    return f"{base_url.rstrip('/')}/metrics/job/{job_name}"


def push(payload: str, job_name: str, base_url: str, timeout: float = 30):
    """
    POST an exposition payload to the Pushgateway under the given job.

    Args:
        payload: Text exposition payload
        job_name: Value of the job grouping key
        base_url: Gateway base URL, e.g. http://localhost:9091
        timeout: Request timeout in seconds

    Returns:
        requests.Response: The gateway response

    Raises:
        NetworkError: If the request could not be sent
        GatewayRejection: If the gateway answers with a non-2xx status
    """
    endpoint = job_url(base_url, job_name)
    logging.debug(f"Sending POST request to {endpoint} with payload {payload!r}")

    retry = Retry(total=0, raise_on_status=False)
    adapter = HTTPAdapter(max_retries=retry)
    session = requests.Session()
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    try:
        response = session.post(
            endpoint,
            data=payload.encode("utf-8"),
            headers={"Content-Type": "text/plain"},
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise NetworkError(f"Error sending request to Pushgateway: {e}") from e
    finally:
        session.close()

    logging.debug(f"Response status: {response.status_code}, Response: {response.text}")
    if not 200 <= response.status_code < 300:
        raise GatewayRejection(response.status_code, response.reason, response.text)
    return response
