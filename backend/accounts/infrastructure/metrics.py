"""Request Metrics — Prometheus counters and latency histograms per CRUD verb.

Invariants:
    - One request counter, one error counter and one latency histogram per verb
    - Successful requests increment RequestCount* and observe Latency*
    - Failed requests (status >= 400 or unhandled exception) increment Error* only
    - Metrics live in the default prometheus_client registry (one set per process)
"""

from prometheus_client import Counter, Histogram

VERBS = ("add", "get", "put", "delete")

REQUEST_COUNT = {
    "add": Counter("RequestCountAdd", "Successful POST /user requests"),
    "get": Counter("RequestCountGet", "Successful GET /user/{id} requests"),
    "put": Counter("RequestCountPut", "Successful PUT /user/{id} requests"),
    "delete": Counter("RequestCountDelete", "Successful DELETE /user/{id} requests"),
}

ERROR_COUNT = {
    "add": Counter("ErrorAdd", "Failed POST /user requests"),
    "get": Counter("ErrorGet", "Failed GET /user/{id} requests"),
    "put": Counter("ErrorPut", "Failed PUT /user/{id} requests"),
    "delete": Counter("ErrorDelete", "Failed DELETE /user/{id} requests"),
}

LATENCY = {
    "add": Histogram("LatencyAdd", "POST /user latency (s)"),
    "get": Histogram("LatencyGet", "GET /user/{id} latency (s)"),
    "put": Histogram("LatencyPut", "PUT /user/{id} latency (s)"),
    "delete": Histogram("LatencyDelete", "DELETE /user/{id} latency (s)"),
}


def record_success(verb: str, seconds: float) -> None:
    REQUEST_COUNT[verb].inc()
    LATENCY[verb].observe(seconds)


def record_error(verb: str) -> None:
    ERROR_COUNT[verb].inc()
