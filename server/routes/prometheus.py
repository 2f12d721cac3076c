from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import APIRouter, Request, Response
import time

router = APIRouter()

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP Requests",
    ["method", "endpoint", "http_status"]
)

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["endpoint"]
)

EXCEPTION_COUNT = Counter(
    "http_exceptions_total",
    "Total exceptions",
    ["endpoint"]
)

@router.get("/")
def metrics():
    # Default registry: includes the alert_* series from alert_worker.metrics
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

def _endpoint_label(request: Request) -> str:
    # Route template (/alerts/{name}) so alert names do not become label values
    route = request.scope.get("route")
    return getattr(route, "path", request.url.path)

async def metrics_middleware(request: Request, call_next):
    start_time = time.perf_counter()

    try:
        response = await call_next(request)
    except Exception:
        EXCEPTION_COUNT.labels(endpoint=_endpoint_label(request)).inc()
        raise

    endpoint = _endpoint_label(request)
    REQUEST_LATENCY.labels(endpoint=endpoint).observe(time.perf_counter() - start_time)
    REQUEST_COUNT.labels(
        method=request.method,
        endpoint=endpoint,
        http_status=response.status_code
    ).inc()

    return response
