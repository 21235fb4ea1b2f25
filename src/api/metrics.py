from prometheus_client import Counter, Histogram, REGISTRY


# we check if they are already registered to avoid errors during hot reloads or test runs
def get_or_create_metric(name, documentation, metric_type, **kwargs):
    try:
        return metric_type(name, documentation, **kwargs)
    except ValueError:
        return REGISTRY._names_to_collectors[name]


REQUESTS_TOTAL = get_or_create_metric(
    "mind_dump_requests_total",
    "Total requests",
    Counter,
    labelnames=["endpoint", "status"],
)

REQUEST_LATENCY_SECONDS = get_or_create_metric(
    "mind_dump_request_latency_seconds",
    "Request latency",
    Histogram,
    labelnames=["endpoint"],
)

CANDIDATES_DERIVED_TOTAL = get_or_create_metric(
    "mind_dump_candidates_derived_total",
    "Total task candidates derived from utterances",
    Counter,
)

CANDIDATES_BY_CATEGORY_TOTAL = get_or_create_metric(
    "mind_dump_candidates_by_category_total",
    "Task candidates per automatically assigned category",
    Counter,
    labelnames=["category"],
)

TASKS_CONFIRMED_TOTAL = get_or_create_metric(
    "mind_dump_tasks_confirmed_total",
    "Confirmed tasks",
    Counter,
    labelnames=["kind"],
)
