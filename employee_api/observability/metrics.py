"""
Application Metrics with Prometheus
=============================================================================
CONCEPT: Metrics

Logs record individual events; metrics answer aggregate questions:

  - "How many listing requests ended in a 404 in the last hour?"
  - "What's the 95th percentile latency of the count query?"
  - "Are data queries failing or timing out?"

The app exposes these at /metrics; Prometheus scrapes them.

METRICS:
  employee_queries_total{query, status}   COUNTER    one per executed statement
  query_latency_seconds{query}            HISTOGRAM  statement latency
  listing_requests_total{outcome}         COUNTER    one per listing request,
                                                     outcome = "ok" or the
                                                     error class name
=============================================================================
"""

from prometheus_client import Counter, Histogram


employee_queries_total = Counter(
    name="employee_queries_total",
    documentation="Statements executed against the employee store, by query label and status.",
    labelnames=["query", "status"],
)


query_latency_histogram = Histogram(
    name="query_latency_seconds",
    documentation="Latency of employee store statements in seconds.",
    labelnames=["query"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)


listing_requests_total = Counter(
    name="listing_requests_total",
    documentation="Employee listing requests, by outcome.",
    labelnames=["outcome"],
)


def record_query(query: str, status: str, duration_seconds: float) -> None:
    """
    Record one executed statement.

    PARAMETERS:
      query: Statement label, e.g. "count" or "data".
      status: "success", "error" or "timeout".
      duration_seconds: Wall time spent waiting on the store.
    """
    employee_queries_total.labels(query=query, status=status).inc()
    query_latency_histogram.labels(query=query).observe(duration_seconds)


def record_listing(outcome: str) -> None:
    listing_requests_total.labels(outcome=outcome).inc()
