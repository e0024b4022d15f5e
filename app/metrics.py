from flask import request
from prometheus_client import CollectorRegistry, Histogram, Counter
from prometheus_flask_exporter import PrometheusMetrics
from sqlalchemy import event
import time

from models import db

DB_QUERY_BUCKETS = (0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2, 5)


def init_app(app):
    """Expose /metrics and attach DB timing and HTTP error hooks.

    Each app gets its own registry so several instances (tests, CLI) can
    coexist in one process.
    """
    registry = CollectorRegistry()
    metrics = PrometheusMetrics(app, path="/metrics", registry=registry)
    if not app.config.get("TESTING"):
        metrics.info("app_info", "Application info", version="1.0.0")

    db_query_duration = Histogram(
        "db_query_duration_seconds",
        "Database query duration in seconds",
        buckets=DB_QUERY_BUCKETS,
        registry=registry,
    )
    error_counter = Counter(
        "storefront_http_errors_total",
        "Count of HTTP responses with status >= 400",
        ["endpoint", "method", "code"],
        registry=registry,
    )

    with app.app_context():
        engine = db.engine

        @event.listens_for(engine, "before_cursor_execute")
        def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
            conn.info.setdefault("_query_start_time", []).append(time.time())

        @event.listens_for(engine, "after_cursor_execute")
        def after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
            start = conn.info.get("_query_start_time").pop(-1)
            db_query_duration.observe(time.time() - start)

    @app.after_request
    def track_errors(resp):
        if resp.status_code >= 400:
            endpoint = request.endpoint or "unknown"
            error_counter.labels(endpoint, request.method, resp.status_code).inc()
        return resp

    app.extensions["metrics_registry"] = registry
    return metrics
