from prometheus_client import (
    Counter,
    Histogram,
    generate_latest,
)


completions_total = Counter(
    "promptcraft_completions_total",
    "Completion requests sent, by provider and outcome",
    ["provider", "outcome"],
)

completion_latency = Histogram(
    "promptcraft_completion_latency_seconds",
    "Wall time of one completion request",
    ["provider"],
    buckets=(0.1, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0, 120.0),
)

llm_tokens = Counter(
    "promptcraft_llm_tokens_total",
    "Total LLM tokens consumed",
    ["provider", "direction"],
)


def render_metrics() -> str:
    return generate_latest().decode("utf-8")
