import json

import pytest


def test_health(client):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_create_plan(client):
    resp = client.post("/api/plan", json={"total_words": 100, "plan_days": 10, "include_review": True})
    assert resp.status_code == 200
    body = resp.json()

    assert body["request"] == {"total_words": 100, "plan_days": 10, "include_review": True}
    assert body["summary"] == {
        "total_new_words": 100,
        "total_review_words": 260,
        "total_workload": 360,
        "peak_daily": 50,
    }
    assert len(body["days"]) == 10
    day5 = body["days"][4]
    assert day5["day"] == 5
    assert day5["review_sources"] == [
        {"source_day": 1, "words_reviewed": 10},
        {"source_day": 3, "words_reviewed": 10},
        {"source_day": 4, "words_reviewed": 10},
    ]
    assert day5["review_words"] == 30
    assert day5["total_daily"] == 40
    assert day5["note"].startswith("Review sources: Day 1: 10 words")


def test_create_plan_without_review(client):
    resp = client.post("/api/plan", json={"total_words": 23, "plan_days": 5, "include_review": False})
    assert resp.status_code == 200
    days = resp.json()["days"]
    assert [d["new_words"] for d in days] == [5, 5, 5, 4, 4]
    assert all(d["review_words"] == 0 for d in days)


def test_review_flag_defaults_to_settings(client, monkeypatch: pytest.MonkeyPatch):
    from wordplan.config import settings

    monkeypatch.setattr(settings, "default_include_review", False)
    resp = client.post("/api/plan", json={"total_words": 30, "plan_days": 3})
    assert resp.status_code == 200
    assert resp.json()["request"]["include_review"] is False


@pytest.mark.parametrize(
    "payload, detail",
    [
        ({"total_words": 0, "plan_days": 5}, "Please enter valid positive numbers."),
        ({"total_words": 10, "plan_days": -2}, "Please enter valid positive numbers."),
        (
            {"total_words": 9, "plan_days": 10},
            "Total words cannot be less than the number of plan days. Please adjust.",
        ),
    ],
)
def test_invalid_input_returns_user_message(client, payload, detail):
    resp = client.post("/api/plan", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"detail": detail}


@pytest.mark.parametrize(
    "payload",
    [
        {"total_words": True, "plan_days": 1},
        {"total_words": "many", "plan_days": 10},
        {"total_words": 10.5, "plan_days": 2},
        {"total_words": 100, "plan_days": ""},
        {"plan_days": 10},
    ],
)
def test_non_numeric_input_returns_user_message(client, payload):
    resp = client.post("/api/plan", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Please enter valid positive numbers."}


def test_numeric_strings_and_whole_floats_are_accepted(client):
    resp = client.post("/api/plan", json={"total_words": "100", "plan_days": 10.0})
    assert resp.status_code == 200
    assert resp.json()["request"]["total_words"] == 100
    assert resp.json()["request"]["plan_days"] == 10


def test_structured_values_are_rejected_by_schema(client):
    resp = client.post("/api/plan", json={"total_words": [100], "plan_days": 10})
    assert resp.status_code == 422


def test_limit_from_settings(client, monkeypatch: pytest.MonkeyPatch):
    from wordplan.config import settings

    monkeypatch.setattr(settings, "max_plan_days", 30)
    resp = client.post("/api/plan", json={"total_words": 1000, "plan_days": 31})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Plan days must not exceed 30."


def test_plan_text(client):
    resp = client.post("/api/plan/text", json={"total_words": 23, "plan_days": 5})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    lines = resp.text.splitlines()
    assert lines[0] == "Vocabulary Study Plan"
    assert lines[4] == "Day 1\t5\t0\t5"
    assert lines[-1] == "Day 5\t4\t14\t18"


def test_plan_text_rejects_invalid_input(client):
    resp = client.post("/api/plan/text", json={"total_words": 3, "plan_days": 5})
    assert resp.status_code == 400


def test_curve(client):
    resp = client.get("/api/curve")
    assert resp.status_code == 200
    body = resp.json()
    assert len(body["points"]) == 31
    assert body["points"][0] == {"day": 0, "retention_without_review": 100.0, "retention_with_review": 100.0}
    assert body["points"][7]["retention_without_review"] == 36.79
    assert [m["day"] for m in body["markers"]] == [1, 2, 4, 7, 15, 30]


def test_runtime_config(client):
    resp = client.get("/api/config")
    assert resp.status_code == 200
    assert resp.json() == {
        "max_total_words": 100_000,
        "max_plan_days": 3650,
        "default_include_review": True,
        "short_plan_max_days": 10,
    }


def test_request_id_header(client):
    resp = client.get("/healthz")
    assert resp.headers.get("X-Request-ID")


def test_metrics_count_plans_and_rejections(client):
    client.post("/api/plan", json={"total_words": 100, "plan_days": 10})
    client.post("/api/plan", json={"total_words": 50, "plan_days": 5, "include_review": False})
    client.post("/api/plan", json={"total_words": 1, "plan_days": 5})

    snapshot = client.get("/metrics").json()

    assert snapshot["plans"] == {
        "plans_built": 2,
        "plans_with_review": 1,
        "days_planned": 15,
        "words_planned": 150,
        "rejected_inputs": 1,
    }
    assert snapshot["paths"]["/api/plan"]["count"] == 3
    assert snapshot["paths"]["/api/plan"]["errors"] == 0


def test_request_complete_log_carries_request_id(client, caplog: pytest.LogCaptureFixture):
    caplog.set_level("INFO")

    resp = client.post("/api/plan", json={"total_words": 20, "plan_days": 4})

    events = []
    for record in caplog.records:
        try:
            parsed = json.loads(record.getMessage())
        except ValueError:
            continue
        if isinstance(parsed, dict):
            events.append(parsed)
    completed = [e for e in events if e.get("event") == "request_complete" and e.get("path") == "/api/plan"]
    assert completed, "expected request_complete log"
    assert completed[-1]["request_id"] == resp.headers["X-Request-ID"]
    assert completed[-1]["status_code"] == 200
    built = [e for e in events if e.get("event") == "plan_built"]
    assert built and built[-1]["plan_days"] == 4


def test_text_endpoint_rejects_bool_input(client):
    resp = client.post("/api/plan/text", json={"total_words": 10, "plan_days": True})
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Please enter valid positive numbers."}
