from __future__ import annotations

from streamlog.metrics.metrics import MetricsCollector, RegistryMetrics


def test_disabled_metrics_noop_and_state() -> None:
    mc = MetricsCollector(enabled=False)
    mc.record_dispatch("cout")
    mc.record_bind(replaced=False)
    mc.record_bind(replaced=True)

    assert mc.is_enabled is False
    assert mc.registry is None
    assert mc.snapshot() == RegistryMetrics(
        messages_dispatched=1, sinks_bound=2, sinks_replaced=1
    )


def test_enabled_counters() -> None:
    mc = MetricsCollector(enabled=True)
    mc.record_dispatch("cout")
    mc.record_dispatch("cout")
    mc.record_dispatch("errors")
    mc.record_bind(replaced=False)
    mc.record_bind(replaced=True)

    reg = mc.registry
    assert reg is not None
    assert (
        reg.get_sample_value("streamlog_messages_dispatched_total", {"stream": "cout"})
        == 2.0
    )
    assert (
        reg.get_sample_value(
            "streamlog_messages_dispatched_total", {"stream": "errors"}
        )
        == 1.0
    )
    assert reg.get_sample_value("streamlog_sinks_bound_total") == 2.0
    assert reg.get_sample_value("streamlog_sinks_replaced_total") == 1.0


def test_collectors_are_isolated() -> None:
    a = MetricsCollector(enabled=True)
    b = MetricsCollector(enabled=True)
    a.record_dispatch("cout")

    assert b.registry is not None
    assert b.registry.get_sample_value(
        "streamlog_messages_dispatched_total", {"stream": "cout"}
    ) is None


def test_snapshot_is_a_copy() -> None:
    mc = MetricsCollector()
    snap = mc.snapshot()
    snap.messages_dispatched = 99

    assert mc.snapshot().messages_dispatched == 0
