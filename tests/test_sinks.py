import logging

from contentgen.adapters.warnings.sinks import CollectingWarningSink, LoggingWarningSink


def test_logging_sink_emits_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="contentgen.warnings"):
        LoggingWarningSink().warn("There is no meta.txt in x, skipping..")
    assert caplog.records[-1].levelno == logging.WARNING
    assert caplog.records[-1].name == "contentgen.warnings"
    assert "meta.txt in x" in caplog.records[-1].getMessage()


def test_collecting_sink_keeps_order():
    sink = CollectingWarningSink()
    sink.warn("a")
    sink.warn("b")
    assert sink.messages == ["a", "b"]
