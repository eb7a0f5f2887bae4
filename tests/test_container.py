import io
from unittest.mock import MagicMock

from ircline.backends import LoopbackConnection
from ircline.container import IrclineContainer
from ircline.output import OutputMode


def test_container_shares_session_between_services(tmp_path):
    container = IrclineContainer(
        writer=io.StringIO(),
        connector=MagicMock(),
        config_path=str(tmp_path / "missing.json"),
    )

    session = container.session()
    assert container.dispatcher().session is session
    assert container.presence_service().session is session
    assert container.dispatcher().sink is container.sink()
    assert container.presence_service().sink is container.sink()
    assert session.status_events_visible is True


def test_container_builds_sink_around_shared_formatter(tmp_path):
    writer = io.StringIO()
    container = IrclineContainer(
        writer=writer,
        output_mode=OutputMode.LINE_EDITOR,
        config_path=str(tmp_path / "missing.json"),
    )

    sink = container.sink()
    assert sink.formatter is container.formatter()
    assert sink.writer is writer
    assert sink.mode is OutputMode.LINE_EDITOR


def test_container_applies_status_events_from_config(tmp_path):
    path = tmp_path / "ircline_config.json"
    path.write_text('{"status_events": false}', encoding="utf-8")
    container = IrclineContainer(writer=io.StringIO(), config_path=str(path))

    assert container.session().status_events_visible is False
    assert container.sink().mode is OutputMode.STDIO
    assert container.dispatcher().connector is LoopbackConnection
