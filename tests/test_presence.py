import io
from datetime import datetime

from ircline.formatting import MessageFormatter
from ircline.output import OutputSink
from ircline.services import PresenceService
from ircline.state import SessionState


def build_presence():
    writer = io.StringIO()
    sink = OutputSink(
        writer, formatter=MessageFormatter(clock=lambda: datetime(2024, 1, 2, 21, 30))
    )
    session = SessionState()
    return PresenceService(session, sink), session, writer


def test_join_records_nick_and_shows_status():
    presence, session, writer = build_presence()
    presence.on_join("alice", "#go")

    assert session.completion.nicks == {"alice": "alice"}
    assert writer.getvalue() == "21:30 alice has joined #go\n"


def test_status_events_hidden_after_toggle_but_directory_still_updated():
    presence, session, writer = build_presence()
    session.toggle_status_events()
    presence.on_join("alice", "#go")
    presence.on_part("alice", "#go", "bye")
    presence.on_quit("bob")

    assert writer.getvalue() == ""
    assert session.completion.nicks == {"alice": "alice"}


def test_quit_forgets_nick():
    presence, session, writer = build_presence()
    presence.on_join("alice", "#go")
    presence.on_quit("alice", "Ping timeout")

    assert session.completion.nicks == {}
    assert writer.getvalue().splitlines()[-1] == "21:30 alice has quit (Ping timeout)"


def test_nick_change_renames_and_follows_current_target():
    presence, session, _writer = build_presence()
    presence.on_join("alice", "#go")
    session.current_target = "alice"
    presence.on_nick("alice", "alicia")

    assert session.completion.nicks == {"alicia": "alicia"}
    assert session.current_target == "alicia"


def test_names_strip_mode_prefixes():
    presence, session, writer = build_presence()
    presence.on_names("#go", ["@op", "+voiced", "plain"])

    assert set(session.completion.nicks) == {"op", "voiced", "plain"}
    assert writer.getvalue() == "21:30 Names on #go: op voiced plain\n"


def test_incoming_messages_are_rendered_even_when_status_hidden():
    presence, session, writer = build_presence()
    session.toggle_status_events()
    presence.on_message("bob", "#go", "hi\x07 all")
    presence.on_message("bob", "#go", "waves", action=True)

    assert writer.getvalue().splitlines() == [
        "21:30 #go <bob> hi? all",
        "21:30 #go [bob waves]",
    ]
    assert "bob" in session.completion.nicks
