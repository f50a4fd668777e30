"""Tests for the CLI conversation host."""

from flowform.cli.main import collected_values, converse, load_form
from flowform.core.state import SessionStatus
from helpers import ScriptedLLMClient, make_session, reply


async def test_converse_runs_until_complete(contact_form, empty_session):
    client = ScriptedLLMClient(
        reply("Thanks John! Email?", name="John"),
        reply("All set.", email="john@example.com"),
    )
    output: list[str] = []

    session = await converse(contact_form, empty_session, client, ["John", "john@example.com", "unused"], output.append)

    assert output == ["Thanks John! Email?", "All set."]
    assert session.status is SessionStatus.COMPLETED
    assert len(session.turns) == 4
    assert collected_values(contact_form, session) == {"name": "John", "email": "john@example.com"}
    assert len(client.calls) == 2
    # second call replays the first exchange
    assert [m.content for m in client.calls[1][1:]] == ["John", "Thanks John! Email?", "john@example.com"]


async def test_rejected_turn_leaves_session_unchanged(contact_form, empty_session):
    client = ScriptedLLMClient(
        reply("Thanks", email="nope"),
        reply("Got it", name="John"),
    )
    output: list[str] = []

    session = await converse(contact_form, empty_session, client, ["nope", "John", ""], output.append)

    assert "Invalid email format" in output[0]
    assert output[1] == "Got it"
    assert [t.content for t in session.turns] == ["John", "Got it"]
    assert session.status is SessionStatus.ABANDONED


async def test_end_of_input_abandons(contact_form, empty_session):
    session = await converse(contact_form, empty_session, ScriptedLLMClient(reply("Hi")), [], lambda _: None)

    assert session.status is SessionStatus.ABANDONED


def test_collected_values_in_display_order(signup_form):
    session = make_session(("f_age", 36), ("f_name", "Ada"), form_id="signup")

    assert list(collected_values(signup_form, session)) == ["fullName", "age"]


def test_load_form(tmp_path, contact_form):
    path = tmp_path / "form.json"
    path.write_text(contact_form.model_dump_json())

    assert load_form(path) == contact_form
