from __future__ import annotations

import pytest

from conftest import ScriptedPrompter
from core.services.dispatcher import Dispatcher, Step
from core.services.session import (
    CONTINUE_MESSAGE,
    MENU_CHOICES,
    MENU_MESSAGE,
    MOVIE_PROMPT,
    SONG_PROMPT,
    Session,
    SessionState,
)


@pytest.fixture
def dispatcher(recording_actions, recording_log, settings) -> Dispatcher:
    return Dispatcher(
        actions=recording_actions,
        logger=recording_log,
        task_file=settings.task_file_path,
    )


def make_session(dispatcher, prompter, echoed=None) -> Session:
    echoed = echoed if echoed is not None else []
    return Session(dispatcher=dispatcher, prompter=prompter, echo=echoed.append)


def test_menu_choices():
    assert [value for _, value in MENU_CHOICES] == [
        "my-tweets",
        "spotify-this-song",
        "movie-this",
        "do-what-it-says",
        "exit",
    ]
    assert MENU_CHOICES[0][0] == "View my tweets"


async def test_declining_continue_ends_without_further_output(dispatcher, recording_actions, recording_log):
    prompter = ScriptedPrompter(confirms=[False])
    echoed: list[str] = []

    await make_session(dispatcher, prompter, echoed).run("my-tweets")

    assert recording_actions.calls == [("show_posts", None)]
    assert prompter.asked == [("confirm", CONTINUE_MESSAGE)]
    assert recording_log.messages == ["Processing my-tweets command"]
    assert echoed == []


async def test_no_command_opens_menu_then_asks_for_song(dispatcher, recording_actions):
    prompter = ScriptedPrompter(selections=["spotify-this-song"], texts=["Africa"], confirms=[False])
    echoed: list[str] = []

    await make_session(dispatcher, prompter, echoed).run()

    assert prompter.asked == [
        ("select", MENU_MESSAGE),
        ("text", SONG_PROMPT),
        ("confirm", CONTINUE_MESSAGE),
    ]
    assert echoed == ["spotify-this-song"]
    assert recording_actions.calls == [("find_track", "Africa")]


async def test_empty_movie_answer_uses_default(dispatcher, recording_actions):
    prompter = ScriptedPrompter(selections=["movie-this"], texts=[""], confirms=[False])

    await make_session(dispatcher, prompter).run("not-a-command")

    assert ("text", MOVIE_PROMPT) in prompter.asked
    assert recording_actions.calls == [("lookup_movie", "Mr. Nobody")]


async def test_exit_from_menu(dispatcher, recording_actions):
    prompter = ScriptedPrompter(selections=["exit"])

    await make_session(dispatcher, prompter).run()

    assert prompter.asked == [("select", MENU_MESSAGE)]
    assert recording_actions.calls == []


async def test_continue_loops_back_to_menu(dispatcher, recording_actions, settings):
    settings.task_file_path.write_text("my-tweets", encoding="utf-8")
    prompter = ScriptedPrompter(
        selections=["do-what-it-says", "movie-this"],
        texts=["Alien"],
        confirms=[True, True, False],
    )

    await make_session(dispatcher, prompter).run("spotify-this-song", "Africa")

    assert recording_actions.calls == [
        ("find_track", "Africa"),
        ("show_posts", None),
        ("lookup_movie", "Alien"),
    ]
    assert [kind for kind, _ in prompter.asked] == [
        "confirm",
        "select",
        "confirm",
        "select",
        "text",
        "confirm",
    ]


async def test_menu_commands_without_parameter_dispatch_directly(dispatcher):
    prompter = ScriptedPrompter(selections=["my-tweets"])
    session = make_session(dispatcher, prompter)

    state = await session.advance(SessionState(Step.MENU))

    assert state == SessionState(Step.DISPATCH, "my-tweets")
    assert prompter.asked == [("select", MENU_MESSAGE)]
