"""Tests for OpenAIToolSet schema retrieval and tool execution."""

import asyncio
import json

import pytest

from toolset_bridge import OpenAIToolSet, PollSettings
from toolset_bridge.types import ToolCallRequest

from fakes import (
    STAR_ACTION,
    WEATHER_ACTION,
    FakeToolset,
    SyncToolset,
    build_completion,
    build_run,
    tool_call,
)


def make_toolset(engine=None, entity_id="default"):
    return OpenAIToolSet(engine or FakeToolset(), entity_id=entity_id, poll=PollSettings(interval=0))


class TestSchemas:
    """get_actions / get_tools."""

    def test_get_actions_maps_every_descriptor(self):
        engine = FakeToolset()
        toolset = make_toolset(engine)

        tools = asyncio.run(toolset.get_actions())

        assert len(tools) == len(engine.actions)
        for tool, action in zip(tools, engine.actions):
            assert tool["type"] == "function"
            assert tool["function"]["name"] == action["name"]
            assert tool["function"]["description"] == action["description"]
            assert tool["function"]["parameters"] is action["parameters"]

    def test_get_actions_forwards_filter_and_entity(self):
        engine = FakeToolset()
        toolset = make_toolset(engine)

        tools = asyncio.run(toolset.get_actions(["GITHUB_STAR_REPO"], entity_id="alice"))

        assert [t["function"]["name"] for t in tools] == ["GITHUB_STAR_REPO"]
        assert engine.schema_calls == [
            ("actions", {"actions": ["GITHUB_STAR_REPO"], "entity_id": "alice"})
        ]

    def test_get_actions_returns_empty_list_when_nothing_matches(self):
        toolset = make_toolset()

        assert asyncio.run(toolset.get_actions(["UNKNOWN"])) == []

    def test_get_tools_filters_by_app(self):
        engine = FakeToolset()
        toolset = make_toolset(engine)

        tools = asyncio.run(toolset.get_tools(["weather"], tags=["important"], use_case="forecast"))

        assert [t["function"]["name"] for t in tools] == [WEATHER_ACTION["name"]]
        assert engine.schema_calls == [
            (
                "tools",
                {"apps": ["weather"], "tags": ["important"], "use_case": "forecast", "entity_id": None},
            )
        ]

    def test_sync_toolset_methods_are_supported(self):
        toolset = make_toolset(SyncToolset())

        assert asyncio.run(toolset.get_actions()) == []
        [tool] = asyncio.run(toolset.get_tools(["weather"]))
        assert tool["function"]["name"] == WEATHER_ACTION["name"]


class TestExecuteToolCall:
    """execute_tool_call."""

    def test_result_matches_direct_execution(self):
        engine = FakeToolset()
        toolset = make_toolset(engine)
        arguments = {"owner": "octo", "repo": "hello", "nested": {"tags": [1, 2]}}

        output = asyncio.run(
            toolset.execute_tool_call(tool_call("call_1", STAR_ACTION["name"], arguments))
        )
        direct = asyncio.run(FakeToolset().execute_action(STAR_ACTION["name"], arguments, "default"))

        assert isinstance(output, str)
        assert json.loads(output) == json.loads(json.dumps(direct))
        assert engine.executions == [(STAR_ACTION["name"], arguments, "default")]

    def test_explicit_entity_id_wins_over_default(self):
        engine = FakeToolset()
        toolset = make_toolset(engine, entity_id="team")

        asyncio.run(toolset.execute_tool_call(tool_call("c", "X", {}), "alice"))
        asyncio.run(toolset.execute_tool_call(tool_call("c", "X", {})))

        assert [e[2] for e in engine.executions] == ["alice", "team"]

    def test_accepts_tool_call_request(self):
        engine = FakeToolset()
        toolset = make_toolset(engine)

        asyncio.run(toolset.execute_tool_call(ToolCallRequest(id="c", name="X", arguments='{"a": 1}')))

        assert engine.executions == [("X", {"a": 1}, "default")]

    def test_invalid_json_arguments_propagate(self):
        engine = FakeToolset()
        toolset = make_toolset(engine)

        with pytest.raises(json.JSONDecodeError):
            asyncio.run(toolset.execute_tool_call(tool_call("c", "X", "{not json")))
        assert engine.executions == []

    def test_execution_errors_propagate_unchanged(self):
        error = RuntimeError("action failed")
        toolset = make_toolset(FakeToolset(error=error))

        with pytest.raises(RuntimeError) as excinfo:
            asyncio.run(toolset.execute_tool_call(tool_call("c", "X", {})))
        assert excinfo.value is error

    def test_sync_execute_action(self):
        engine = SyncToolset()
        toolset = make_toolset(engine)

        output = asyncio.run(toolset.execute_tool_call(tool_call("c", "X", {"q": "x"})))

        assert json.loads(output) == {"successful": True, "data": {"q": "x"}}
        assert engine.executions == [("X", {"q": "x"}, "default")]


class TestHandleToolCall:
    """handle_tool_call on chat completions."""

    def test_first_call_of_each_choice_only(self):
        engine = FakeToolset()
        toolset = make_toolset(engine)
        completion = build_completion(
            [
                [tool_call("a1", "A_FIRST", {"i": 1}), tool_call("a2", "A_SECOND", {"i": 2})],
                [tool_call("b1", "B_FIRST", {"i": 3}), tool_call("b2", "B_SECOND", {"i": 4})],
            ]
        )

        outputs = asyncio.run(toolset.handle_tool_call(completion))

        assert len(outputs) == 2
        assert [e[0] for e in engine.executions] == ["A_FIRST", "B_FIRST"]
        assert json.loads(outputs[1])["data"]["params"] == {"i": 3}

    def test_choices_without_tool_calls_are_skipped(self):
        engine = FakeToolset()
        toolset = make_toolset(engine)

        assert asyncio.run(toolset.handle_tool_call(build_completion([None]))) == []
        assert engine.executions == []


class TestHandleAssistantMessage:
    """handle_assistant_message on runs."""

    def test_one_output_per_pending_call(self):
        engine = FakeToolset()
        toolset = make_toolset(engine)
        run = build_run(
            "requires_action",
            [tool_call(f"call_{i}", "X", {"i": i}) for i in range(3)],
        )

        outputs = asyncio.run(toolset.handle_assistant_message(run, "alice"))

        assert [o["tool_call_id"] for o in outputs] == ["call_0", "call_1", "call_2"]
        assert len({o["tool_call_id"] for o in outputs}) == 3
        for i, output in enumerate(outputs):
            assert json.loads(output["output"])["data"]["params"] == {"i": i}
        assert {e[2] for e in engine.executions} == {"alice"}

    def test_outputs_keep_submission_order_when_completion_order_differs(self):
        engine = FakeToolset(delays={"slow": 0.05, "fast": 0})
        toolset = make_toolset(engine)
        run = build_run(
            "requires_action",
            [tool_call("slow_call", "X", {"key": "slow"}), tool_call("fast_call", "X", {"key": "fast"})],
        )

        outputs = asyncio.run(toolset.handle_assistant_message(run))

        assert [o["tool_call_id"] for o in outputs] == ["slow_call", "fast_call"]

    def test_calls_run_concurrently(self):
        engine = FakeToolset(delays={"k": 0.2})
        toolset = make_toolset(engine)
        run = build_run(
            "requires_action",
            [tool_call(f"c{i}", "X", {"key": "k"}) for i in range(5)],
        )

        async def timed():
            loop = asyncio.get_running_loop()
            start = loop.time()
            await toolset.handle_assistant_message(run)
            return loop.time() - start

        assert asyncio.run(timed()) < 0.2 * 5

    def test_run_without_pending_action(self):
        toolset = make_toolset()

        assert asyncio.run(toolset.handle_assistant_message(build_run("in_progress"))) == []
