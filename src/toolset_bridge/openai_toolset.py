"""
OpenAI toolset: exposes toolset actions as OpenAI function tools and runs
the tool calls the model asks for.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any, Optional, Sequence

from openai import AsyncOpenAI
from openai.types.chat import ChatCompletion

from toolset_bridge._compat import DeprecatedAliasesMixin
from toolset_bridge.adapters import OpenAIToolAdapter
from toolset_bridge.config import PollSettings, get_default_entity_id
from toolset_bridge.polling import RunPoller
from toolset_bridge.toolset import BaseToolset, call_toolset
from toolset_bridge.types import RunStatus, ToolCallRequest, ToolOutput, ToolSchema
from toolset_bridge.types.run import is_pending, resource_id, run_status

if TYPE_CHECKING:
    from openai.types.beta import Thread
    from openai.types.beta.threads import Run

__all__ = ["OpenAIToolSet"]


class OpenAIToolSet(DeprecatedAliasesMixin):
    """
    Toolset binding for the OpenAI chat-completions and Assistants APIs.

    Example:
        >>> toolset = OpenAIToolSet(my_toolset, entity_id="alice")
        >>> tools = await toolset.get_tools(["github"])
        >>> completion = await client.chat.completions.create(
        ...     model="gpt-4o-mini", messages=messages, tools=tools
        ... )
        >>> outputs = await toolset.handle_tool_call(completion)
    """

    def __init__(
        self,
        toolset: BaseToolset,
        *,
        entity_id: Optional[str] = None,
        poll: Optional[PollSettings] = None,
        logger: Optional[logging.Logger] = None,
        name: Optional[str] = None,
    ) -> None:
        """
        Args:
            toolset: Engine that lists and executes actions.
            entity_id: Entity used when a call does not name one. Defaults to
                ``TOOLSET_ENTITY_ID`` or ``"default"``.
            poll: Pacing for ``wait_and_handle_assistant_tool_calls``.
                Defaults to ``PollSettings.from_env()``.
            logger: Optional logger instance. If None, a logger named after
                this module will be used.
            name: Prefix for log lines. Defaults to the class name.
        """
        self.toolset = toolset
        self.entity_id = entity_id or get_default_entity_id()
        self.poll = poll or PollSettings.from_env()
        self.logger = logger or logging.getLogger(__name__)
        self.name = name if name is not None else self.__class__.__name__
        self._adapter = OpenAIToolAdapter()

    @property
    def adapter(self) -> OpenAIToolAdapter:
        """Shape adapter used for every conversion."""
        return self._adapter

    # --- tool schemas ------------------------------------------------------
    async def get_actions(
        self,
        actions: Optional[Sequence[str]] = None,
        *,
        entity_id: Optional[str] = None,
    ) -> list[ToolSchema]:
        """Return OpenAI tools for the given action names (all when ``None``)."""
        descriptors = await call_toolset(
            self.toolset.get_actions_schema,
            actions=actions,
            entity_id=entity_id,
        )
        return self._adapter.to_tool_schemas(descriptors)

    async def get_tools(
        self,
        apps: Sequence[str],
        *,
        tags: Optional[Sequence[str]] = None,
        use_case: Optional[str] = None,
        entity_id: Optional[str] = None,
    ) -> list[ToolSchema]:
        """Return OpenAI tools selected by app, tag and use case."""
        descriptors = await call_toolset(
            self.toolset.get_tools_schema,
            apps=apps,
            tags=tags,
            use_case=use_case,
            entity_id=entity_id,
        )
        return self._adapter.to_tool_schemas(descriptors)

    # --- execution ---------------------------------------------------------
    async def execute_tool_call(
        self,
        tool_call: Any,
        entity_id: Optional[str] = None,
    ) -> str:
        """
        Execute one tool call and return the result as JSON text.

        Raises:
            json.JSONDecodeError: if the call's arguments are not valid JSON.
            ProviderShapeError: if the call lacks an id, name or arguments.
            Exception: anything the toolset raises while executing.
        """
        request = (
            tool_call
            if isinstance(tool_call, ToolCallRequest)
            else self._adapter.parse_tool_call(tool_call)
        )
        arguments = request.parse_arguments()
        result = await call_toolset(
            self.toolset.execute_action,
            request.name,
            arguments,
            entity_id or self.entity_id,
        )
        return json.dumps(result)

    async def handle_tool_call(
        self,
        completion: ChatCompletion | Any,
        entity_id: Optional[str] = None,
    ) -> list[str]:
        """
        Execute the tool calls requested in a chat completion.

        Only the first tool call of each choice is executed; outputs are
        returned in choice order.
        """
        outputs: list[str] = []
        for call in self._adapter.first_tool_calls(completion):
            outputs.append(await self.execute_tool_call(call, entity_id))
        return outputs

    async def handle_assistant_message(
        self,
        run: Run | Any,
        entity_id: Optional[str] = None,
    ) -> list[ToolOutput]:
        """Execute every tool call a run is waiting on, concurrently."""
        tool_calls = self._adapter.required_tool_calls(run)
        entity = entity_id or self.entity_id
        return list(
            await asyncio.gather(
                *(self._run_required_call(call, entity) for call in tool_calls)
            )
        )

    async def _run_required_call(self, call: ToolCallRequest, entity_id: str) -> ToolOutput:
        self._log(
            f"Executing tool call {call.id} ({call.name}) with arguments {call.arguments}",
            logging.DEBUG,
        )
        response = await self.execute_tool_call(call, entity_id)
        self._log(f"Received tool response for {call.id}: {response}", logging.DEBUG)
        return self._adapter.tool_output(call.id, response)

    # --- assistants run loop ----------------------------------------------
    async def wait_and_handle_assistant_tool_calls(
        self,
        client: AsyncOpenAI,
        run: Run | Any,
        thread: Thread | str | Any,
        entity_id: Optional[str] = None,
        *,
        poll_interval: Optional[float] = None,
        timeout: Optional[float] = None,
        max_attempts: Optional[int] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Run | Any:
        """
        Drive a run to a terminal status, answering its tool calls on the way.

        While the run is ``requires_action`` its tool calls are executed and
        submitted; while ``queued`` or ``in_progress`` it is re-fetched and
        the loop waits ``poll_interval`` seconds. Any other status ends the
        loop and the last run is returned.

        Args:
            client: Async OpenAI client used for retrieval and submission.
            run: The run to follow.
            thread: The run's thread, or its id.
            entity_id: Entity for tool execution; defaults to ``self.entity_id``.
            poll_interval: Seconds between status checks (overrides ``self.poll``).
            timeout: Overall ceiling in seconds (overrides ``self.poll``).
            max_attempts: Ceiling on provider round trips (overrides ``self.poll``).
            cancel_event: Setting this event stops the wait.

        Raises:
            RunWaitTimeoutError: the timeout or attempt ceiling was reached.
            RunWaitCancelledError: ``cancel_event`` was set.
            openai.APIError: any client failure, unchanged.
        """
        settings = self.poll.override(
            interval=poll_interval, timeout=timeout, max_attempts=max_attempts
        )
        poller = RunPoller(settings, cancel_event)
        thread_id = resource_id(thread, "thread")
        entity = entity_id or self.entity_id
        runs = client.beta.threads.runs

        while is_pending(run):
            run_id = resource_id(run, "run")
            poller.before_request(run)
            if run_status(run) == RunStatus.REQUIRES_ACTION:
                tool_outputs = await self.handle_assistant_message(run, entity)
                self._log(f"Submitting {len(tool_outputs)} tool output(s) to run {run_id}")
                run = await runs.submit_tool_outputs(
                    run_id,
                    thread_id=thread_id,
                    tool_outputs=tool_outputs,
                )
            else:
                run = await runs.retrieve(run_id, thread_id=thread_id)
                if is_pending(run):
                    await poller.pause(run)

        self._log(
            f"Run {resource_id(run, 'run')} finished with status {run_status(run)} "
            f"after {poller.attempts} request(s)"
        )
        return run

    def _log(self, message: str, level: int = logging.INFO) -> None:
        self.logger.log(level, f"[{self.name}] {message}")
