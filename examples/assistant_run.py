from __future__ import annotations

import argparse
import asyncio
import logging

from local_toolset import LocalToolset
from toolset_bridge import create_openai_client, create_toolset

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


async def run_assistant(model: str, timeout: float) -> None:
    client = create_openai_client()
    toolset = create_toolset(LocalToolset(), entity_id="demo")

    assistant = await client.beta.assistants.create(
        model=model,
        instructions="Answer weather questions using the available tools.",
        tools=await toolset.get_actions(),
    )
    thread = await client.beta.threads.create(
        messages=[{"role": "user", "content": "How warm is it in Lisbon right now?"}]
    )
    run = await client.beta.threads.runs.create(thread_id=thread.id, assistant_id=assistant.id)

    run = await toolset.wait_and_handle_assistant_tool_calls(client, run, thread, timeout=timeout)
    logger.info("Run %s ended with status %s", run.id, run.status)

    messages = await client.beta.threads.messages.list(thread_id=thread.id)
    for message in messages.data:
        for part in message.content:
            if part.type == "text":
                logger.info("%s: %s", message.role, part.text.value)

    await client.beta.assistants.delete(assistant.id)
    await client.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--model", default="gpt-4o-mini")
    parser.add_argument("--timeout", type=float, default=120.0)
    args = parser.parse_args()

    asyncio.run(run_assistant(args.model, args.timeout))
