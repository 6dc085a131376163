from __future__ import annotations

import argparse
import asyncio
import logging

from local_toolset import LocalToolset
from toolset_bridge import create_openai_client, create_toolset

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


async def single_tool_roundtrip(model: str) -> None:
    """
    1) Send user prompt with the toolset's tools
    2) Let the model emit a tool call
    3) Execute it through the toolset
    4) Ask the model to finish using the tool result
    """
    client = create_openai_client()
    toolset = create_toolset(LocalToolset(), entity_id="demo")
    tools = await toolset.get_tools(["weather"])

    messages: list[dict[str, object]] = [
        {"role": "user", "content": "What's the weather in San Francisco?"}
    ]
    completion = await client.chat.completions.create(model=model, messages=messages, tools=tools)
    message = completion.choices[0].message
    if not message.tool_calls:
        logger.warning("Model answered directly: %s", message.content)
        return

    messages.append(message.model_dump(exclude_none=True))
    for call in message.tool_calls:
        output = await toolset.execute_tool_call(call)
        messages.append(
            toolset.adapter.tool_result_message(toolset.adapter.tool_output(call.id, output))
        )

    final = await client.chat.completions.create(model=model, messages=messages, tools=tools)
    logger.info("Model says: %s", final.choices[0].message.content)
    await client.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--model", default="gpt-4o-mini")
    args = parser.parse_args()

    asyncio.run(single_tool_roundtrip(args.model))
