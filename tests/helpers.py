"""Shared test helpers: transcript line builders."""

import json
from pathlib import Path


def usage(input_tokens=1000, cache_creation=0, cache_read=0, output_tokens=500) -> dict:
    return {
        "input_tokens": input_tokens,
        "cache_creation_input_tokens": cache_creation,
        "cache_read_input_tokens": cache_read,
        "output_tokens": output_tokens,
    }


def user_entry(content="Hello", **extra) -> dict:
    entry = {"type": "user", "message": {"role": "user", "content": content}}
    entry.update(extra)
    return entry


def assistant_entry(content=None, stop_reason="end_turn", usage_obj="default", **extra) -> dict:
    message = {"role": "assistant", "content": content if content is not None else [{"type": "text", "text": "Done."}]}
    if usage_obj == "default":
        usage_obj = usage()
    if usage_obj is not None:
        message["usage"] = usage_obj
    message["stop_reason"] = stop_reason
    entry = {"type": "assistant", "message": message}
    entry.update(extra)
    return entry


def tool_use_entry(name="Read", output_tokens=120) -> dict:
    return assistant_entry(
        content=[
            {"type": "text", "text": "Let me look."},
            {"type": "tool_use", "id": f"toolu_{name.lower()}", "name": name, "input": {}},
        ],
        stop_reason="tool_use",
        usage_obj=usage(output_tokens=output_tokens),
    )


def tool_result_entry(content="ok", is_error=False, tool_use_result=None) -> dict:
    entry = user_entry(
        content=[{"type": "tool_result", "tool_use_id": "toolu_read", "content": content, "is_error": is_error}],
    )
    if tool_use_result is not None:
        entry["toolUseResult"] = tool_use_result
    return entry


def to_lines(lines) -> list[str]:
    return [line if isinstance(line, str) else json.dumps(line) for line in lines]


def write_transcript(path: Path, lines) -> Path:
    path.write_text("\n".join(to_lines(lines)) + "\n", encoding="utf-8")
    return path
