"""
generateContent request/response shapes and the mapping from transcript turns.
"""

from typing import Any, Iterable, Optional, TypedDict

from gemini_tui.models import Turn


class RequestPart(TypedDict):
    text: str


class RequestContent(TypedDict):
    role: str
    parts: list[RequestPart]


class GenerateContentRequest(TypedDict):
    contents: list[RequestContent]


def build_request(turns: Iterable[Turn]) -> GenerateContentRequest:
    """One content entry per turn, in transcript order."""
    return {
        'contents': [
            {'role': turn.speaker.role, 'parts': [{'text': turn.text}]}
            for turn in turns
        ]
    }


def extract_reply(body: Any) -> Optional[str]:
    """
    Text of the first part of the first candidate, or None if the body does
    not have one.
    """
    if not isinstance(body, dict):
        return None

    candidates = body.get('candidates')
    if not isinstance(candidates, list) or not candidates:
        return None

    content = candidates[0].get('content') if isinstance(candidates[0], dict) else None
    parts = content.get('parts') if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts:
        return None

    text = parts[0].get('text') if isinstance(parts[0], dict) else None
    return text if isinstance(text, str) else None
