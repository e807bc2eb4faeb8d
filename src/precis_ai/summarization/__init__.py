from .client import API_KEY_ENV, GeminiClient
from .decoding import decode_reply, extract_reply_text, find_json_object
from .prompt import EMPTY_SUMMARY, LENGTH_TARGETS, build_prompt, length_target

__all__ = [
    "API_KEY_ENV",
    "EMPTY_SUMMARY",
    "GeminiClient",
    "LENGTH_TARGETS",
    "build_prompt",
    "decode_reply",
    "extract_reply_text",
    "find_json_object",
    "length_target",
]
