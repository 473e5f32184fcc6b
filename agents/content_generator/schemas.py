"""Response schemas passed to Gemini to constrain JSON output."""

RECENT_MATCHES_SCHEMA = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "id": {"type": "string"},
            "matchTitle": {"type": "string"},
            "venue": {"type": "string"},
            "result": {"type": "string"},
            "scoreSummary": {"type": "string"},
            "topPerformers": {"type": "array", "items": {"type": "string"}},
        },
        "required": ["id", "matchTitle", "venue", "result", "scoreSummary", "topPerformers"],
    },
}

PODCAST_SCRIPT_SCHEMA = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "speaker": {"type": "string"},
            "line": {"type": "string"},
        },
        "required": ["speaker", "line"],
    },
}

TOPIC_SUGGESTIONS_SCHEMA = {
    "type": "array",
    "items": {"type": "string"},
}
