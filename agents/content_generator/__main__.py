"""CLI entry point for the Content Generator Agent.

Usage:
    python -m agents.content_generator <command> [options]

Examples:
    python -m agents.content_generator matches --count 5
    python -m agents.content_generator topics
    python -m agents.content_generator script --topic "Spin in Asia" --speaker Harsha --speaker Nasser --host Harsha --stat-bot
    python -m agents.content_generator script --recent-matches --speaker Harsha --speaker Nasser --host Harsha
    python -m agents.content_generator summary transcript.json
"""

import argparse
import asyncio
import json
import logging
import re
import sys
from pathlib import Path

from main.config import PodcastConfig
from main.state import MatchData, Speaker, TranscriptMessage
from .agent import ContentGenerationClient


def _speaker_id(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


def _load_json(path: str):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _dump(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


async def _run(args: argparse.Namespace) -> None:
    client = ContentGenerationClient.from_env()

    if args.command == "matches":
        matches = await client.fetch_recent_matches(args.count)
        _dump([m.model_dump() for m in matches])

    elif args.command == "topics":
        topics = await client.generate_topic_suggestions(args.count)
        _dump(topics)

    elif args.command == "script":
        speakers = [Speaker(id=_speaker_id(name), name=name) for name in args.speaker]
        hosts = [s for s in speakers if s.name in set(args.host or [])]
        config = PodcastConfig(tone=args.tone, hosts=hosts, includeStatBot=args.stat_bot)

        matches = None
        if args.matches_file:
            matches = [MatchData(**m) for m in _load_json(args.matches_file)]
        elif args.recent_matches:
            matches = await client.fetch_recent_matches()

        transcript = await client.generate_podcast_script(
            config, args.topic or "", speakers, matches
        )
        _dump([m.model_dump() for m in transcript])

    elif args.command == "summary":
        transcript = [TranscriptMessage(**m) for m in _load_json(args.transcript_path)]
        print(await client.generate_podcast_summary(transcript))


def main() -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Generate cricket podcast content with Gemini",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
    GEMINI_API_KEY      API key (required; GOOGLE_API_KEY also accepted)
    GEMINI_MODEL_NAME   Preferred model (default: gemini-1.5-flash)
        """,
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    matches_parser = subparsers.add_parser("matches", help="Fetch recent matches")
    matches_parser.add_argument("--count", "-n", type=int, default=7, help="Number of matches (default: 7)")

    topics_parser = subparsers.add_parser("topics", help="Suggest podcast topics")
    topics_parser.add_argument("--count", "-n", type=int, default=5, help="Number of topics (default: 5)")

    script_parser = subparsers.add_parser("script", help="Generate a podcast script")
    script_parser.add_argument("--topic", "-t", type=str, default=None, help="Free-text topic")
    script_parser.add_argument(
        "--speaker", "-s",
        action="append",
        required=True,
        help="Speaker name, in roster order (repeat for each speaker)",
    )
    script_parser.add_argument("--host", action="append", help="Name of a speaker acting as host (repeatable)")
    script_parser.add_argument("--tone", type=str, default="Lively and insightful", help="Conversation tone")
    script_parser.add_argument("--stat-bot", action="store_true", help="Include the AI StatBot")
    source = script_parser.add_mutually_exclusive_group()
    source.add_argument("--matches-file", type=str, default=None, help="JSON file with matches to analyse")
    source.add_argument("--recent-matches", action="store_true", help="Fetch recent matches and analyse them")

    summary_parser = subparsers.add_parser("summary", help="Summarize a transcript")
    summary_parser.add_argument("transcript_path", type=str, help="Path to a transcript JSON file")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "script" and not (args.topic or args.matches_file or args.recent_matches):
        print("❌ Error: provide --topic, --matches-file or --recent-matches", file=sys.stderr)
        return 1
    if args.command == "summary" and not Path(args.transcript_path).exists():
        print(f"❌ Error: Transcript file not found: {args.transcript_path}", file=sys.stderr)
        return 1

    try:
        asyncio.run(_run(args))
        return 0
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
