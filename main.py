"""
CV Chat - CLI Entry Point.

Imports a markdown (or PDF) CV and chats about it in the terminal.
"""

import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from cvchat.agents.assistant import CVAssistant
from cvchat.config import settings
from cvchat.db.store import DEFAULT_PROFILE
from cvchat.tools.pdf_parser import DocumentReadError, read_document_from_path
from cvchat.utils.logging import setup_logging
from cvchat.utils.markdown_parser import parse_markdown

SECTION_IDS = ("bio", "experience", "skills", "certificates", "languages", "memberships")


def load_profile(path: Path) -> dict:
    """Parse a CV file and merge it over the sample profile."""
    text = read_document_from_path(str(path))
    parsed = parse_markdown(text)
    return {**DEFAULT_PROFILE, **parsed.to_fields()}


def print_profile(profile: dict) -> None:
    print(f"{profile['name']} - {profile['title']}")
    if profile.get("location"):
        print(f"Location: {profile['location']}")
    print(f"Experience: {len(profile['experience'])} roles")
    for exp in profile["experience"]:
        print(f"  - {exp['title']} at {exp['company']} ({exp['period']})")
    print(f"Skills: {', '.join(profile['skills']) or '-'}")
    print(f"Certificates: {len(profile['certificates'])}")
    print(f"Languages: {', '.join(lang['name'] for lang in profile['languages']) or '-'}")
    print(f"Memberships: {len(profile['memberships'])}")


def main():
    """Run the CV chat CLI."""
    setup_logging(settings.log_level)

    print("CV Chat")
    print("=" * 40)

    profile = dict(DEFAULT_PROFILE)
    if len(sys.argv) > 1:
        cv_path = Path(" ".join(sys.argv[1:]))  # Join all args for filenames with spaces
        if not cv_path.exists():
            print(f"Error: {cv_path} not found")
            return
        try:
            profile = load_profile(cv_path)
        except DocumentReadError as e:
            print(f"Error: {e}")
            return
        print(f"Loaded CV: {cv_path}\n")
    else:
        print("No CV given, using the sample profile.\n")

    print_profile(profile)
    asyncio.run(chat_loop(profile))
    print("Goodbye!")


async def chat_loop(profile: dict) -> None:
    """Interactive loop; one event loop for the whole session."""
    assistant = CVAssistant()
    section = None

    print("\nCommands: /quit, /section <id>, /section, /suggest")
    print("-" * 40)

    while True:
        try:
            user_input = (await asyncio.to_thread(input, "You: ")).strip()
            if not user_input:
                continue

            if user_input.lower() == "/quit":
                break

            if user_input.startswith("/section"):
                arg = user_input[len("/section"):].strip().lower()
                if arg and arg not in SECTION_IDS:
                    print(f"Unknown section. Choose from: {', '.join(SECTION_IDS)}")
                else:
                    section = arg or None
                    print(f"Focus: {section or 'whole CV'}")
                continue

            if user_input == "/suggest":
                for suggestion in assistant.suggestions(section or "", profile):
                    print(f"  * {suggestion}")
                continue

            reply = await assistant.respond(user_input, profile, section)
            print(f"\nAssistant: {reply}\n")

        except (KeyboardInterrupt, EOFError):
            break


if __name__ == "__main__":
    main()
