"""
Heuristic markdown CV parser.

Turns a free-form markdown résumé into a ParsedProfile:
- Sections: split on `#` header lines, keyed by lower-cased header text
- Scalars (name/title/location): ordered regex fallbacks over the whole document
- Bio: first known summary-like section
- Experience: "<title> at <company> - <period>" entries with bullet descriptions
- Skills, certificates, memberships: one item per line (skills also split on commas)
- Languages: "<name> - <level>", "<name> (<level>)" or "<name>: <level>" lines

Never raises for malformed input; unmatched lines are skipped.
"""

import logging
import re

from cvchat.models import ExperienceEntry, LanguageEntry, ParsedProfile

logger = logging.getLogger(__name__)

LINE_BREAK = re.compile(r"\r?\n")
HEADER = re.compile(r"^#+\s*(.+)$")
HEADER_MARK = re.compile(r"^#+")
BULLET_MARKERS = ("-", "*")

DEFAULT_NAME = "Professional"
DEFAULT_TITLE = "Software Professional"
DEFAULT_LOCATION = ""

NAME_PATTERNS = [
    re.compile(r"^#\s*([^#\n]+)", re.MULTILINE),  # First h1 header
    re.compile(r"name:\s*(.+)", re.IGNORECASE),
    re.compile(r"^([A-Z][a-z]+\s+[A-Z][a-z]+)", re.MULTILINE),  # "Jane Doe" at line start
]

TITLE_PATTERNS = [
    re.compile(r"title:\s*(.+)", re.IGNORECASE),
    re.compile(r"position:\s*(.+)", re.IGNORECASE),
    re.compile(r"role:\s*(.+)", re.IGNORECASE),
    re.compile(
        r"##\s*([^#\n]+(?:engineer|developer|manager|architect|analyst|consultant))",
        re.IGNORECASE,
    ),
]

LOCATION_PATTERNS = [
    re.compile(r"location:\s*(.+)", re.IGNORECASE),
    re.compile(r"address:\s*(.+)", re.IGNORECASE),
    re.compile(r"based in:\s*(.+)", re.IGNORECASE),
    re.compile(r"([A-Z][a-z]+,\s*[A-Z]{2})"),  # City, ST
]

BIO_SECTIONS = ("summary", "bio", "biography", "about", "overview", "profile")
EXPERIENCE_SECTIONS = ("experience", "work experience", "employment")
SKILL_SECTIONS = ("skills", "technical skills", "technologies")
CERTIFICATE_SECTIONS = ("certificates", "certifications", "credentials")
LANGUAGE_SECTIONS = ("languages", "language skills")
MEMBERSHIP_SECTIONS = ("memberships", "organizations", "associations")

# "Senior Engineer at Acme - 2021-Present", optionally bulleted
JOB_START = re.compile(r"^[-*]?\s*(.+?)\s+at\s+(.+?)\s*[-–—]\s*(.+)$")

# Tried in order, first match wins. The dash form rejects names containing
# parentheses or colons so those lines reach their own patterns.
LANGUAGE_PATTERNS = [
    re.compile(r"^[-*]?\s*([^():]+?)\s*[-–—]\s*(.+?)(?:\s*[-–—]\s*(.+))?$"),
    re.compile(r"^[-*]?\s*(.+?)\s*\((.+?)\)(?:\s*[-–—]\s*(.+))?$"),
    re.compile(r"^[-*]?\s*(.+?):\s*(.+?)(?:\s*[-–—]\s*(.+))?$"),
]

ExperienceState = tuple[list[ExperienceEntry], ExperienceEntry | None]


def parse_markdown(content: str) -> ParsedProfile:
    """
    Parse a markdown CV into a structured profile.

    All-or-nothing: if any extractor fails unexpectedly the error is logged
    and an empty ParsedProfile is returned instead of a partial one.
    """
    try:
        sections = split_into_sections(content)
        return ParsedProfile(
            name=extract_name(content),
            title=extract_title(content),
            location=extract_location(content),
            bio=extract_bio(sections),
            experience=parse_experience(sections),
            skills=parse_skills(sections),
            certificates=parse_certificates(sections),
            languages=parse_languages(sections),
            memberships=parse_memberships(sections),
        )
    except Exception:
        logger.exception("Error parsing markdown CV")
        return ParsedProfile()


def split_into_sections(content: str) -> dict[str, str]:
    """Map lower-cased header text to the body up to the next header.

    Lines before the first header are dropped. Repeated headers keep the
    last body.
    """
    sections: dict[str, str] = {}
    current_section = ""
    current_lines: list[str] = []

    for line in LINE_BREAK.split(content):
        header = HEADER.match(line)
        if header:
            if current_section:
                sections[current_section.lower()] = "\n".join(current_lines).strip()
            current_section = header.group(1).strip()
            current_lines = []
        else:
            current_lines.append(line)

    if current_section:
        sections[current_section.lower()] = "\n".join(current_lines).strip()

    return sections


def extract_name(content: str) -> str:
    return _first_capture(NAME_PATTERNS, content, DEFAULT_NAME)


def extract_title(content: str) -> str:
    return _first_capture(TITLE_PATTERNS, content, DEFAULT_TITLE)


def extract_location(content: str) -> str:
    return _first_capture(LOCATION_PATTERNS, content, DEFAULT_LOCATION)


def extract_bio(sections: dict[str, str]) -> str:
    """Body of the first bio-like section present, even if empty."""
    for name in BIO_SECTIONS:
        if name in sections:
            return sections[name]
    return ""


def parse_experience(sections: dict[str, str]) -> list[ExperienceEntry]:
    body = _section_body(sections, EXPERIENCE_SECTIONS)
    if not body:
        return []

    state: ExperienceState = ([], None)
    for line in body.split("\n"):
        state = experience_step(state, line)

    completed, current = state
    if current is not None:
        completed = completed + [current]
    return completed


def experience_step(state: ExperienceState, line: str) -> ExperienceState:
    """
    Advance the experience fold by one line.

    Args:
        state: (completed entries, entry being accumulated or None)
        line: Raw line from the experience section

    Returns:
        The next state. A job-start line flushes the open entry and opens a
        new one; bullets and plain lines extend the open entry's description.
    """
    completed, current = state
    trimmed = line.strip()
    if not trimmed:
        return state

    job = JOB_START.match(trimmed)
    if job:
        if current is not None:
            completed = completed + [current]
        title, company, period = (part.strip() for part in job.groups())
        if not title:
            # untitled entries are never emitted; their bullets are dropped too
            return completed, None
        return completed, ExperienceEntry(title=title, company=company, period=period)

    if current is None:
        return state

    if trimmed.startswith(BULLET_MARKERS):
        text = trimmed[1:].strip()
    elif HEADER_MARK.match(trimmed):
        return state
    else:
        text = trimmed

    description = f"{current.description} {text}" if current.description else text
    return completed, current.model_copy(update={"description": description})


def parse_skills(sections: dict[str, str]) -> list[str]:
    skills: list[str] = []
    for line in _content_lines(_section_body(sections, SKILL_SECTIONS)):
        if "," in line:
            skills.extend(s.strip() for s in line.split(",") if s.strip())
        else:
            skills.append(_strip_bullet(line))
    return [s for s in skills if s]


def parse_certificates(sections: dict[str, str]) -> list[str]:
    return _parse_item_list(sections, CERTIFICATE_SECTIONS)


def parse_memberships(sections: dict[str, str]) -> list[str]:
    return _parse_item_list(sections, MEMBERSHIP_SECTIONS)


def parse_languages(sections: dict[str, str]) -> list[LanguageEntry]:
    languages: list[LanguageEntry] = []
    for line in _content_lines(_section_body(sections, LANGUAGE_SECTIONS)):
        entry = parse_language_line(line)
        if entry is not None:
            languages.append(entry)
    return languages


def parse_language_line(line: str) -> LanguageEntry | None:
    """Parse one trimmed language line, or None if no pattern matches."""
    for pattern in LANGUAGE_PATTERNS:
        match = pattern.match(line)
        if match:
            level = match.group(2).strip()
            context = (match.group(3) or "").strip()
            return LanguageEntry(
                name=match.group(1).strip(),
                level=level,
                context=context or f"{level} proficiency",
            )
    return None


def _first_capture(patterns: list[re.Pattern], content: str, default: str) -> str:
    """Return the first group of the first pattern found anywhere in content."""
    for pattern in patterns:
        match = pattern.search(content)
        if match:
            return match.group(1).strip()
    return default


def _section_body(sections: dict[str, str], names: tuple[str, ...]) -> str:
    """First non-empty body among synonymous section names."""
    for name in names:
        body = sections.get(name)
        if body:
            return body
    return ""


def _content_lines(body: str) -> list[str]:
    """Trimmed lines of a section body, minus blanks and header markers."""
    lines = []
    for line in body.split("\n"):
        trimmed = line.strip()
        if trimmed and not HEADER_MARK.match(trimmed):
            lines.append(trimmed)
    return lines


def _strip_bullet(line: str) -> str:
    if line.startswith(BULLET_MARKERS):
        return line[1:].strip()
    return line


def _parse_item_list(sections: dict[str, str], names: tuple[str, ...]) -> list[str]:
    items = [_strip_bullet(line) for line in _content_lines(_section_body(sections, names))]
    return [item for item in items if item]
