"""Prompt construction for commit message generation.

The request is a pure function of the diff and the provider: no clock, no
randomness, no file reads. The rules block is assembled once at import so
the output does not depend on the directory the tool is run from.
"""

from __future__ import annotations

from aicommit.config.schema import ProviderConfig
from aicommit.models.chat import ChatRequest, Message, Role
from aicommit.models.diff import Diff

TEMPERATURE = 0.7
MAX_TOKENS = 2000
MESSAGE_COUNT = 10
STYLE_LABEL = "Conventional Commits"

SYSTEM_PROMPT = (
    "You are an expert Git commit message writer specializing in analyzing code changes "
    "and creating precise, meaningful commit messages."
)

COMMIT_TYPES: tuple[tuple[str, str], ...] = (
    ("feat", "A new feature"),
    ("fix", "A bug fix"),
    ("docs", "Documentation only changes"),
    (
        "style",
        "Changes that do not affect the meaning of the code "
        "(white-space, formatting, missing semi-colons, etc)",
    ),
    ("refactor", "A code change that neither fixes a bug nor adds a feature"),
    ("perf", "A code change that improves performance"),
    ("test", "Adding missing tests or correcting existing tests"),
    ("build", "Changes that affect the build system or external dependencies"),
    ("ci", "Changes to CI configuration files, scripts"),
    ("chore", "Other changes that don't modify src or test files"),
    ("revert", "Reverts a previous commit"),
)

COMMIT_TYPE_NAMES: tuple[str, ...] = tuple(name for name, _ in COMMIT_TYPES)

_GUIDELINES = (
    "",
    "## Guidelines:",
    "- Subject line: imperative mood, no period, ideally under 72 characters",
    "- Analyze the diff to understand:",
    "  * What files were changed",
    "  * What functionality was added, modified, or removed",
    "  * The impact of changes",
    "- Body (optional, when needed):",
    "  * Explain the motivation for the change",
    "  * Compare previous behavior with new behavior",
    "  * Note any breaking changes or important details",
    "- Footer (optional): Include references to issues, breaking changes if applicable",
    "",
    "## Analysis Approach:",
    "1. Identify the primary purpose of the changes",
    "2. Group related changes together",
    "3. Determine the most appropriate type",
    "4. Write a clear, concise subject line",
    "5. Add body details for complex changes",
    "",
    "Remember: The commit message should help future developers understand WHY this "
    "change was made, not just WHAT was changed.",
    "Here is the git diff to analyze:",
    "",
)


def _render_rules() -> str:
    lines = [
        "## Requirements:",
        "1. Language: Write all messages in english",
        "2. Format: Strictly follow the conventional commit format:",
        "<type>: <description>",
        "3. Allowed Types:",
    ]
    lines.extend(f"  - {name}: '{description}'" for name, description in COMMIT_TYPES)
    lines.extend(_GUIDELINES)
    return "".join(f"\n{line}" for line in lines)


RULES_BLOCK = _render_rules()

TRAILING_INSTRUCTION = "\n\nProvide only the commit messages without any additional text."


def instruction_line(count: int = MESSAGE_COUNT, label: str = STYLE_LABEL) -> str:
    """Opening line naming how many messages to generate and in which style."""
    plural = "s" if count > 1 else ""
    return (
        f"Your task is to generate exactly {count} {label} style commit message{plural} "
        "based on the provided git diff."
    )


def build_user_message(diff: Diff) -> str:
    """Instruction, rules, the diff verbatim, then the trailing instruction."""
    return instruction_line() + RULES_BLOCK + diff.text + TRAILING_INSTRUCTION


def build_chat_request(diff: Diff, provider: ProviderConfig) -> ChatRequest:
    """Build the system/user request for ``provider`` from ``diff``.

    Args:
        diff: Staged changes; the text is embedded unmodified.
        provider: Active provider, which contributes the model name.

    Returns:
        A request with exactly two messages and the fixed sampling policy.
    """
    return ChatRequest(
        model=provider.model,
        messages=(
            Message(role=Role.SYSTEM, content=SYSTEM_PROMPT),
            Message(role=Role.USER, content=build_user_message(diff)),
        ),
        temperature=TEMPERATURE,
        max_tokens=MAX_TOKENS,
        stream=False,
    )
