"""Resolution of the people to tag when a run fails."""

import re

from teams_reporter.models.notification import Mention, MentionDirective

MENTIONS_PLACEHOLDER = "{mentions}"

# "Jane Doe <jane@example.com>", "<jane@example.com>" or a bare address
_NAMED_ADDRESS = re.compile(r"^(?:(?P<name>.+?)\s*)?<(?P<email>[^<>\s]+)>$")


def parse_mention(entry: str) -> Mention | None:
    """Parse one comma-separated entry of ``mention_on_failure``."""
    entry = entry.strip()
    if not entry:
        return None
    if match := _NAMED_ADDRESS.match(entry):
        return Mention(name=match["name"] or match["email"], email=match["email"])
    return Mention(name=entry, email=entry)


def get_mentions(
    mention_on_failure: str | None, mention_on_failure_text: str | None
) -> MentionDirective | None:
    """Build the mention directive, or None when nobody should be tagged.

    ``{mentions}`` in the text is replaced by the tagged addresses; text
    without the placeholder gets them prepended.
    """
    if not mention_on_failure:
        return None

    mentions = [
        mention
        for entry in mention_on_failure.split(",")
        if (mention := parse_mention(entry)) is not None
    ]
    if not mentions:
        return None

    tags = ", ".join(f"<at>{mention.email}</at>" for mention in mentions)
    text = mention_on_failure_text or MENTIONS_PLACEHOLDER
    if MENTIONS_PLACEHOLDER in text:
        message = text.replace(MENTIONS_PLACEHOLDER, tags)
    else:
        message = f"{tags} {text}"

    return MentionDirective(message=message, mentions=mentions)
