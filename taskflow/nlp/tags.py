from __future__ import annotations

import re

# Inline labels: "#work", "#follow-up"
TAG_PAT = re.compile(r"#([\w\-]+)")


def extract_tags(text: str) -> tuple[str, list[str]]:
    """
    Pull every #tag out of the text.
    Returns (text_without_tags, tags) with tags in order of appearance.
    Whitespace left behind is not collapsed here.
    """
    tags = TAG_PAT.findall(text)
    return TAG_PAT.sub("", text), tags
