"""Word tokenizer for sentiment scoring."""

import re
from typing import List, Optional

# Anything that is not a word character, whitespace or an apostrophe.
_STRIP_PATTERN = re.compile(r"[^\w\s']")


def tokenize(text: Optional[str]) -> List[str]:
    """Lowercase, strip punctuation except apostrophes, split on whitespace."""
    if not text:
        return []
    return _STRIP_PATTERN.sub(" ", text.lower()).split()
