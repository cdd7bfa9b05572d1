"""Team slug normalization shared by the engine and the loaders."""

from __future__ import annotations

import html as _html
import re
import unicodedata


def slugify_team_name(name: str) -> str:
    """Convert a team display name to a lowercase hyphen-delimited slug.

    Steps:
    1. Decode HTML entities (``&amp;`` → ``&``)
    2. NFKD-normalize Unicode and strip combining marks (``é`` → ``e``)
    3. Lowercase
    4. Replace runs of non-alphanumeric characters with ``-``
    5. Strip leading/trailing ``-``

    Examples::

        >>> slugify_team_name("Hades Tigers")
        'hades-tigers'
        >>> slugify_team_name("Canada Moist Talkers")
        'canada-moist-talkers'
        >>> slugify_team_name("Mexico City Wild Wings")
        'mexico-city-wild-wings'
    """
    if not name:
        return ""
    s = _html.unescape(str(name))
    s = unicodedata.normalize("NFKD", s)
    s = "".join(ch for ch in s if not unicodedata.combining(ch))
    s = s.lower()
    s = re.sub(r"[^a-z0-9]+", "-", s)
    return s.strip("-")
