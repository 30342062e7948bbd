from __future__ import annotations

import logging
from typing import List, Optional

from ..errors import EmptyInput, InteriorBlankLine, NoContentRows

logger = logging.getLogger(__name__)


def normalize(raw: str) -> List[str]:
    """Split a level source into its trimmed content rows.

    The whole input is stripped first, so leading and trailing blank lines
    can never survive; the only blank lines left to reject are those that sit
    between two content rows.

    Raises:
        EmptyInput: ``raw`` is empty or whitespace only.
        InteriorBlankLine: a blank line separates two content rows.
        NoContentRows: nothing remains after trimming.
    """
    if not raw or not raw.strip():
        raise EmptyInput()

    rows: List[str] = []
    # Index of the first blank line seen after content; only an error once
    # another content row follows it.
    pending_blank: Optional[int] = None
    for index, line in enumerate(raw.strip().split("\n")):
        # strip() also drops a trailing '\r' from CRLF sources
        row = line.strip()
        if not row:
            if rows and pending_blank is None:
                pending_blank = index
            continue
        if pending_blank is not None:
            raise InteriorBlankLine(pending_blank)
        rows.append(row)

    if not rows:
        raise NoContentRows()
    logger.debug("Normalized map source into %d rows", len(rows))
    return rows
