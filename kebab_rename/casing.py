from __future__ import annotations

import re

# Before a capital that is not the first character and either follows a
# non-capital ("Button2Group", "Rn_B") or ends an acronym run ("HTMLInput").
WORD_START_RE = re.compile(r"(?<=.)(?=[A-Z])(?:(?<![A-Z])|(?=[A-Z][a-z]))", re.DOTALL)


def to_kebab_case(name: str) -> str:
    """Convert ``AlertDialog`` style names to ``alert-dialog``.

    Acronym runs stay together (``HTMLInput`` -> ``html-input``); a leading
    ``UI`` is folded first so ``UIButton`` gives ``ui-button``.
    """
    name = name.replace("UI", "Ui")
    return WORD_START_RE.sub("-", name).lower()
