"""
Discord message formatting helpers.
"""

from destiny_bot.constants import TableConstants


def code_block(content: str) -> str:
    """Wrap ``content`` in a monospace block."""
    return f"{TableConstants.CODE_BLOCK}\n{content}\n{TableConstants.CODE_BLOCK}"


def hyperlink(url: str, label: str) -> str:
    """Markdown link with ``label`` as the visible text."""
    return f"[{label}]({url})"
