from typing import Sequence

from destiny_bot.utils.formatting import code_block


def render_item_list(items: Sequence[str]) -> str:
    """Monospace list, one item per line."""
    return code_block('\n'.join(items))
