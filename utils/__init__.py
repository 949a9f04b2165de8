from .cmdline import (
    ParsedOptions,
    parse_cmdline,
    tokenize,
    usage_text
)
from .report import (
    format_item,
    format_results
)

__all__ = [
    'ParsedOptions',
    'parse_cmdline',
    'tokenize',
    'usage_text',
    'format_item',
    'format_results'
]
