"""
Command-line parsing for FindItem

Options are not known up front as typed arguments: every Finding API item
filter is accepted as `--filter_name value` and its value is passed through
untouched for the service to validate. Parsing happens in two steps:

    tokenize()      args -> HelpToken / FlagToken / PhraseToken
    parse_cmdline() tokens -> ParsedOptions, applying the capture rules

Rule precedence: --help, then duplicate keywords, then unknown options.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Union

from finding.config import APP_ID_ENV
from finding.errors import (
    DuplicateKeywordsError,
    HelpRequested,
    InvalidOptionError,
    MissingOptionValueError,
)
from finding.filters import OPTION_CATALOG

FLAG_PREFIX = "--"
HELP_FLAG = "--help"


@dataclass(frozen=True)
class HelpToken:
    pass


@dataclass(frozen=True)
class FlagToken:
    option: str  # as typed, e.g. --Max_Price
    value: Optional[str] = None  # None when no value followed the flag

    @property
    def name(self) -> str:
        return self.option[len(FLAG_PREFIX):].lower()


@dataclass(frozen=True)
class PhraseToken:
    text: str


Token = Union[HelpToken, FlagToken, PhraseToken]


@dataclass
class ParsedOptions:
    """Option values by name, plus the free-text search phrase"""
    options: Dict[str, List[str]] = field(default_factory=dict)
    keywords: Optional[str] = None

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Last value given for an option"""
        values = self.options.get(name)
        return values[-1] if values else default

    def add(self, name: str, value: str):
        self.options.setdefault(name, []).append(value)

    def as_dict(self) -> Dict[str, str]:
        found = {name: ", ".join(values) for name, values in self.options.items()}
        if self.keywords:
            found['keywords'] = self.keywords
        return found


def tokenize(args: Sequence[str]) -> List[Token]:
    """
    Split raw arguments into tokens.

    Consecutive bare words form a single phrase. A flag takes the next
    argument as its value unless that argument is empty or another flag.
    Empty arguments are dropped.
    """
    tokens: List[Token] = []
    words: List[str] = []

    def flush_phrase():
        if words:
            tokens.append(PhraseToken(" ".join(words)))
            words.clear()

    i = 0
    while i < len(args):
        arg = args[i]
        if not arg:
            i += 1
            continue

        if not arg.startswith(FLAG_PREFIX):
            words.append(arg)
            i += 1
            continue

        flush_phrase()
        if arg == HELP_FLAG:
            tokens.append(HelpToken())
            i += 1
            continue

        next_arg = args[i + 1] if i + 1 < len(args) else ""
        if not next_arg or next_arg.startswith(FLAG_PREFIX):
            tokens.append(FlagToken(arg))
            i += 1
        else:
            tokens.append(FlagToken(arg, next_arg))
            i += 2

    flush_phrase()
    return tokens


def usage_text(catalog: Sequence[str] = OPTION_CATALOG) -> str:
    lines = [
        "Usage:",
        "\tsearch.py [--filter1 value1] [--filter2 value2 ...] keywords to search...",
        "",
        "Possible options:",
    ]
    lines.extend(f"    --{option} value" for option in catalog)
    lines.append("")
    lines.append(
        f"You need to set the environment variable {APP_ID_ENV} "
        "with the value of a valid eBay API Application ID."
    )
    return "\n".join(lines)


def parse_cmdline(args: Sequence[str], catalog: Sequence[str] = OPTION_CATALOG) -> ParsedOptions:
    """
    Parse command-line arguments against the option catalog.

    Raises HelpRequested, DuplicateKeywordsError, InvalidOptionError or
    MissingOptionValueError. A missing search phrase is not an error here.
    """
    tokens = tokenize(args)

    if any(isinstance(t, HelpToken) for t in tokens):
        raise HelpRequested(usage_text(catalog))

    phrases = [t.text for t in tokens if isinstance(t, PhraseToken)]
    if len(phrases) > 1:
        raise DuplicateKeywordsError(phrases[0], phrases[1])

    flags = [t for t in tokens if isinstance(t, FlagToken)]
    for flag in flags:
        if flag.name not in catalog:
            raise InvalidOptionError(flag.option, catalog)

    parsed = ParsedOptions(keywords=phrases[0] if phrases else None)
    for flag in flags:
        if flag.value is None:
            raise MissingOptionValueError(flag.name)
        parsed.add(flag.name, flag.value)
    return parsed
