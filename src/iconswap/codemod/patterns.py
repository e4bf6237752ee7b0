# src/iconswap/codemod/patterns.py
"""
Rewrite rules applied to each target file.

Both rules are plain regex substitutions over the raw text. The input grammar
is narrow (one import form, one JSX tag) so no parsing is attempted. Neither
rule matches its own output, which is what makes a second run a no-op.
"""

import re
from dataclasses import dataclass, field
from typing import Tuple


def _import_regex(binding: str, module: str) -> re.Pattern:
    return re.compile(
        r"\b(?i:import)\s*\{\s*" + re.escape(binding) + r"\s*\}\s*"
        r"(?i:from)\s*(?P<q>['\"])" + re.escape(module) + r"(?P=q)"
        # trailing blanks are only eaten up to a newline; "; // note" keeps its space
        r"[ \t]*;?(?:[ \t]*(?P<newline>\r?\n))?"
    )


def _opening_regex(binding: str, strict: bool) -> re.Pattern:
    # opening tag must be followed by whitespace so <IconButton> never matches
    return re.compile(r"<" + re.escape(binding) + (r"(?=\s+icon=)" if strict else r"(?=\s)"))


def _any_opening_regex(binding: str) -> re.Pattern:
    # every form of opener, including <Icon> and <Icon/>
    return re.compile(r"<" + re.escape(binding) + r"(?=[\s>/])")


def _closing_regex(binding: str) -> re.Pattern:
    return re.compile(r"</" + re.escape(binding) + r"(?=\s*>)")


@dataclass(frozen=True)
class ImportRule:
    """
    ``import { Icon } from '@iconify/react';`` -> ``import LocalIcon from '<path>';``

    Keywords are matched case-insensitively and any whitespace is tolerated.
    The newline that terminated the matched statement is kept as-is.
    """
    binding: str = "Icon"
    module: str = "@iconify/react"
    local_name: str = "LocalIcon"
    name: str = "import-statement"
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "pattern", _import_regex(self.binding, self.module))

    def render(self, import_path: str) -> str:
        return f"import {self.local_name} from '{import_path}';"

    def apply(self, content: str, import_path: str) -> Tuple[str, int]:
        statement = self.render(import_path)

        def _replace(match):
            return statement + (match.group("newline") or "")

        return self.pattern.subn(_replace, content)


@dataclass(frozen=True)
class UsageRule:
    """
    ``<Icon icon="..." />`` -> ``<LocalIcon icon="..." />``, plus ``</Icon>``.

    With ``strict`` the opening tag must be followed by an ``icon=`` attribute.
    Only the tag name is replaced; whitespace and attributes stay verbatim.
    Closing tags are renamed only when every ``<Icon`` opener in the file was
    renamed, so a file is never left with ``<Icon ...></LocalIcon>``.
    """
    binding: str = "Icon"
    local_name: str = "LocalIcon"
    strict: bool = False
    name: str = "tag-usage"
    pattern: re.Pattern = field(init=False, repr=False, compare=False)
    closing_pattern: re.Pattern = field(init=False, repr=False, compare=False)
    any_opening_pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "pattern", _opening_regex(self.binding, self.strict))
        object.__setattr__(self, "closing_pattern", _closing_regex(self.binding))
        object.__setattr__(self, "any_opening_pattern", _any_opening_regex(self.binding))

    def apply(self, content: str) -> Tuple[str, int]:
        content, count = self.pattern.subn("<" + self.local_name, content)
        if self.any_opening_pattern.search(content):
            return content, count
        content, closed = self.closing_pattern.subn("</" + self.local_name, content)
        return content, count + closed
