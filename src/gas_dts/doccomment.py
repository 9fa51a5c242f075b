"""Doc-comment synthesis for method declarations."""

from __future__ import annotations

import re

from .model import DocComment, DocTag, MethodDeclaration

# Whitespace-surrounded hyphen, hyphen variants, en/em dash, bar, minus
_RETURN_SPLIT_RE = re.compile(r"\s+[-\u2010-\u2015\u2212]\s+")


def split_return(text: str) -> tuple[str, str]:
    """Split ``"Type — description"`` into ``("Type", "description")``.

    Only the first dash separates; text without one is all type.
    """
    parts = _RETURN_SPLIT_RE.split(text.strip(), maxsplit=1)
    if len(parts) == 1:
        return parts[0], ""
    return parts[0].strip(), parts[1].strip()


def fence(example: str) -> str:
    return f"\n```\n{example}\n```\n"


def synthesize(
    method: MethodDeclaration,
    summary: str = "",
    example: str = "",
    param_comments: list[str] | None = None,
    return_comment: str = "",
    typed: bool = False,
) -> DocComment | None:
    """Assemble the doc comment of *method* from page prose.

    Parameter descriptions pair with ``method.parameters`` by position; a
    missing description becomes a blank ``@param``. Returns ``None`` when
    there is no text at all to document.
    """
    param_comments = param_comments or []

    if not (summary or example or return_comment or any(param_comments)):
        return None

    tags: list[DocTag] = []
    if summary:
        tags.append(DocTag("summary", summary))
    if example:
        tags.append(DocTag("example", fence(example)))

    for i, param in enumerate(method.parameters):
        name = param.name
        if param.default is not None:
            name = f"{name}={param.default}"
        tags.append(
            DocTag(
                "param",
                param_comments[i] if i < len(param_comments) else "",
                param_name=name,
                bracketed=param.optional or param.default is not None,
                type_expr=str(param.type) if typed else None,
            )
        )

    tags.append(
        DocTag(
            "return",
            return_comment,
            type_expr=str(method.return_type) if typed else None,
        )
    )
    return DocComment(tags)
