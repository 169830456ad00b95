"""Wrap generated declarations in banner comments and write them out."""

import logging
from pathlib import Path
from typing import TextIO

from typedef_gen.models import CompoundDeclaration, GeneratorConfig

logger = logging.getLogger(__name__)

LABELS = {
    "partial": "partial declaration",
    "complement": "complement declaration",
    "complement-tests": "complement test cases",
}

REASONS = {
    "partial": "express partial application of a variadic function.",
    "complement": "preserve the input function's form as a return type.",
    "complement-tests": "preserve the input function's form as a return type.",
}


def render_banner(declaration: CompoundDeclaration, config: GeneratorConfig) -> str:
    """Render the comment lines placed before generated code."""
    prefix = config.target.comment_prefix
    label = LABELS.get(declaration.kind, declaration.kind)
    lines = [
        "The following code is generated from",
        f"{config.source_url} due to {config.target.display_name} not being able to",
        REASONS.get(declaration.kind, "express this signature directly."),
        "",
        f"Begin generated {label}.",
    ]
    return "\n".join(f"{prefix} {line}".rstrip() for line in lines)


def render(
    declaration: CompoundDeclaration,
    config: GeneratorConfig,
    banner: bool = True,
    as_json: bool = False,
) -> str:
    """Render the declaration text, optionally between banner comments.

    Args:
        declaration: The generated declaration
        config: Settings the declaration was generated with
        banner: Whether to include the begin/end comments
        as_json: Render the fragments as JSON instead; banner is ignored

    Returns:
        Output text ending in a newline
    """
    if as_json:
        return declaration.to_json() + "\n"

    text = declaration.to_text()
    if not banner:
        return text + "\n"

    label = LABELS.get(declaration.kind, declaration.kind)
    footer = f"{config.target.comment_prefix} End generated {label}."
    return "\n".join([render_banner(declaration, config), text, footer]) + "\n"


def emit(
    declaration: CompoundDeclaration,
    config: GeneratorConfig,
    stream: TextIO,
    banner: bool = True,
    as_json: bool = False,
) -> None:
    """Write the rendered declaration to a text stream."""
    stream.write(render(declaration, config, banner=banner, as_json=as_json))


def write_output(
    declaration: CompoundDeclaration,
    config: GeneratorConfig,
    path: str | Path,
    banner: bool = True,
    as_json: bool = False,
) -> Path:
    """Write the rendered declaration to a file.

    Args:
        declaration: The generated declaration
        config: Settings; relative paths resolve against config.output_root
        path: Destination file
        banner: Whether to include the begin/end comments
        as_json: Write the fragments as JSON instead of code

    Returns:
        The path that was written
    """
    output_path = Path(path)
    if not output_path.is_absolute():
        output_path = Path(config.output_root) / output_path

    content = render(declaration, config, banner=banner, as_json=as_json)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content)
    logger.info(f"Wrote {len(declaration.fragments)} fragments to {output_path}")
    return output_path
