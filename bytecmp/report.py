"""Human-readable rendering of a bytecode comparison."""

from __future__ import annotations

from .compare.config import CompareConfig
from .compare.controller import BytecodeComparison, MaskedFile
from .compare.runs import context_window
from .display.base import Display
from .templating import render_block

HEADER_TEMPLATE = """
Bytecode Comparison:
-------------------
Options: {{ options }}
""".strip()

FILES_TEMPLATE = """
File 1: {{ file1.path }} ({{ file1.normalized_length }} chars)
File 2: {{ file2.path }} ({{ file2.normalized_length }} chars)
""".strip()

REGIONS_TEMPLATE = """
File {{ index }} ({{ regions|length }} sections):
{% for region in regions %}
  {{ loop.index }}. {{ region.kind.value }} at position {{ region.position }}-{{ region.end }}
     Content: {{ region.preview(preview_length) }}
{% endfor %}
""".strip()

DIFFERENCE_TEMPLATE = """
Difference #{{ number }}:
Position: {{ run.start }} to {{ run.end }} (length: {{ run.length }})
File 1: {{ run.content1 or '(missing)' }}
File 2: {{ run.content2 or '(missing)' }}

Context:
File 1: {{ before1 }}[{{ run.content1 }}]{{ after1 }}
File 2: {{ before2 }}[{{ run.content2 }}]{{ after2 }}
""".strip()

SUMMARY_TEMPLATE = (
    "Summary: {{ total }} different characters ({{ '%.2f'|format(percent) }}% of the analyzed bytecode)"
)

IDENTICAL_MESSAGE = "The bytecodes are functionally identical (ignoring specified metadata sections)."
DIFFERENT_MESSAGE = "The bytecodes are different, even ignoring specified metadata sections."


def render_header(config: CompareConfig) -> str:
    return render_block(HEADER_TEMPLATE, {"options": config.options_summary})


def render_regions(index: int, masked_file: MaskedFile, preview_length: int) -> str:
    """Numbered list of the regions masked in one file."""
    return render_block(
        REGIONS_TEMPLATE,
        {"index": index, "regions": masked_file.regions, "preview_length": preview_length},
    )


def render_differences(comparison: BytecodeComparison) -> list[str]:
    """One text block per difference run, with a bracketed context window."""
    text1 = comparison.file1.masked_text
    text2 = comparison.file2.masked_text
    size = comparison.config.context_size

    blocks = []
    for number, run in enumerate(comparison.result.runs, start=1):
        before1, after1 = context_window(text1, run, size)
        before2, after2 = context_window(text2, run, size)
        blocks.append(
            render_block(
                DIFFERENCE_TEMPLATE,
                {
                    "number": number,
                    "run": run,
                    "before1": before1,
                    "after1": after1,
                    "before2": before2,
                    "after2": after2,
                },
            )
        )
    return blocks


def render_summary(comparison: BytecodeComparison) -> str:
    result = comparison.result
    return render_block(SUMMARY_TEMPLATE, {"total": result.total_different_chars, "percent": result.percent_different})


def report_comparison(comparison: BytecodeComparison, display: Display) -> None:
    """Write the full comparison report through ``display``."""
    config = comparison.config
    display.info(render_block(FILES_TEMPLATE, {"file1": comparison.file1, "file2": comparison.file2}))

    masked_files = [(1, comparison.file1), (2, comparison.file2)]
    if any(masked_file.regions for _, masked_file in masked_files):
        display.info("\nReplaced sections for comparison:")
        for index, masked_file in masked_files:
            if masked_file.regions:
                display.info("\n" + render_regions(index, masked_file, config.preview_length))

    if comparison.identical:
        display.success(IDENTICAL_MESSAGE)
        return

    display.error(DIFFERENT_MESSAGE)

    count = len(comparison.result.runs)
    display.info(f"\nFound {count} difference{'' if count == 1 else 's'}:")
    for block in render_differences(comparison):
        display.info("\n" + block)

    display.info("\n" + render_summary(comparison))
