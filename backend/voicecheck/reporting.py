"""Plain-text rendering of a ValidationReport.

Presentation only. Nothing here changes the verdict.
"""

from typing import Optional

import typer

from voicecheck.validators.models import SECTION_TITLES, Finding, Section, ValidationReport

_GROUPS = [
    ("Passed Checks", "passed", "[PASS]", typer.colors.GREEN),
    ("Warnings", "warnings", "[WARN]", typer.colors.YELLOW),
    ("Errors", "errors", "[ERROR]", typer.colors.RED),
]


def _paint(text: str, color: Optional[str], enabled: bool, bold: bool = False) -> str:
    if not enabled:
        return text
    return typer.style(text, fg=color, bold=bold)


def render_details(report: ValidationReport, color: bool = False) -> list[str]:
    """Detail lines grouped under their section title, in section order."""
    by_section: dict[Section, list[Finding]] = {}
    for detail in report.details:
        by_section.setdefault(Section(detail.section), []).append(detail)

    lines = []
    for section in Section:
        if section not in by_section:
            continue
        lines.append(_paint(SECTION_TITLES[section], typer.colors.BLUE, color, bold=True))
        lines.extend(_paint(f"  - {d.message}", typer.colors.CYAN, color) for d in by_section[section])
        lines.append("")
    return lines


def render_summary(report: ValidationReport, color: bool = False, debug_guide: Optional[str] = None) -> list[str]:
    """The final verdict line, plus a pointer to the restoration guide when invalid."""
    if report.valid and not report.has_warnings:
        return [_paint("Configuration is valid!", typer.colors.GREEN, color)]
    if report.valid:
        return [_paint("Configuration is valid but has warnings", typer.colors.YELLOW, color)]

    lines = [_paint(f"Configuration is invalid! Found {report.error_count} error(s)", typer.colors.RED, color)]
    if debug_guide:
        lines.append(_paint(f"Refer to {debug_guide} for restoration steps.", typer.colors.CYAN, color))
    return lines


def render_report(report: ValidationReport, color: bool = False, debug_guide: Optional[str] = None) -> str:
    """Render details, then passed / warnings / errors groups, then the summary."""
    lines = [_paint("Validating agent configuration...", typer.colors.BLUE, color, bold=True), ""]
    lines.extend(render_details(report, color))

    lines.append(_paint("Validation Report", typer.colors.BLUE, color, bold=True))
    lines.append("")
    for title, attr, tag, group_color in _GROUPS:
        findings = getattr(report, attr)
        if not findings:
            continue
        lines.append(_paint(f"{title} ({len(findings)}):", group_color, color, bold=True))
        lines.extend(_paint(f"  {tag} {f.message}", group_color, color) for f in findings)
        lines.append("")

    lines.append(_paint("Final Result", typer.colors.BLUE, color, bold=True))
    lines.extend(render_summary(report, color, debug_guide))
    return "\n".join(lines)
