"""Command-line interface for Writing Style Analyzer."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from writing_style_analyzer import __version__

console = Console()
err_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error", "critical"], case_sensitive=False),
    default=None,
    help="Log level (default: WSA_LOG_LEVEL or WARNING)",
)
def main(log_level: str | None) -> None:
    """Writing Style Analyzer - score the authenticity of writing samples."""
    from writing_style_analyzer.config import get_settings
    from writing_style_analyzer.logging_conf import setup_logging

    try:
        settings = get_settings()
    except ValueError as e:
        err_console.print(f"[red]Invalid settings: {escape(str(e))}[/red]")
        raise SystemExit(1)

    setup_logging(log_level or settings.log_level, console=err_console)


# ============================================================================
# Analysis Commands
# ============================================================================

@main.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", type=click.Path(), help="Output file for the report (JSON)")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Show progress for each stage")
def analyze(paths: tuple[str, ...], output: str | None, as_json: bool, verbose: bool) -> None:
    """Analyze one or more sample files as one body of writing.

    Example:
        wsa analyze essay1.txt essay2.txt -o my_style.json
    """
    from writing_style_analyzer.config import get_settings
    from writing_style_analyzer.style import StyleAnalyzer

    settings = get_settings()

    def progress_callback(progress):
        console.print(f"  \\[{progress.phase}] {progress.message}")

    analyzer = StyleAnalyzer(
        progress_callback=progress_callback if verbose else None,
        encoding=settings.sample_encoding,
    )

    try:
        report = analyzer.analyze_files([Path(p) for p in paths])
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)

    if as_json:
        click.echo(report.to_json(indent=settings.json_indent))
    else:
        _print_report(report)

    if output:
        output_path = Path(output)
        analyzer.save_report(report, output_path, indent=settings.json_indent)
        console.print(f"\n[green]OK[/green] Report saved to {escape(str(output_path))}")


@main.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print the scores as JSON")
def score(input_path: str, as_json: bool) -> None:
    """Score a JSON document of authenticity inputs.

    The document holds vocabularyDiversity, sentenceComplexity,
    readabilityScore, formalityLevel, emotionalTone, engagementLevel,
    personalPronouns, hedgingLanguage and confidenceMarkers.

    Example:
        wsa score inputs.json
    """
    from writing_style_analyzer.style import (
        AuthenticityInput,
        authenticity_level,
        score_authenticity,
    )

    try:
        with open(input_path, "r", encoding="utf-8") as f:
            data = AuthenticityInput.model_validate(json.load(f))
    except ValueError as e:
        console.print(f"[red]Invalid input in {escape(input_path)}: {escape(str(e))}[/red]")
        raise SystemExit(1)

    result = score_authenticity(data)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    _print_authenticity(result)
    level = authenticity_level(result.overall_authenticity)
    console.print(f"\n[bold]{level.level}[/bold]: {level.description}")


@main.command()
@click.argument("report1", type=click.Path(exists=True, dir_okay=False))
@click.argument("report2", type=click.Path(exists=True, dir_okay=False))
def compare(report1: str, report2: str) -> None:
    """Compare two saved style reports.

    Example:
        wsa compare before.json after.json
    """
    from writing_style_analyzer.style import StyleAnalyzer

    analyzer = StyleAnalyzer()

    try:
        r1 = analyzer.load_report(report1)
        r2 = analyzer.load_report(report2)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)

    comparison = analyzer.compare(r1, r2)

    console.print(f"\n[bold]Style Comparison: {escape(comparison['report1'])} vs {escape(comparison['report2'])}[/bold]\n")

    table = Table(title="Authenticity")
    table.add_column("Dimension", style="cyan")
    table.add_column("First", justify="right")
    table.add_column("Second", justify="right")
    table.add_column("Change", style="green", justify="right")

    for name, values in comparison["authenticity"].items():
        table.add_row(
            name.title(),
            f"{values['report1']:.1f}",
            f"{values['report2']:.1f}",
            f"{values['difference']:+.1f}",
        )
    table.add_row(
        "Overall",
        f"{r1.authenticity.overall_authenticity:.1f}",
        f"{r2.authenticity.overall_authenticity:.1f}",
        f"{comparison['overall_difference']:+.1f}",
    )

    console.print(table)

    console.print("\n[bold]Style changes:[/bold]")
    for key, diff in comparison["characteristics"].items():
        console.print(f"  {key}: {diff:+.1f}")


@main.command()
@click.argument("report_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", type=click.Path(), help="Output file for report (Markdown)")
def report(report_path: str, output: str | None) -> None:
    """Generate a Markdown report from a saved style report.

    Example:
        wsa report my_style.json -o my_style.md
    """
    from writing_style_analyzer.style import StyleAnalyzer

    try:
        style_report = StyleAnalyzer().load_report(report_path)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)

    markdown = _generate_markdown_report(style_report)

    if output:
        output_path = Path(output)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(markdown)
        console.print(f"[green]OK[/green] Report saved to {escape(str(output_path))}")
    else:
        click.echo(markdown)


# ============================================================================
# Output helpers
# ============================================================================

def _print_report(report) -> None:
    """Print a style report as rich tables."""
    m = report.metrics
    c = report.characteristics

    console.print(f"[bold]Style Analysis:[/bold] {escape(', '.join(report.source_texts))}\n")

    table = Table(title="Linguistic Metrics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("Total words", f"{m.total_word_count:,}")
    table.add_row("Unique words", f"{m.unique_word_count:,}")
    table.add_row("Type-token ratio", f"{m.type_token_ratio:.3f}")
    table.add_row("Avg word length", f"{m.average_word_length:.2f}")
    table.add_row("Avg sentence length", f"{m.average_sentence_length:.1f}")
    table.add_row("Clauses per sentence", f"{m.sentence_complexity:.2f}")
    table.add_row("Flesch Reading Ease", f"{m.flesch_reading_ease:.1f}")
    table.add_row("Flesch-Kincaid Grade", f"{m.flesch_kincaid_grade:.1f}")
    table.add_row("Gunning Fog", f"{m.gunning_fog_index:.1f}")
    table.add_row("Personal pronouns", f"{m.personal_pronouns:.1f}%")
    table.add_row("Hedging", f"{m.hedging_language:.1f}%")
    table.add_row("Confidence markers", f"{m.confidence_markers:.1f}%")

    console.print(table)

    table = Table(title="Style Characteristics")
    table.add_column("Characteristic", style="cyan")
    table.add_column("Score", style="green", justify="right")

    for key, value in c.to_dict().items():
        table.add_row(_label(key), f"{value:.1f}")

    console.print(table)
    _print_authenticity(report.authenticity)

    level = report.level
    console.print(f"\n[bold]{level.level}[/bold]: {level.description}")


def _print_authenticity(result) -> None:
    table = Table(title="Authenticity")
    table.add_column("Dimension", style="cyan")
    table.add_column("Score", style="green", justify="right")

    for name, value in result.dimension_scores().items():
        table.add_row(name.title(), f"{value:.1f}")
    table.add_row("[bold]Overall[/bold]", f"[bold]{result.overall_authenticity:.1f}[/bold]")
    table.add_row("Confidence", f"{result.confidence_level:.1f}")

    console.print(table)

    if result.improvement_areas:
        console.print("\n[bold]Improvement areas:[/bold]")
        for area in result.improvement_areas:
            console.print(f"  - {area}")


def _label(key: str) -> str:
    """camelCase key -> 'Title case' label."""
    words = []
    current = ""
    for ch in key:
        if ch.isupper():
            words.append(current)
            current = ch.lower()
        else:
            current += ch
    words.append(current)
    return " ".join(words).capitalize()


def _generate_markdown_report(report) -> str:
    """Generate a markdown report from a style report."""
    from writing_style_analyzer.style import closest_reference_profile

    m = report.metrics
    a = report.authenticity
    level = report.level

    lines = [
        "# Writing Style Report",
        "",
        "## Overview",
        "",
        f"- **Sources**: {', '.join(report.source_texts)}",
        f"- **Total Words Analyzed**: {m.total_word_count:,}",
        f"- **Overall Authenticity**: {a.overall_authenticity:.1f} ({level.level})",
        f"- **Confidence**: {a.confidence_level:.1f}",
        f"- **Closest Profile**: {closest_reference_profile(a).title()}",
        f"- **Lexicon Version**: {report.lexicon_version}",
        "",
        "## Readability",
        "",
        "| Metric | Score | Interpretation |",
        "|--------|-------|----------------|",
        f"| Flesch Reading Ease | {m.flesch_reading_ease:.1f} | {_interpret_flesch(m.flesch_reading_ease)} |",
        f"| Flesch-Kincaid Grade | {m.flesch_kincaid_grade:.1f} | Grade {int(m.flesch_kincaid_grade)} reading level |",
        f"| Gunning Fog | {m.gunning_fog_index:.1f} | {int(m.gunning_fog_index)} years of education |",
        "",
        "## Style Characteristics",
        "",
        "| Characteristic | Score |",
        "|----------------|-------|",
    ]

    for key, value in report.characteristics.to_dict().items():
        lines.append(f"| {_label(key)} | {value:.1f} |")

    lines.extend([
        "",
        "## Authenticity",
        "",
        "| Dimension | Score |",
        "|-----------|-------|",
    ])
    for name, value in a.dimension_scores().items():
        lines.append(f"| {name.title()} | {value:.1f} |")
    lines.append("")

    if a.improvement_areas:
        lines.extend(["### Improvement Areas", ""])
        lines.extend(f"- {area}" for area in a.improvement_areas)
        lines.append("")

    return "\n".join(lines)


def _interpret_flesch(score: float) -> str:
    """Interpret Flesch Reading Ease score."""
    if score >= 90:
        return "Very easy (5th grade)"
    elif score >= 80:
        return "Easy (6th grade)"
    elif score >= 70:
        return "Fairly easy (7th grade)"
    elif score >= 60:
        return "Standard (8th-9th grade)"
    elif score >= 50:
        return "Fairly difficult (10th-12th grade)"
    elif score >= 30:
        return "Difficult (college level)"
    else:
        return "Very difficult (college graduate)"


if __name__ == "__main__":
    main()
