"""Rule documentation sync CLI.

This module exposes a small Typer based command line tool that walks the
``R<number>`` rule directories of a repository and asks an LLM to bring
each rule's ``README.md`` in line with the rule's implementation in the
core checkout. Rules are processed one at a time; a failure for one rule
is logged and the run moves on to the next. A README is only rewritten
when the generated text differs from what is on disk.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional

import typer
from rich.progress import track

from rule_doc_sync.agents import (
    doc_writer,
    prompt_builder,
    rule_scanner,
    source_locator,
    write_back,
)
from rule_doc_sync.config import MissingCredentialError, SyncConfig, resolve_provider
from rule_doc_sync.utils.models import (
    GenerationRequest,
    GenerationResult,
    RuleDirectory,
    RuleDocument,
    RuleReport,
    RuleStatus,
)


LOGGER = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

app = typer.Typer(help="Sync rule README files with the rule implementations")

Generator = Callable[[GenerationRequest, SyncConfig], GenerationResult]

# ---------------------------------------------------------------------------


def _read_document(rule: RuleDirectory, doc_name: str) -> RuleDocument:
    path = rule.readme_path(doc_name)
    return RuleDocument(
        rule_id=rule.rule_id, path=path, content=path.read_text(encoding="utf-8")
    )


def _skip(rule: RuleDirectory, reason: str) -> RuleReport:
    LOGGER.warning("Skipping %s: %s", rule.rule_id, reason)
    return RuleReport(rule_id=rule.rule_id, status=RuleStatus.SKIPPED, reason=reason)


def sync_rule(
    rule: RuleDirectory,
    locator: source_locator.SourceLocator,
    cfg: SyncConfig,
    generator: Generator,
) -> RuleReport:
    """Run one rule through read, generate, normalize and write-back.

    Every per-rule failure is turned into a ``skipped`` report so the
    caller can carry on with the next rule.
    """

    try:
        document = _read_document(rule, cfg.doc_name)
    except (OSError, UnicodeDecodeError):
        return _skip(rule, f"{cfg.doc_name} not found or unreadable")

    LOGGER.info("Auditing %s...", rule.rule_id)
    context = locator.locate(rule.rule_id)
    request = prompt_builder.build_request(
        rule.rule_id, context.text, document.content, cfg.product_name
    )

    try:
        result = generator(request, cfg)
    except doc_writer.GenerationError as exc:
        return _skip(rule, f"generation failed: {exc}")

    try:
        status = write_back.apply_update(
            document.path, document.content, result.normalized
        )
    except write_back.WriteBackError as exc:
        return _skip(rule, str(exc))

    if status is RuleStatus.UPDATED:
        LOGGER.info("Updated %s/%s", rule.rule_id, cfg.doc_name)
    else:
        LOGGER.info("No changes needed for %s", rule.rule_id)
    return RuleReport(rule_id=rule.rule_id, status=status)


# ---------------------------------------------------------------------------


def run_sync(
    cfg: SyncConfig,
    *,
    generator: Optional[Generator] = None,
) -> List[RuleReport]:
    """Sync the documentation of every rule under ``cfg.root``.

    Parameters
    ----------
    cfg:
        Run configuration.
    generator:
        Optional replacement for :func:`doc_writer.generate_document`.

    Returns
    -------
    List[RuleReport]
        One report per processed rule, in discovery order.

    Raises
    ------
    MissingCredentialError, rule_scanner.DirectoryReadError, source_locator.SourceNotFoundError
        Before any documentation file is read or written.
    """

    cfg = resolve_provider(cfg)
    generator = generator or doc_writer.generate_document

    rules = rule_scanner.list_rule_directories(cfg.root)
    if cfg.only:
        wanted = set(cfg.only)
        rules = [r for r in rules if r.rule_id in wanted]
        LOGGER.info("Restricted to %d rules", len(rules))

    strategy: source_locator.ContextStrategy = (
        source_locator.RuleSpanStrategy()
        if cfg.extract_spans
        else source_locator.WholeFileStrategy()
    )
    locator = source_locator.SourceLocator(cfg.source_root, cfg.rules_file, strategy)
    locator.load()

    reports: List[RuleReport] = []
    for rule in track(rules, description="Syncing rule docs"):
        reports.append(sync_rule(rule, locator, cfg, generator))
    return reports


def _print_summary(reports: List[RuleReport]) -> None:
    counts = {status: 0 for status in RuleStatus}
    for report in reports:
        counts[report.status] += 1
    typer.echo(
        "\nUpdated: {updated}  Unchanged: {unchanged}  Skipped: {skipped}".format(
            **{s.value: n for s, n in counts.items()}
        )
    )
    for report in reports:
        if report.status is RuleStatus.SKIPPED:
            typer.echo(f"- {report.rule_id}: {report.reason}")


# ---------------------------------------------------------------------------


@app.command()
def run(
    root: Optional[Path] = typer.Option(
        None,
        "--root",
        help="Repository containing the R<number> rule directories",
    ),
    source: Optional[Path] = typer.Option(
        None,
        "--source",
        help="Checkout of the rule implementation repository",
    ),
    rules_file: Optional[str] = typer.Option(
        None,
        "--rules-file",
        help="Aggregate rules file, relative to --source",
    ),
    llm: Optional[str] = typer.Option(
        None,
        "--llm",
        help="LLM provider to use (e.g. 'openai' or 'gemini')",
    ),
    model: Optional[str] = typer.Option(None, "--model", help="Model name"),
    temperature: Optional[float] = typer.Option(
        None,
        "--temperature",
        help="Sampling temperature (default 0.1)",
    ),
    extract_spans: bool = typer.Option(
        False,
        "--extract-spans/--whole-file",
        help="Send only the rule's registration span instead of the whole file",
    ),
    only: Optional[List[str]] = typer.Option(
        None,
        "--only",
        help="Rule id to process; may be given more than once",
    ),
) -> None:
    """Rewrite rule README files to match the current implementation."""

    cfg = SyncConfig.from_env(
        root=root,
        source_root=source,
        rules_file=rules_file,
        provider=llm,
        model=model,
        temperature=temperature,
        extract_spans=extract_spans,
        only=list(only) if only else None,
    )
    try:
        reports = run_sync(cfg)
    except (
        MissingCredentialError,
        rule_scanner.DirectoryReadError,
        source_locator.SourceNotFoundError,
    ) as exc:
        LOGGER.error("%s", exc)
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    _print_summary(reports)


if __name__ == "__main__":  # pragma: no cover
    app()
