"""Pipeline orchestration for textfixer.

Responsibilities:
- Run the word-level and character-level passes in a fixed order.
- Read the source document and write the fixed document.
- Report stage telemetry and recoverable command diagnostics.

Stage order:
read -> split -> commands -> articles -> join -> punctuation -> quotes -> write
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import FixerConfig
from .io.storage import DocumentStore
from .telemetry.logger import RunLogger
from .telemetry.stages import ProgressCallback, StageTracker
from .text.articles import IndefiniteArticleFixer
from .text.interpreter import CommandDiagnostic, CommandInterpreter
from .text.spacing import PunctuationSpacingNormalizer, QuoteSpacingNormalizer, SpacingRule
from .text.splitter import decode_document, encode_document, join_words, split_words


def _char_count(text: str) -> dict[str, int]:
    return {"chars": len(text)}


@dataclass(frozen=True, slots=True)
class FixReport:
    """Fixed text plus counters collected along the way.

    Attributes:
        text: Final normalized text.
        word_count: Number of words after command expansion.
        applied_commands: Commands that changed the result sequence.
        dropped_commands: Command tokens discarded without effect.
        article_rewrites: Articles rewritten from `a` to `an`.
        diagnostics: Recoverable command failures, in document order.
    """

    text: str
    word_count: int
    applied_commands: int = 0
    dropped_commands: int = 0
    article_rewrites: int = 0
    diagnostics: tuple[CommandDiagnostic, ...] = ()


@dataclass(frozen=True, slots=True)
class RunResult:
    """Outcome of one file-to-file run."""

    input_path: Path
    output_path: Path
    bytes_read: int
    bytes_written: int
    report: FixReport


class TextFixerPipeline:
    """Apply inline commands and normalization passes to one document."""

    def __init__(
        self,
        config: FixerConfig | None = None,
        run_logger: RunLogger | None = None,
        stage_progress_callback: ProgressCallback | None = None,
        store: DocumentStore | None = None,
    ) -> None:
        """Initialize pipeline collaborators; all are optional."""

        self.config = config or FixerConfig()
        self._run_logger = run_logger
        self._stages = StageTracker(run_logger, stage_progress_callback)
        self._store = store or DocumentStore()
        self._interpreter = CommandInterpreter()
        self._article_fixer = IndefiniteArticleFixer()
        self._spacing_rules: tuple[tuple[str, str, SpacingRule], ...] = (
            ("punctuation", "fix_punctuation", PunctuationSpacingNormalizer()),
            ("quotes", "fix_quotes", QuoteSpacingNormalizer()),
        )

    def fix_text(self, text: str) -> str:
        """Return `text` with commands applied and spacing normalized."""

        return self.fix_text_with_report(text).text

    def fix_text_with_report(self, text: str) -> FixReport:
        """Run all text stages and return the result with counters."""

        config = self.config
        stages = self._stages
        words = stages.run("split", lambda: split_words(text), lambda w: {"words": len(w)})

        applied = dropped = rewrites = 0
        diagnostics: tuple[CommandDiagnostic, ...] = ()
        if config.apply_commands:
            interpretation = stages.run(
                "commands",
                lambda: self._interpreter.interpret_with_report(words),
                lambda r: {
                    "applied": r.applied_commands,
                    "dropped": r.dropped_commands,
                    "errors": len(r.diagnostics),
                },
            )
            words = interpretation.words
            applied = interpretation.applied_commands
            dropped = interpretation.dropped_commands
            diagnostics = interpretation.diagnostics
            self._log_diagnostics(diagnostics)

        if config.fix_articles:
            rewrites = stages.run(
                "articles",
                lambda: self._article_fixer.fix_with_report(words),
                lambda r: {"rewrites": r.rewrites},
            ).rewrites

        fixed = stages.run("join", lambda: join_words(words), _char_count)
        for stage, toggle, rule in self._spacing_rules:
            if getattr(config, toggle):
                fixed = stages.run(stage, lambda: rule.apply(fixed), _char_count)

        return FixReport(
            text=fixed,
            word_count=len(words),
            applied_commands=applied,
            dropped_commands=dropped,
            article_rewrites=rewrites,
            diagnostics=diagnostics,
        )

    def fix_bytes(self, data: bytes) -> bytes:
        """Decode, fix and re-encode raw document bytes."""

        encoding = self.config.encoding
        return encode_document(self.fix_text(decode_document(data, encoding)), encoding)

    def run(self, input_path: Path, output_path: Path) -> RunResult:
        """Read `input_path`, fix it, and overwrite `output_path`.

        The input is read completely before the output is opened, so a failed
        read never touches the destination.

        Raises:
            PipelineStageError: On open/read/create/write failures.
        """

        self.config.validate()
        encoding = self.config.encoding

        data = self._stages.run(
            "read", lambda: self._store.read_bytes(input_path), lambda d: {"bytes": len(d)}
        )
        report = self.fix_text_with_report(decode_document(data, encoding))
        payload = encode_document(report.text, encoding)
        self._stages.run(
            "write",
            lambda: self._store.write_bytes(output_path, payload),
            lambda _: {"bytes": len(payload)},
        )

        return RunResult(
            input_path=input_path,
            output_path=output_path,
            bytes_read=len(data),
            bytes_written=len(payload),
            report=report,
        )

    def _log_diagnostics(self, diagnostics: tuple[CommandDiagnostic, ...]) -> None:
        if self._run_logger is None:
            return
        for diagnostic in diagnostics:
            self._run_logger.conversion_failed(
                diagnostic.command, diagnostic.word, diagnostic.position, diagnostic.message
            )
