"""Build context with dependency injection."""

from dataclasses import dataclass

from nodebuild.core.config import BuildConfig
from nodebuild.core.output import DryRunOutputWriter, OutputWriter, RealOutputWriter
from nodebuild.core.reporter import BuildReporter, ClickReporter


@dataclass(frozen=True)
class BuildContext:
    """Immutable context holding configuration and ops for one build.

    Created at the CLI entry point and threaded through the build tasks.
    Tests construct it directly with fake writer and reporter implementations.
    """

    config: BuildConfig
    writer: OutputWriter
    reporter: BuildReporter

    @staticmethod
    def create(
        config: BuildConfig, *, dry_run: bool = False, color: bool | None = None
    ) -> "BuildContext":
        """Create a production context.

        Args:
            config: Build configuration for this invocation
            dry_run: Report writes instead of performing them
            color: Force (True) or disable (False) ANSI colors; None auto-detects
        """
        reporter = ClickReporter(color=color)
        writer: OutputWriter
        if dry_run:
            writer = DryRunOutputWriter(reporter)
        else:
            writer = RealOutputWriter()
        return BuildContext(config=config, writer=writer, reporter=reporter)
