from nodebuild.core.output.abc import OutputWriter
from nodebuild.core.output.dry_run import DryRunOutputWriter
from nodebuild.core.output.real import RealOutputWriter

__all__ = [
    "DryRunOutputWriter",
    "OutputWriter",
    "RealOutputWriter",
]
