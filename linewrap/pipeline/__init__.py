"""Wrap entrypoints and their result carriers."""

from linewrap.pipeline.entrypoints import run_wrap, run_wrap_stream
from linewrap.pipeline.results import WrapRunResult

__all__ = [
    "WrapRunResult",
    "run_wrap",
    "run_wrap_stream",
]
