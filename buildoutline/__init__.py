"""buildoutline: fold and search structured build output.

A parser feeds build events (project/target/task start and end, errors,
warnings, messages, diagnostics) into a ``BuildOutputProcessor``, which
keeps them as a tree.  The tree renders to indented text plus fold
segments for a text viewer, and can be searched by node kind, e.g. to
jump between errors.
"""

__version__ = "0.1.0"
__description__ = "Tree building, folding and search for structured build output"

from buildoutline.core.event_log import EventLogProcessor
from buildoutline.core.processor import BuildOutputProcessor
from buildoutline.models.folding import FoldSegment, RenderedOutput
from buildoutline.models.nodes import BuildOutputNode, BuildOutputNodeType

__all__ = [
    "BuildOutputNode",
    "BuildOutputNodeType",
    "BuildOutputProcessor",
    "EventLogProcessor",
    "FoldSegment",
    "RenderedOutput",
    "__version__",
]
