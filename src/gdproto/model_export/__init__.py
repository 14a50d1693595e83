"""Template context export."""

from .template_context import OUTPUT_FORMATS, build_template_context, dump_template_context

__all__ = ["OUTPUT_FORMATS", "build_template_context", "dump_template_context"]
