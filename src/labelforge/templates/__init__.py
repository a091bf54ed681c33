"""Label templates: data model, sheet geometry and the template registry.

A template names a page size and a frame (the shape of one label); the
frame's layouts place copies of that label on the page. The registry
collects every known template and answers lookups by name, alias, page
size and category.
"""

from labelforge.templates.geometry import Origin, frame_size, label_count, origins
from labelforge.templates.model import (
    Frame,
    FrameCD,
    FrameRect,
    FrameRound,
    Layout,
    Markup,
    MarkupCircle,
    MarkupLine,
    MarkupMargin,
    MarkupRect,
    Template,
    release_template,
)
from labelforge.templates.registry import (
    NoTemplatesError,
    TemplateLookup,
    TemplateRegistry,
    free_name_list,
    get_registry,
    reset_registry,
)

__all__ = [
    "Frame",
    "FrameCD",
    "FrameRect",
    "FrameRound",
    "Layout",
    "Markup",
    "MarkupCircle",
    "MarkupLine",
    "MarkupMargin",
    "MarkupRect",
    "NoTemplatesError",
    "Origin",
    "Template",
    "TemplateLookup",
    "TemplateRegistry",
    "frame_size",
    "free_name_list",
    "get_registry",
    "label_count",
    "origins",
    "release_template",
    "reset_registry",
]
