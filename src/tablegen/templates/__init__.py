from .LinePart import DYNAMIC_PREFIX, DYNAMIC_SUFFIX, LinePart, LinePartKind, has_marker, tokenize
from .TemplateLine import DynamicTemplateLine, StaticTemplateLine, TemplateLineBase
from .Template import DynamicTemplate, StaticTemplate, TemplateBase
