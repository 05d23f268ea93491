"""
Filter Registry Configuration.

Maps filter class names to their runtime metadata for the
``downtime/transitions`` endpoint.  This is the single file to edit
when adding a new request parameter — no switches, no long
conditionals.

Keys:
  class_name → str : unique name of the filter instance.

Values: dict with:
  filter_type    → str   : "daterange" | "dropdown" | "text" | "number" | "toggle"
  param_name     → str   : HTTP query parameter sent by the frontend.
  target         → str   : attribute of ``TransitionsFilters`` it fills.
  default_value  → Any   : default if the caller provides nothing.
  required       → bool  : whether the parameter must be present.
  display_order  → int   : resolution order (first failing filter wins).
  ui_config      → dict  : type-specific bounds / options.

To add a new filter:
  1. Create a class in millops/services/filters/types/ (or reuse one).
  2. Add an entry here.
  3. Add the matching field to ``TransitionsFilters``.
  Done.
"""

from millops.core.config import settings
from millops.services.transitions.grouping import GroupingDimension

FILTER_REGISTRY: dict[str, dict] = {
    "MillFilter": {
        "filter_type": "text",
        "param_name": "mill",
        "target": "mill",
        "default_value": None,
        "required": False,
        "display_order": 1,
        "description": "Restrict to one mill",
        "ui_config": {"max_length": 100},
    },
    "FactoryFilter": {
        "filter_type": "text",
        "param_name": "factory",
        "target": "factory",
        "default_value": None,
        "required": False,
        "display_order": 2,
        "description": "Restrict to one factory",
        "ui_config": {"max_length": 100},
    },
    "DateRangeFilter": {
        "filter_type": "daterange",
        "param_name": "startDate",
        "target": "daterange",
        "default_value": None,
        "required": False,
        "display_order": 3,
        "description": "Inclusive start/end calendar dates",
        "ui_config": {"start_param": "startDate", "end_param": "endDate"},
    },
    "GroupingFilter": {
        "filter_type": "dropdown",
        "param_name": "grouping",
        "target": "grouping",
        "default_value": GroupingDimension.REASON.value,
        "required": False,
        "display_order": 4,
        "description": "Event attribute used as transition node",
        "ui_config": {
            "static_options": GroupingDimension.values(),
            "enum": GroupingDimension,
        },
    },
    "TopNFilter": {
        "filter_type": "number",
        "param_name": "topN",
        "target": "top_n",
        "default_value": settings.TRANSITIONS_DEFAULT_TOP_N,
        "required": False,
        "display_order": 5,
        "description": "Number of transitions kept before collapsing into 'other'",
        "ui_config": {"min": 1},
    },
    "FromValueFilter": {
        "filter_type": "text",
        "param_name": "fromValue",
        "target": "from_value",
        "default_value": None,
        "required": False,
        "display_order": 6,
        "description": "Only count transitions leaving this node",
        "ui_config": {"max_length": 255},
    },
    "ToValueFilter": {
        "filter_type": "text",
        "param_name": "toValue",
        "target": "to_value",
        "default_value": None,
        "required": False,
        "display_order": 7,
        "description": "Only count transitions entering this node",
        "ui_config": {"max_length": 255},
    },
    "IncludeSelfFilter": {
        "filter_type": "toggle",
        "param_name": "includeSelf",
        "target": "include_self",
        "default_value": settings.TRANSITIONS_INCLUDE_SELF,
        "required": False,
        "display_order": 8,
        "description": "Count consecutive stops with the same node value",
        "ui_config": {},
    },
    "IncludePairsFilter": {
        "filter_type": "toggle",
        "param_name": "includePairs",
        "target": "include_pairs",
        "default_value": False,
        "required": False,
        "display_order": 9,
        "description": "Attach the event pairs behind each counted transition",
        "ui_config": {},
    },
}
