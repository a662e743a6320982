"""
Exporters that render a finished token store for downstream tooling.
"""

from .common import css_variable_names
from .css import export_css_file, generate_css
from .dtcg import export_dtcg_file, generate_dtcg_tokens
from .tailwind import build_tailwind_config, export_tailwind_file, generate_tailwind_config

__all__ = [
    "build_tailwind_config",
    "css_variable_names",
    "export_css_file",
    "export_dtcg_file",
    "export_tailwind_file",
    "generate_css",
    "generate_dtcg_tokens",
    "generate_tailwind_config",
]
