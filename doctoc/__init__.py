"""Generate and maintain tables of contents inside Markdown documents."""

from .errors import (
    ConfigError,
    DocTocError,
    InvalidConfigurationError,
    UnsupportedPlatformError,
)
from .models import AnchoredHeader, DelimitedSection, Header, TransformResult
from .platforms import Platform
from .transform import get_all_headers, prepare_main_toc_headers, transform

__all__ = [
    "AnchoredHeader",
    "ConfigError",
    "DelimitedSection",
    "DocTocError",
    "Header",
    "InvalidConfigurationError",
    "Platform",
    "TransformResult",
    "UnsupportedPlatformError",
    "get_all_headers",
    "prepare_main_toc_headers",
    "transform",
]
