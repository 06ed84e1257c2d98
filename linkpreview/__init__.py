"""Link preview extraction from Open Graph and standard meta tags."""

__version__ = "0.1.0"

from linkpreview.config import PreviewConfig, load_config
from linkpreview.model.preview_state import PreviewData, PreviewState
from linkpreview.preview import LinkPreview

__all__ = [
    "LinkPreview",
    "PreviewConfig",
    "PreviewData",
    "PreviewState",
    "load_config",
]
