#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the docdirectives library.

Constants are organized by category:
1. Type Definitions
2. Directive Names
3. Callout Defaults
4. Embed Defaults
5. Link Preview Defaults
6. Serialization
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

CalloutVariant = Literal["default", "info", "warning", "success", "danger"]

# =============================================================================
# Directive Names
# =============================================================================

CALLOUT_DIRECTIVE_NAME = "callout"
EMBED_DIRECTIVE_NAME = "embed"
LINK_PREVIEW_DIRECTIVE_NAME = "link-preview"

# =============================================================================
# Callout Defaults
# =============================================================================

# Order matters: it is the order used in error messages and CLI choices
CALLOUT_VARIANTS: tuple[CalloutVariant, ...] = ("default", "info", "warning", "success", "danger")

DEFAULT_CALLOUT_VARIANT: CalloutVariant = "default"

# Classification text used when a callout has no children to classify from
DEFAULT_CALLOUT_LABEL = "default"

DEFAULT_CALLOUT_ICONS: dict[str, str] = {
    "default": "\U0001f4a1",
    "info": "ℹ️",
    "warning": "⚠️",
    "danger": "\U0001f6ab",
    "success": "✅",
}

CALLOUT_BASE_CLASSES = (
    "relative w-full rounded-lg border p-4 my-2 [&>svg~*]:pl-7 [&>svg+div]:translate-y-[-3px] "
    "[&>svg]:absolute [&>svg]:left-4 [&>svg]:top-4 [&>svg]:text-foreground"
)

CALLOUT_VARIANT_CLASSES: dict[str, str] = {
    "default": "bg-background text-foreground",
    "info": "border-cyan/50 text-cyan dark:border-cyan [&>svg]:text-cyan",
    "warning": "border-yellow/50 text-yellow dark:border-yellow [&>svg]:text-yellow",
    "success": "border-green/50 text-green dark:border-green [&>svg]:text-green",
    "danger": "border-red/50 text-red dark:border-red [&>svg]:text-red",
}

CALLOUT_TITLE_CLASSES = "callout-title"
CALLOUT_ICON_CLASSES = "mr-2 callout-icon"
CALLOUT_TITLE_TEXT_CLASSES = "mb-1 font-medium leading-none tracking-tight callout-title-text"
CALLOUT_CONTENT_CLASSES = "text-sm [&_p]:leading-relaxed callout-content"

# =============================================================================
# Embed Defaults
# =============================================================================

EMBED_BASE_CLASSES = "w-full h-full rounded-lg aspect-video my-2"
EMBED_WIDTH = "100%"
EMBED_HEIGHT = "480px"
EMBED_FRAME_BORDER = "0"
EMBED_ALLOW = "accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture"

YOUTUBE_EMBED_TEMPLATE = "https://www.youtube.com/embed/{id}"
VIMEO_EMBED_TEMPLATE = "https://player.vimeo.com/video/{id}"

# =============================================================================
# Link Preview Defaults
# =============================================================================

DEFAULT_LINK_PREVIEW_CLASS = "link-preview"
LINK_PREVIEW_BASE_CLASSES = "relative w-full flex rounded-lg border my-2 bg-background text-foreground no-underline"
LINK_PREVIEW_DETAIL_CLASSES = "flex flex-col p-4 gap-2 items-start"
LINK_PREVIEW_TARGET = "_blank"
LINK_PREVIEW_REL = "noopener noreferrer"
LINK_PREVIEW_ICON_SERVICE = "https://icon.horse/icon/{domain}"

# =============================================================================
# Serialization
# =============================================================================

AST_SCHEMA_VERSION = 1
