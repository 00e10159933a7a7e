"""Prompt templates and builders for the cookie image-edit flows."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional

from cookie_api.config import logger


# --- GENERATION PROMPT ---

PROMPT_TEMPLATE = """Using the provided image as reference, create a tasty, perfectly formed {COOKIE_DESCRIPTION} based on the subject or image. If the image contains a person, render a simplified likeness of their face that clearly resembles them while remaining non-photorealistic; if the image contains an object, animal, or scene, translate its most recognizable features into a friendly design using the same logic. {DECORATION_DESCRIPTION} Colors should be vibrant, playful, and holiday-friendly without needing to follow real-world color accuracy. Add small, simplified seasonal accents such as {SEASONAL_ACCENTS}, avoiding anything overtly religious or denominational. The final result should feel cute, approachable, and clearly edible, emphasizing handcrafted charm, clarity, and a strong resemblance achieved through simplified decoration rather than realism.

Scene + framing: square {IMAGE_SIZE} close-up food photography. {SCENE_DESCRIPTION} Do not include any extra text or watermarks."""


@dataclass(frozen=True)
class StylePreset:
    """Prompt fragments that make up one cookie style."""

    key: str
    label: str
    cookie_description: str
    decoration_description: str
    seasonal_accents: str
    scene_description: str = (
        "The cookie is placed on crinkled parchment paper (baking sheet vibe), with soft natural "
        "lighting, shallow depth of field, and gentle shadows. Background should be parchment "
        "texture (not a flat color)."
    )


STYLE_PRESETS: Dict[str, StylePreset] = {
    preset.key: preset
    for preset in (
        StylePreset(
            key="royal-icing",
            label="Royal icing sugar cookie",
            cookie_description="sugar cookie decorated with smooth royal icing",
            decoration_description=(
                "The cookie should be stamped in a simple, easy-to-cut silhouette, with the design "
                "piped entirely in feasible royal-icing shapes: chunky, smooth lines rather than fine "
                "illustration detail, minimal shading, and clean, confident outlines like those used "
                "by a skilled cookie artist."
            ),
            seasonal_accents="holly, snowflakes, sparkles, a scarf, or a beanie rendered as basic piped shapes",
        ),
        StylePreset(
            key="gingerbread",
            label="Gingerbread cookie",
            cookie_description="gingerbread cookie with crisp white icing outlines",
            decoration_description=(
                "The cookie should keep the warm brown gingerbread surface visible, cut as a rounded "
                "gingerbread-person or portrait silhouette, with details drawn in thin white icing "
                "lines, gumdrop buttons, and a few candy accents."
            ),
            seasonal_accents="candy canes, peppermints, tiny stars, or a knitted scarf made of icing",
        ),
        StylePreset(
            key="sprinkles",
            label="Frosted sprinkle cookie",
            cookie_description="soft frosted sugar cookie topped with buttercream and sprinkles",
            decoration_description=(
                "The likeness should be spread in smooth pastel buttercream with simple flooded color "
                "areas, finished with rainbow sprinkles, nonpareils, and a glossy sugar sheen."
            ),
            seasonal_accents="sugar pearls, mini snowflake sprinkles, edible glitter, or a tiny bow",
            scene_description=(
                "The cookie rests on a cooling rack over a marble counter dusted with sprinkles, with "
                "bright natural light and a softly blurred kitchen background."
            ),
        ),
    )
}

DEFAULT_STYLE = "royal-icing"


def resolve_style(style: Optional[str]) -> StylePreset:
    """Return the preset for ``style``; unknown or missing styles use the default."""
    key = (style or "").strip().lower()
    preset = STYLE_PRESETS.get(key)
    if preset is None:
        logger.debug(f"Unknown cookie style {style!r}, using {DEFAULT_STYLE}")
        preset = STYLE_PRESETS[DEFAULT_STYLE]
    return preset


def build_cookie_prompt(style: Optional[str] = None, image_size: str = "1024x1024") -> str:
    """Render the image-edit prompt for the requested cookie style."""
    preset = resolve_style(style)
    return PROMPT_TEMPLATE.format(
        COOKIE_DESCRIPTION=preset.cookie_description,
        DECORATION_DESCRIPTION=preset.decoration_description,
        SEASONAL_ACCENTS=preset.seasonal_accents,
        IMAGE_SIZE=image_size,
        SCENE_DESCRIPTION=preset.scene_description,
    )


def list_styles() -> List[Dict[str, str]]:
    return [{"key": preset.key, "label": preset.label} for preset in STYLE_PRESETS.values()]


__all__ = [
    "PROMPT_TEMPLATE",
    "STYLE_PRESETS",
    "DEFAULT_STYLE",
    "StylePreset",
    "resolve_style",
    "build_cookie_prompt",
    "list_styles",
]
