"""
Semantic and component vocabularies.

A vocabulary lists the tokens a tier should contain and, for each mode,
the reference the resolution engine should turn into a value. The
defaults follow the familiar shadcn-style role set; a project can
override individual entries with a ``vocabulary.yaml`` file.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tokengraph.core.ir import Mode, TokenSpec

# =============================================================================
# Models
# =============================================================================


class RoleSpec(BaseModel):
    """References for one token, per mode."""

    model_config = ConfigDict(frozen=True)

    light: str
    dark: str
    group: str = ""

    def references(self) -> dict[Mode, str]:
        return {Mode.LIGHT: self.light, Mode.DARK: self.dark}


class Vocabulary(BaseModel):
    """Semantic roles plus component property groups."""

    semantic: dict[str, RoleSpec] = Field(default_factory=dict)
    components: dict[str, dict[str, RoleSpec]] = Field(
        default_factory=dict,
        description="Component group path (e.g. button/ghost) -> property -> references",
    )

    def semantic_specs(self) -> list[TokenSpec]:
        return [
            TokenSpec(name=name, group=role.group, references=role.references())
            for name, role in self.semantic.items()
        ]

    def component_specs(self) -> list[TokenSpec]:
        specs = []
        for group, properties in self.components.items():
            prefix = group.rsplit("/", 1)[-1]
            for prop, role in properties.items():
                specs.append(
                    TokenSpec(
                        name=f"{prefix}-{prop}",
                        group=role.group or group,
                        references=role.references(),
                    )
                )
        return specs

    def merged(self, other: Vocabulary) -> Vocabulary:
        """Overlay ``other`` on this vocabulary; entries in ``other`` win."""
        components = {group: dict(props) for group, props in self.components.items()}
        for group, props in other.components.items():
            components.setdefault(group, {}).update(props)
        return Vocabulary(semantic={**self.semantic, **other.semantic}, components=components)


def _role(light: str, dark: str | None = None, group: str = "") -> RoleSpec:
    return RoleSpec(light=light, dark=dark if dark is not None else light, group=group)


# =============================================================================
# Defaults
# =============================================================================

SEMANTIC_ROLES: dict[str, RoleSpec] = {
    # Base
    "background": _role("gray-50", "gray-950", "colors/base"),
    "foreground": _role("gray-950", "gray-50", "colors/base"),
    # Brand
    "primary": _role("primary-500", group="colors/primary"),
    "primaryForeground": _role("gray-50", group="colors/primary"),
    "secondary": _role("primary-100", "primary-700", "colors/secondary"),
    "secondaryForeground": _role("primary-900", "gray-50", "colors/secondary"),
    "accent": _role("primary-200", "primary-600", "colors/accent"),
    "accentForeground": _role("primary-800", "gray-50", "colors/accent"),
    "muted": _role("gray-100", "gray-800", "colors/muted"),
    "mutedForeground": _role("gray-500", "gray-400", "colors/muted"),
    # UI chrome
    "border": _role("gray-200", "gray-800", "colors/ui"),
    "input": _role("gray-200", "gray-700", "colors/ui"),
    "ring": _role("primary-500", group="colors/ui"),
    # Status
    "destructive": _role("red-500", "red-700", "colors/status"),
    "destructiveForeground": _role("gray-50", group="colors/status"),
    "success": _role("green-500", "green-700", "colors/status"),
    "successForeground": _role("gray-50", group="colors/status"),
    "warning": _role("amber-500", "amber-700", "colors/status"),
    "warningForeground": _role("gray-950", "gray-50", "colors/status"),
    # Special
    "transparent": _role("transparent", group="colors/special"),
    "transparentBorder": _role("transparent", group="colors/special"),
    "transparentBackground": _role("transparent", group="colors/special"),
    "overlay": _role("gray-900", "gray-950", "colors/special"),
    "white": _role("gray-50", group="colors/special"),
    # Button roles
    "ghostBackground": _role("transparent", group="colors/ghost"),
    "ghostForeground": _role("gray-950", "gray-50", "colors/ghost"),
    "ghostBorder": _role("transparent", group="colors/ghost"),
    "defaultBackground": _role("primary-500", group="colors/button"),
    "defaultForeground": _role("gray-50", group="colors/button"),
    "secondaryBackground": _role("primary-100", "primary-700", "colors/button"),
    "outlineBackground": _role("transparent", group="colors/button"),
    "outlineForeground": _role("foreground", group="colors/button"),
    "outlineBorder": _role("border", group="colors/button"),
}


def _button(background: str, foreground: str, border: str, ring: str) -> dict[str, RoleSpec]:
    return {
        "background": _role(background),
        "foreground": _role(foreground),
        "border": _role(border),
        "ring": _role(ring),
    }


COMPONENT_GROUPS: dict[str, dict[str, RoleSpec]] = {
    "button/default": _button("primary", "primaryForeground", "transparentBorder", "ring"),
    "button/secondary": _button(
        "secondary", "secondaryForeground", "transparentBorder", "ring"
    ),
    "button/outline": _button("transparentBackground", "foreground", "border", "ring"),
    "button/ghost": _button("ghostBackground", "ghostForeground", "ghostBorder", "ring"),
    "button/destructive": _button(
        "destructive", "destructiveForeground", "transparentBorder", "destructive"
    ),
    "card": {
        "background": _role("background"),
        "foreground": _role("foreground"),
        "border": _role("border"),
    },
    "input": {
        "background": _role("background"),
        "foreground": _role("foreground"),
        "border": _role("input"),
        "ring": _role("ring"),
        "placeholder": _role("mutedForeground"),
    },
    "dialog": {
        "background": _role("background"),
        "foreground": _role("foreground"),
        "border": _role("border"),
        "overlay": _role("rgba(0, 0, 0, 0.4)", "rgba(0, 0, 0, 0.7)"),
    },
    "toast": {
        "background": _role("background"),
        "foreground": _role("foreground"),
        "border": _role("border"),
        "action": _role("primary"),
    },
    "popover": {
        "background": _role("background"),
        "foreground": _role("foreground"),
        "border": _role("border"),
    },
}

DEFAULT_VOCABULARY = Vocabulary(semantic=SEMANTIC_ROLES, components=COMPONENT_GROUPS)
