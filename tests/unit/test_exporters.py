"""Tests for the CSS, Tailwind and DTCG exporters."""

import json
from pathlib import Path

from tokengraph.core.ir import Tier
from tokengraph.core.palettes import SHADOW_TOKENS
from tokengraph.export import (
    build_tailwind_config,
    css_variable_names,
    export_css_file,
    export_dtcg_file,
    generate_css,
    generate_dtcg_tokens,
    generate_tailwind_config,
)
from tokengraph.store import TokenStore


def _block(css: str, selector: str) -> str:
    start = css.index(f"{selector} {{")
    return css[start : css.index("}", start)]


class TestCssVariableNames:
    def test_kebab_case(self, generated_store: TokenStore) -> None:
        names = css_variable_names(generated_store)
        token = generated_store.find(Tier.SEMANTIC, "primaryForeground")
        assert names[token.id] == "primary-foreground"

    def test_collisions_take_tier_prefix(self, generated_store: TokenStore) -> None:
        names = css_variable_names(generated_store)
        primitive = generated_store.find(Tier.PRIMITIVE, "transparent")
        semantic = generated_store.find(Tier.SEMANTIC, "transparent")
        component = generated_store.find(Tier.COMPONENT, "secondary-background")
        assert names[primitive.id] == "transparent"
        assert names[semantic.id] == "semantic-transparent"
        assert names[component.id] == "component-secondary-background"

    def test_names_are_unique(self, generated_store: TokenStore) -> None:
        names = list(css_variable_names(generated_store).values())
        assert len(names) == len(set(names))


class TestCss:
    def test_light_values_in_root(self, generated_store: TokenStore) -> None:
        root = _block(generate_css(generated_store), ":root")
        assert "--gray-50: #F9FAFB;" in root
        assert "--background: var(--gray-50);" in root
        assert "--radius-lg: 8px;" in root
        assert "--dialog-overlay: #00000066;" in root
        assert "--component-default-background: var(--primary);" in root

    def test_dark_block_holds_changed_values(self, generated_store: TokenStore) -> None:
        dark = _block(generate_css(generated_store), ".dark")
        assert "--background: var(--gray-950);" in dark
        assert "--foreground: var(--gray-50);" in dark
        assert "--gray-50:" not in dark
        assert "--primary:" not in dark

    def test_shadows_change_in_dark(self, generated_store: TokenStore) -> None:
        css = generate_css(generated_store)
        light, dark = SHADOW_TOKENS["sm"]
        assert f"--shadow-sm: {light};" in _block(css, ":root")
        assert f"--shadow-sm: {dark};" in _block(css, ".dark")

    def test_empty_store(self, store: TokenStore) -> None:
        css = generate_css(store)
        assert ":root {" in css
        assert ".dark" not in css

    def test_export_file(self, generated_store: TokenStore, tmp_path: Path) -> None:
        path = export_css_file(generated_store, tmp_path / "out" / "tokens.css")
        assert path.read_text(encoding="utf-8").startswith("/* tokengraph design tokens */")


class TestTailwind:
    def test_config_shape(self, generated_store: TokenStore) -> None:
        config = build_tailwind_config(generated_store)
        assert config["darkMode"] == ["class"]
        colors = config["theme"]["extend"]["colors"]
        assert colors["primary"]["DEFAULT"] == "var(--primary)"
        assert colors["primary"]["foreground"] == "var(--primary-foreground)"
        assert colors["primary"]["500"] == "var(--primary-500)"
        assert colors["gray"]["50"] == "var(--gray-50)"
        assert colors["background"] == "var(--background)"
        assert colors["transparent"] == "var(--semantic-transparent)"

    def test_radius_and_spacing(self, generated_store: TokenStore) -> None:
        extend = build_tailwind_config(generated_store)["theme"]["extend"]
        assert extend["borderRadius"]["DEFAULT"] == "var(--radius)"
        assert extend["borderRadius"]["lg"] == "var(--radius-lg)"
        assert extend["spacing"]["4"] == "var(--spacing-4)"

    def test_box_shadow(self, generated_store: TokenStore) -> None:
        extend = build_tailwind_config(generated_store)["theme"]["extend"]
        assert extend["boxShadow"]["2xl"] == "var(--shadow-2xl)"
        assert set(extend["boxShadow"]) == set(SHADOW_TOKENS)
        assert "shadow" not in extend["colors"]

    def test_rendered_module(self, generated_store: TokenStore) -> None:
        text = generate_tailwind_config(generated_store)
        assert text.startswith("/** @type {import('tailwindcss').Config} */")
        assert "module.exports = {" in text
        body = text.split("module.exports = ", 1)[1].rstrip().rstrip(";")
        assert json.loads(body)["darkMode"] == ["class"]


class TestDtcg:
    def test_literals(self, generated_store: TokenStore) -> None:
        tokens = generate_dtcg_tokens(generated_store)
        assert tokens["primitive"]["colors"]["gray"]["gray-50"] == {
            "$type": "color",
            "$value": "#F9FAFB",
        }
        assert tokens["primitive"]["radius"]["radius-lg"] == {
            "$type": "dimension",
            "$value": "8px",
        }

    def test_aliases_and_dark_values(self, generated_store: TokenStore) -> None:
        background = generate_dtcg_tokens(generated_store)["semantic"]["colors"]["base"][
            "background"
        ]
        assert background["$value"] == "{primitive.colors.gray.gray-50}"
        assert background["$extensions"]["tokengraph.modes"]["dark"] == (
            "{primitive.colors.gray.gray-950}"
        )

    def test_component_groups_nest(self, generated_store: TokenStore) -> None:
        button = generate_dtcg_tokens(generated_store)["component"]["button"]["ghost"]
        assert button["ghost-background"]["$value"] == "{semantic.colors.ghost.ghostBackground}"

    def test_export_file(self, generated_store: TokenStore, tmp_path: Path) -> None:
        path = export_dtcg_file(generated_store, tmp_path / "tokens.json")
        data = json.loads(path.read_text(encoding="utf-8"))
        assert set(data) == {"primitive", "semantic", "component"}
