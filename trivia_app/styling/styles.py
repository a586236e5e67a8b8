"""Centralized CSS shared by every page."""

from trivia_app.core.models import ResultTier

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate page stylesheets based on the current theme."""

    @staticmethod
    def get_adaptive_page_style() -> str:
        """Light stylesheet, switched to the dark one when the browser prefers dark."""
        return (
            f"{Styles.get_page_style(Theme.LIGHT)}\n"
            f"        @media (prefers-color-scheme: dark) {{{Styles.get_page_style(Theme.DARK)}}}\n"
        )

    @staticmethod
    def get_page_style(theme: Theme = Theme.LIGHT) -> str:
        difficulty_rules = "\n".join(
            f"            .difficulty-{index} {{ background: {colors.get(theme)}; }}"
            for index, colors in enumerate(ColorPalette.DIFFICULTY_BACKGROUNDS)
        )
        result_rules = "\n".join(
            f"            .result-{tier.value} {{ color: {text.get(theme)}; background: {background.get(theme)}; }}"
            for tier in ResultTier
            for text, background in [ColorPalette.for_result_tier(tier)]
        )
        return f"""
            :root {{ font-family: 'Segoe UI', 'Roboto', system-ui, sans-serif; }}
            body {{
                margin: 0;
                min-height: 100vh;
                display: flex;
                flex-direction: column;
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            header {{ padding: 1rem; text-align: center; box-shadow: 0 1px 2px rgba(0, 0, 0, 0.08); }}
            header h1 {{ margin: 0; font-size: 1.5rem; }}
            main {{ flex: 1; width: 100%; max-width: 48rem; margin: 0 auto; padding: 2rem 1rem; box-sizing: border-box; }}
            footer {{
                padding: 1rem;
                text-align: center;
                font-size: 0.85rem;
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
                background: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
            }}
            .hero {{ background: {ColorPalette.BACKGROUND_HERO.get(theme)}; }}
            .card {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 0.75rem;
                padding: 1.5rem;
                margin-bottom: 1rem;
            }}
            .grid {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(14rem, 1fr)); gap: 1rem; }}
            .button {{
                display: inline-block;
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 0.5rem;
                padding: 0.6rem 1.2rem;
                font-size: 1rem;
                text-decoration: none;
                cursor: pointer;
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                background: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
            }}
            .button:hover {{ background: {ColorPalette.BUTTON_HOVER_BG.get(theme)}; }}
            .button.primary {{
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                background: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                border-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
            }}
            .button:disabled {{ opacity: 0.5; cursor: not-allowed; }}
            .row {{ display: flex; justify-content: space-between; align-items: center; gap: 1rem; flex-wrap: wrap; }}
            .muted {{ color: {ColorPalette.TEXT_SECONDARY.get(theme)}; font-size: 0.9rem; }}
            .progress {{ width: 100%; height: 0.6rem; border-radius: 999px; background: {ColorPalette.BACKGROUND_SECONDARY.get(theme)}; overflow: hidden; }}
            .progress-fill {{ height: 100%; background: {ColorPalette.PROGRESS_FILL.get(theme)}; }}
            .option {{ display: flex; align-items: center; gap: 0.5rem; margin-bottom: 0.5rem; cursor: pointer; }}
            .explanation {{ padding: 1rem; border-radius: 0.5rem; background: {ColorPalette.EXPLANATION_BG.get(theme)}; }}
            .answer-correct {{ color: {ColorPalette.SUCCESS.get(theme)}; font-weight: bold; }}
            .answer-wrong {{ color: {ColorPalette.ERROR.get(theme)}; text-decoration: line-through; }}
            .result {{ padding: 1rem; border-radius: 0.5rem; text-align: center; }}
            .hidden {{ display: none; }}
            .link-card img {{ width: 100%; height: 8rem; object-fit: cover; border-radius: 0.5rem 0.5rem 0 0; }}
{difficulty_rules}
{result_rules}
        """
