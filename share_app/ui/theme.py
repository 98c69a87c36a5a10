import flet as ft


class AppTheme:
    """
    Centralized theme configuration for the share window.
    Material 3 light scheme seeded from blue, on a translucent backdrop.
    """

    seed_color = "#2196f3"  # Blue
    error_color = "#e74c3c"

    # Translucent white backdrop (ARGB)
    backdrop_color = "#C8FFFFFF"
    border_radius = 5

    @classmethod
    def light_theme(cls) -> ft.Theme:
        return ft.Theme(
            color_scheme_seed=cls.seed_color,
            color_scheme=ft.ColorScheme(error=cls.error_color),
            use_material3=True,
        )
