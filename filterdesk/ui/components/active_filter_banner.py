import flet as ft
from filterdesk.config import (
    COLOR_ACTIVE,
    COLOR_TEXT_MAIN,
    COLOR_TEXT_MUTED,
    COLOR_CARD,
    BORDER_RADIUS_CARD,
)
from filterdesk.domain.filters import Filter
from filterdesk.engine.query import to_query_string


class ActiveFilterBanner(ft.Container):
    def __init__(self, filter: Filter, match_count: int | None, on_clear_callback):
        super().__init__()
        self.saved_filter = filter
        self.match_count = match_count
        self.on_clear_callback = on_clear_callback

        self.padding = ft.Padding.symmetric(horizontal=14, vertical=10)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.border = ft.border.all(1, COLOR_ACTIVE)
        self.shadow = ft.BoxShadow(
            blur_radius=2,
            color=ft.Colors.BLACK12,
            offset=ft.Offset(0, 1),
        )
        self.content = self._build_content()

    def _build_content(self):
        count_text = "" if self.match_count is None else f"  ・  {self.match_count} 件一致"
        return ft.Row(
            controls=[
                ft.Icon(ft.Icons.FILTER_ALT, color=COLOR_ACTIVE, size=16),
                ft.Column(
                    controls=[
                        ft.Text(
                            f"フィルタ適用中: {self.saved_filter.name}{count_text}",
                            size=13,
                            weight=ft.FontWeight.W_600,
                            color=COLOR_TEXT_MAIN,
                        ),
                        ft.Text(
                            to_query_string(self.saved_filter) or "(条件なし)",
                            size=12,
                            color=COLOR_TEXT_MUTED,
                            font_family="monospace",
                        ),
                    ],
                    spacing=2,
                    expand=True,
                ),
                ft.IconButton(
                    icon=ft.Icons.CLOSE,
                    tooltip="フィルタを解除",
                    on_click=lambda e: self.on_clear_callback(),
                ),
            ],
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )
