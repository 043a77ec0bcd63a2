import flet as ft
from filterdesk.config import (
    COLOR_ACTIVE,
    COLOR_CARD,
    COLOR_BORDER,
    COLOR_CODE_BG,
    COLOR_DANGER,
    COLOR_PRIMARY,
    COLOR_TEXT_MAIN,
    COLOR_TEXT_MUTED,
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
)
from filterdesk.domain.filters import Filter
from filterdesk.engine.query import to_query_string
from filterdesk.ui.helpers import active_color, condition_count_text


class FilterCard(ft.Container):
    """One saved filter: name, description, query preview and actions."""

    def __init__(self, filter: Filter, is_active: bool, on_apply, on_edit, on_delete):
        super().__init__()
        self.saved_filter = filter
        self.is_active = is_active
        self.on_apply = on_apply
        self.on_edit = on_edit
        self.on_delete = on_delete

        self.padding = ft.Padding.all(14)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.border = (
            ft.border.all(2, COLOR_ACTIVE) if is_active else ft.border.all(1, COLOR_BORDER)
        )
        self.content = self._build_content()

    def _build_header(self):
        return ft.Row(
            controls=[
                ft.Icon(
                    ft.Icons.CHECK_CIRCLE if self.is_active else ft.Icons.FILTER_LIST,
                    color=active_color(self.is_active),
                    size=18,
                ),
                ft.Text(
                    self.saved_filter.name,
                    size=15,
                    weight=ft.FontWeight.BOLD,
                    color=COLOR_TEXT_MAIN,
                    overflow=ft.TextOverflow.ELLIPSIS,
                    expand=True,
                ),
                ft.IconButton(
                    icon=ft.Icons.EDIT_NOTE,
                    icon_color=COLOR_PRIMARY,
                    tooltip="編集",
                    on_click=lambda e: self.on_edit(self.saved_filter),
                ),
                ft.IconButton(
                    icon=ft.Icons.DELETE_OUTLINE,
                    icon_color=COLOR_DANGER,
                    tooltip="削除",
                    on_click=lambda e: self.on_delete(self.saved_filter),
                ),
            ],
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )

    def _build_content(self):
        controls = [self._build_header()]
        if self.saved_filter.description:
            controls.append(ft.Text(self.saved_filter.description, size=12, color=COLOR_TEXT_MUTED))
        controls.append(
            ft.Container(
                content=ft.Text(
                    to_query_string(self.saved_filter),
                    size=12,
                    font_family="monospace",
                    selectable=True,
                ),
                bgcolor=COLOR_CODE_BG,
                border_radius=BORDER_RADIUS_BTN,
                padding=ft.Padding.symmetric(horizontal=10, vertical=6),
            )
        )
        controls.append(
            ft.Row(
                controls=[
                    ft.Text(condition_count_text(self.saved_filter), size=12, color=COLOR_TEXT_MUTED),
                    ft.Container(expand=True),
                    ft.OutlinedButton(
                        "適用中" if self.is_active else "適用",
                        icon=ft.Icons.CHECK if self.is_active else ft.Icons.PLAY_ARROW,
                        disabled=self.is_active,
                        on_click=lambda e: self.on_apply(self.saved_filter),
                    ),
                ],
                vertical_alignment=ft.CrossAxisAlignment.CENTER,
            )
        )
        return ft.Column(controls=controls, spacing=8)
