"""
views.py - Page builders
Single responsibility: assemble the filter manager view from components.
"""

import flet as ft

from filterdesk.config import (
    APP_TITLE,
    COLOR_BG,
    COLOR_BORDER,
    COLOR_CARD,
    COLOR_PRIMARY,
    COLOR_TEXT_MAIN,
    COLOR_TEXT_MUTED,
    BORDER_RADIUS_CARD,
    RESULTS_PAGE_SIZE,
)
from filterdesk.domain.filters import Filter
from filterdesk.engine.evaluator import apply_filter
from filterdesk.services.filter_store import FilterStore
from filterdesk.services.issue_fields import issue_field
from filterdesk.ui.components.active_filter_banner import ActiveFilterBanner
from filterdesk.ui.components.filter_card import FilterCard
from filterdesk.ui.helpers import issue_summary


def build_appbar(saved_count: int) -> ft.AppBar:
    return ft.AppBar(
        title=ft.Text(APP_TITLE, color=COLOR_TEXT_MAIN, weight=ft.FontWeight.BOLD, size=20),
        bgcolor=COLOR_CARD,
        center_title=False,
        shadow_color=ft.Colors.BLACK12,
        automatically_imply_leading=False,
        actions=[
            ft.Container(
                content=ft.Text(f"保存済み {saved_count} 件", color=COLOR_TEXT_MUTED, size=14),
                padding=ft.Padding.only(right=24),
                alignment=ft.Alignment.CENTER_LEFT,
            ),
        ],
    )


def _build_results_panel(issues: list[dict], active: Filter | None) -> ft.Container:
    results = apply_filter(issues, active, issue_field)
    shown = results[:RESULTS_PAGE_SIZE]

    if not issues:
        body: list[ft.Control] = [
            ft.Text("Issue データがありません", color=COLOR_TEXT_MUTED, size=12),
        ]
    elif not results:
        body = [ft.Text("条件に一致する Issue はありません", color=COLOR_TEXT_MUTED, size=12)]
    else:
        body = [
            ft.Row(
                controls=[
                    ft.Icon(ft.Icons.ADJUST, size=14, color=COLOR_PRIMARY),
                    ft.Text(issue_summary(issue), size=13, overflow=ft.TextOverflow.ELLIPSIS),
                    ft.Container(expand=True),
                    ft.Text(str(issue.get("status") or ""), size=12, color=COLOR_TEXT_MUTED),
                ],
            )
            for issue in shown
        ]

    header = f"結果 {len(results)} / {len(issues)} 件" if active else f"全 Issue {len(issues)} 件"
    return ft.Container(
        content=ft.Column(
            controls=[ft.Text(header, weight=ft.FontWeight.W_600), *body],
            spacing=6,
        ),
        bgcolor=COLOR_CARD,
        border=ft.border.all(1, COLOR_BORDER),
        border_radius=BORDER_RADIUS_CARD,
        padding=ft.Padding.all(14),
    )


def build_manager_view(
    state,
    store: FilterStore,
    on_new_filter,
    on_edit_filter,
    on_apply_filter,
    on_clear_active,
    on_delete_filter,
) -> ft.View:
    saved = store.get_saved()
    active = store.get_active()

    header_row = ft.Row(
        controls=[
            ft.Text("保存済みフィルタ", size=22, weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN),
            ft.Container(expand=True),
            ft.FilledButton(
                "新しいフィルタ",
                icon=ft.Icons.ADD,
                style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
                on_click=lambda e: on_new_filter(),
            ),
        ],
        vertical_alignment=ft.CrossAxisAlignment.CENTER,
    )

    controls: list[ft.Control] = [header_row, ft.Container(height=12)]
    if active is not None:
        match_count = len(apply_filter(state.issues, active, issue_field)) if state.issues else None
        controls += [ActiveFilterBanner(active, match_count, on_clear_active), ft.Container(height=12)]

    if saved:
        controls += [
            FilterCard(
                f,
                is_active=active is not None and active.id == f.id,
                on_apply=on_apply_filter,
                on_edit=on_edit_filter,
                on_delete=on_delete_filter,
            )
            for f in saved
        ]
    else:
        controls.append(
            ft.Container(
                content=ft.Column(
                    controls=[
                        ft.Icon(ft.Icons.FILTER_ALT_OFF, size=32, color=COLOR_TEXT_MUTED),
                        ft.Text("保存済みフィルタはありません", color=COLOR_TEXT_MUTED),
                    ],
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                ),
                alignment=ft.Alignment.CENTER,
                padding=ft.Padding.all(24),
            )
        )

    if state.show_results:
        controls += [ft.Container(height=16), _build_results_panel(state.issues, active)]

    return ft.View(
        route="/",
        appbar=build_appbar(len(saved)),
        bgcolor=COLOR_BG,
        padding=ft.Padding.symmetric(horizontal=24, vertical=16),
        scroll=ft.ScrollMode.AUTO,
        controls=controls,
    )
