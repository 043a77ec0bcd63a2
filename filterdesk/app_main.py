"""
app_main.py - FilterDesk メインアプリケーション
FilterDesk v0.1
"""

import logging

import flet as ft

from filterdesk.config import APP_TITLE, APP_VERSION, COLOR_BG, COLOR_PRIMARY, ISSUES_PATH
from filterdesk.domain.filters import Filter
from filterdesk.services import filter_service
from filterdesk.services.filter_store import FilterStore
from filterdesk.services.issue_source import load_issues
from filterdesk.ui import actions, views
from filterdesk.ui_state import AppState

logger = logging.getLogger(__name__)


def main(page: ft.Page):
    page.title = f"{APP_TITLE} v{APP_VERSION}"
    page.theme_mode = ft.ThemeMode.LIGHT
    page.bgcolor = COLOR_BG
    page.padding = 0
    page.theme = ft.Theme(color_scheme_seed=COLOR_PRIMARY)

    store = FilterStore.open()
    state = AppState()
    state.issues_path = ISSUES_PATH
    state.issues = load_issues(state.issues_path)
    logger.info(
        "Loaded %d saved filters and %d issues", len(store.get_saved()), len(state.issues)
    )

    def show_error(message: str):
        page.snack_bar = ft.SnackBar(ft.Text(message))
        page.snack_bar.open = True
        page.update()

    def open_builder(filter: Filter | None):
        actions.show_filter_builder_dialog(page, store, filter, lambda _saved: refresh())

    def handle_apply(filter: Filter):
        try:
            filter_service.activate_filter(store, filter.id)
        except ValueError as e:
            show_error(str(e))
            return
        refresh()

    def handle_clear():
        filter_service.clear_active_filter(store)
        refresh()

    def handle_delete(filter: Filter):
        def confirm(target: Filter):
            store.delete(target.id)
            refresh()

        actions.show_delete_filter_dialog(page, filter, confirm)

    def refresh():
        page.views.clear()
        page.views.append(
            views.build_manager_view(
                state=state,
                store=store,
                on_new_filter=lambda: open_builder(None),
                on_edit_filter=open_builder,
                on_apply_filter=handle_apply,
                on_clear_active=handle_clear,
                on_delete_filter=handle_delete,
            )
        )
        page.update()

    refresh()
