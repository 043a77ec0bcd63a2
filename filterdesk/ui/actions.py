"""
actions.py - UI-side actions and dialogs
Single responsibility: handle modal flows that create, edit and delete filters.
"""

import flet as ft

from filterdesk.config import (
    COLOR_BORDER,
    COLOR_CODE_BG,
    COLOR_PRIMARY,
    COLOR_TEXT_MUTED,
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
    COLOR_DANGER,
)
from filterdesk.domain.fields import (
    FIELD_DEFINITIONS,
    field_options,
    operator_label,
    operators_for_field,
    value_placeholder,
)
from filterdesk.domain.filters import (
    Filter,
    FilterCondition,
    FilterLogic,
    FilterOperator,
    coerce_operator,
    is_valueless,
)
from filterdesk.engine.query import to_query_string
from filterdesk.services import filter_service
from filterdesk.services.filter_store import FilterStore
from filterdesk.ui.helpers import logic_label, parse_list_value

_LIST_OPERATORS = (FilterOperator.IN, FilterOperator.NOT_IN)


def _is_list_operator(operator) -> bool:
    return operator in _LIST_OPERATORS


def _value_text(value) -> str:
    if isinstance(value, list):
        return ", ".join(value)
    return value or ""


def _build_value_control(condition: FilterCondition, on_changed) -> ft.Control | None:
    """Input matching the field type; None when the operator takes no value."""
    if is_valueless(condition.operator):
        return None

    def on_text_change(e):
        raw = e.control.value or ""
        condition.value = parse_list_value(raw) if _is_list_operator(condition.operator) else raw
        on_changed(rebuild=False)

    options = field_options(condition.field)
    if options and not _is_list_operator(condition.operator):

        def on_option_select(e):
            condition.value = e.control.value or ""
            on_changed(rebuild=False)

        return ft.Dropdown(
            width=200,
            options=[ft.dropdown.Option(key="", text="Select...")]
            + [ft.dropdown.Option(key=o.value, text=o.label) for o in options],
            value=condition.value if isinstance(condition.value, str) else "",
            on_select=on_option_select,
            border_color=COLOR_BORDER,
            focused_border_color=COLOR_PRIMARY,
            border_radius=BORDER_RADIUS_BTN,
        )

    hint = value_placeholder(condition.field)
    if _is_list_operator(condition.operator):
        examples = ", ".join(o.value for o in options[:2])
        hint = f"カンマ区切り（例: {examples}）" if examples else "カンマ区切り"
    return ft.TextField(
        width=220,
        value=_value_text(condition.value),
        hint_text=hint,
        on_change=on_text_change,
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
    )


def _build_condition_row(working: Filter, index: int, on_changed) -> ft.Row:
    condition = working.conditions[index]

    def on_field_select(e):
        filter_service.change_field(condition, e.control.value)
        on_changed(rebuild=True)

    def on_operator_select(e):
        was_list = _is_list_operator(condition.operator)
        condition.operator = coerce_operator(e.control.value)
        if was_list != _is_list_operator(condition.operator):
            condition.value = ""
        on_changed(rebuild=True)

    def on_remove(_e):
        filter_service.remove_condition(working, index)
        on_changed(rebuild=True)

    operators = operators_for_field(condition.field)
    current_op = getattr(condition.operator, "value", condition.operator)
    if condition.operator not in operators:
        operators = [condition.operator, *operators]

    controls: list[ft.Control] = [
        ft.Text(f"{index + 1}", width=20, color=COLOR_TEXT_MUTED),
        ft.Dropdown(
            width=150,
            options=[ft.dropdown.Option(key=d.field.value, text=d.label) for d in FIELD_DEFINITIONS],
            value=getattr(condition.field, "value", condition.field),
            on_select=on_field_select,
            border_color=COLOR_BORDER,
            focused_border_color=COLOR_PRIMARY,
            border_radius=BORDER_RADIUS_BTN,
        ),
        ft.Dropdown(
            width=170,
            options=[
                ft.dropdown.Option(key=getattr(op, "value", op), text=operator_label(op))
                for op in operators
            ],
            value=current_op,
            on_select=on_operator_select,
            border_color=COLOR_BORDER,
            focused_border_color=COLOR_PRIMARY,
            border_radius=BORDER_RADIUS_BTN,
        ),
    ]
    value_control = _build_value_control(condition, on_changed)
    if value_control is not None:
        controls.append(value_control)
    controls.append(
        ft.IconButton(
            icon=ft.Icons.CLOSE,
            tooltip="条件を削除",
            on_click=on_remove,
        )
    )
    return ft.Row(controls=controls, vertical_alignment=ft.CrossAxisAlignment.CENTER)


def show_filter_builder_dialog(page: ft.Page, store: FilterStore, filter: Filter | None, on_saved):
    """Open the builder to create a filter (``filter=None``) or edit a saved one."""
    working = filter_service.edit_copy(filter) if filter else filter_service.new_filter()

    name_field = ft.TextField(
        label="フィルタ名 *",
        value=working.name,
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
    )
    description_field = ft.TextField(
        label="説明（任意）",
        value=working.description,
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
    )
    conditions_column = ft.Column(spacing=8, scroll=ft.ScrollMode.AUTO)
    preview_text = ft.Text("", size=12, font_family="monospace", selectable=True)
    preview_box = ft.Container(
        content=preview_text,
        bgcolor=COLOR_CODE_BG,
        border_radius=BORDER_RADIUS_BTN,
        padding=ft.Padding.symmetric(horizontal=10, vertical=6),
    )
    error_text = ft.Text("", color=COLOR_DANGER, size=12)

    def sync_header():
        working.name = name_field.value or ""
        working.description = description_field.value or ""

    def refresh(rebuild: bool = True):
        sync_header()
        if rebuild:
            conditions_column.controls = [
                _build_condition_row(working, i, refresh) for i in range(len(working.conditions))
            ]
            if not working.conditions:
                conditions_column.controls = [
                    ft.Text(
                        "条件がありません。「条件を追加」から作成してください",
                        color=COLOR_TEXT_MUTED,
                        size=12,
                    )
                ]
        preview_text.value = to_query_string(working)
        preview_box.visible = bool(working.conditions)
        save_button.disabled = not filter_service.is_valid(working)
        error_text.value = ""
        page.update()

    def on_logic_select(e):
        working.logic = FilterLogic(e.control.value)
        refresh(rebuild=False)

    logic_field = ft.Dropdown(
        label="一致条件",
        width=220,
        options=[ft.dropdown.Option(key=logic.value, text=logic_label(logic)) for logic in FilterLogic],
        value=getattr(working.logic, "value", working.logic),
        on_select=on_logic_select,
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
    )
    name_field.on_change = lambda e: refresh(rebuild=False)
    description_field.on_change = lambda e: refresh(rebuild=False)

    def on_add_condition(_e=None):
        filter_service.add_condition(working)
        refresh()

    def on_save(_e=None):
        sync_header()
        try:
            filter_service.save_filter(store, working)
        except ValueError as e:
            error_text.value = f"⚠  {e}"
            page.update()
            return
        dialog.open = False
        on_saved(working)
        page.update()

    def on_cancel(_e=None):
        dialog.open = False
        page.update()

    save_button = ft.FilledButton(
        "フィルタを保存",
        style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
        on_click=on_save,
    )

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text(
            "フィルタを編集" if filter else "新しいフィルタを作成",
            weight=ft.FontWeight.BOLD,
        ),
        content=ft.Container(
            content=ft.Column(
                controls=[
                    name_field,
                    description_field,
                    logic_field,
                    ft.Text("条件", weight=ft.FontWeight.W_600),
                    conditions_column,
                    ft.TextButton("条件を追加", icon=ft.Icons.ADD, on_click=on_add_condition),
                    ft.Text("クエリプレビュー", size=12, color=COLOR_TEXT_MUTED),
                    preview_box,
                    error_text,
                ],
                spacing=12,
                tight=True,
                scroll=ft.ScrollMode.AUTO,
            ),
            width=760,
        ),
        actions=[
            ft.TextButton("キャンセル", on_click=on_cancel),
            save_button,
        ],
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_CARD),
    )
    page.overlay.append(dialog)
    dialog.open = True
    refresh()


def show_delete_filter_dialog(page: ft.Page, filter: Filter, on_confirm):
    """Ask before deleting; deletion cannot be undone."""

    def on_delete(_e=None):
        dialog.open = False
        on_confirm(filter)
        page.update()

    def on_cancel(_e=None):
        dialog.open = False
        page.update()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("フィルタを削除", weight=ft.FontWeight.BOLD),
        content=ft.Text(f"フィルタ「{filter.name}」を削除しますか？この操作は取り消せません。"),
        actions=[
            ft.TextButton("キャンセル", on_click=on_cancel),
            ft.FilledButton(
                "削除",
                style=ft.ButtonStyle(bgcolor=COLOR_DANGER, color="white"),
                on_click=on_delete,
            ),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_CARD),
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()
