"""
ui_state.py - UI state container
"""


class AppState:
    def __init__(self):
        self.issues: list[dict] = []  # records the results panel filters
        self.issues_path: str | None = None
        self.show_results: bool = True
