"""
navigation
~~~~~~~~~~
Push / pop page stack. The root page is never popped.
"""
from __future__ import annotations

from PySide6.QtWidgets import QStackedWidget, QWidget


class NavigationStack(QStackedWidget):
    def __init__(self, root: QWidget, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.addWidget(root)

    @property
    def root(self) -> QWidget:
        return self.widget(0)

    @property
    def top(self) -> QWidget:
        return self.currentWidget()

    def push(self, page: QWidget) -> None:
        self.addWidget(page)
        self.setCurrentWidget(page)

    def pop(self) -> QWidget | None:
        if self.count() <= 1:
            return None
        page = self.widget(self.count() - 1)
        self.removeWidget(page)
        self.setCurrentIndex(self.count() - 1)
        if hasattr(page, "dispose"):
            page.dispose()
        page.deleteLater()
        return page

    def dispose(self) -> None:
        for i in range(self.count()):
            page = self.widget(i)
            if hasattr(page, "dispose"):
                page.dispose()
