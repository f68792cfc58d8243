"""Theme contrast dashboard panel.

Renders one row per role pair: the pair label, a sample cell painted with the
pair's own colors, the ratio, and a verdict badge. Scheme selection and the
large-text toggle rebuild the view model; the panel never mutates the theme.
"""

from __future__ import annotations

from PyQt6.QtGui import QBrush, QColor
from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from contrast import settings
from contrast.design.theme_pairs import ThemeColors
from contrast.viewmodels.contrast_dashboard_viewmodel import (
    ContrastDashboardViewModel,
    DashboardRow,
)

__all__ = ["ContrastDashboardPanel"]

_BADGE_BACKGROUND = "#212121"
_COLUMNS = ("Pair", "Sample", "Ratio", "Verdict")


class ContrastDashboardPanel(QWidget):
    def __init__(self, theme: ThemeColors, scheme: str | None = None) -> None:
        super().__init__()
        self.setObjectName("contrastDashboardPanel")
        self._theme = theme
        schemes = theme.scheme_names()
        self._vm = ContrastDashboardViewModel(theme, scheme=scheme or schemes[0])

        layout = QVBoxLayout(self)
        title = QLabel(f"Contrast: {theme.name}")
        title.setObjectName("viewTitleLabel")
        layout.addWidget(title)

        row = QHBoxLayout()
        self.scheme_combo = QComboBox()
        self.scheme_combo.setObjectName("schemeCombo")
        for name in schemes:
            self.scheme_combo.addItem(name)
        self.scheme_combo.setCurrentText(self._vm.scheme)
        self.large_text_check = QCheckBox("Large text (3.0:1)")
        self.large_text_check.setObjectName("largeTextCheck")
        self.summary_label = QLabel()
        self.summary_label.setObjectName("summaryLabel")
        for w in (QLabel("Scheme:"), self.scheme_combo, self.large_text_check):
            row.addWidget(w)
        row.addStretch(1)
        row.addWidget(self.summary_label)
        layout.addLayout(row)

        self.table = QTableWidget(0, len(_COLUMNS))
        self.table.setObjectName("contrastTable")
        self.table.setHorizontalHeaderLabels(list(_COLUMNS))
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        layout.addWidget(self.table, 1)

        self.scheme_combo.currentTextChanged.connect(self._on_scheme_changed)  # type: ignore[arg-type]
        self.large_text_check.toggled.connect(self._on_large_text_toggled)  # type: ignore[arg-type]
        self.refresh()

    @property
    def view_model(self) -> ContrastDashboardViewModel:
        return self._vm

    def refresh(self) -> None:
        rows = self._vm.rows()
        self.table.setRowCount(len(rows))
        for idx, r in enumerate(rows):
            self._fill_row(idx, r)
        failing = sum(1 for r in rows if not r.result.passes)
        self.summary_label.setText(f"{len(rows) - failing}/{len(rows)} pass")

    def _fill_row(self, idx: int, row: DashboardRow) -> None:
        self.table.setItem(idx, 0, QTableWidgetItem(row.label))
        sample = QTableWidgetItem("Aa")
        sample.setForeground(QBrush(QColor(row.foreground)))
        sample.setBackground(QBrush(QColor(row.background)))
        self.table.setItem(idx, 1, sample)
        self.table.setItem(idx, 2, QTableWidgetItem(f"{row.result.ratio:.2f}:1"))
        badge = QTableWidgetItem(row.verdict_text)
        badge.setForeground(QBrush(QColor(row.label_color)))
        badge.setBackground(QBrush(QColor(_BADGE_BACKGROUND)))
        self.table.setItem(idx, 3, badge)

    def _on_scheme_changed(self, scheme: str) -> None:
        if not scheme or scheme == self._vm.scheme:
            return
        self._vm = self._vm.with_scheme(scheme)
        self.refresh()

    def _on_large_text_toggled(self, checked: bool) -> None:
        threshold = settings.WCAG_AA_LARGE if checked else settings.DEFAULT_THRESHOLD
        self._vm = self._vm.with_threshold(threshold)
        self.refresh()
