from PySide6.QtWidgets import QDialog, QVBoxLayout, QCheckBox, QLabel, QLineEdit, QComboBox, QPushButton, QHBoxLayout, QFileDialog, QMessageBox, QSpinBox, QDoubleSpinBox
import re

from settings import WIKIPEDIA_CITATION_PATTERN

CUE_CHOICES = ["beep", "flash", "none"]


class SettingsDialog(QDialog):
    def __init__(self, current_settings, plugin_manager=None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("auto-paste settings")
        self.current_settings = current_settings.copy()
        self.plugin_manager = plugin_manager
        self.plugin_checkboxes = {}
        self.setupUI()

    def setupUI(self):
        layout = QVBoxLayout()

        color_label = QLabel("cursor color while running (empty = unchanged):")
        self.cursor_color_field = QLineEdit(self.current_settings.get("cursor_color") or "")
        layout.addWidget(color_label)
        layout.addWidget(self.cursor_color_field)

        sound_label = QLabel("feedback cue (beep, flash, none or a .wav file):")
        self.sound_combo = QComboBox()
        self.sound_combo.setEditable(True)
        self.sound_combo.addItems(CUE_CHOICES)
        self.sound_combo.setCurrentText(self.current_settings.get("sound") or "none")
        self.sound_browse_button = QPushButton("browse")
        self.sound_browse_button.clicked.connect(self.browse_sound)
        sound_layout = QHBoxLayout()
        sound_layout.addWidget(self.sound_combo)
        sound_layout.addWidget(self.sound_browse_button)
        layout.addWidget(sound_label)
        layout.addLayout(sound_layout)

        interval_label = QLabel("polling interval (seconds):")
        self.interval_spin = QDoubleSpinBox()
        self.interval_spin.setDecimals(2)
        self.interval_spin.setRange(0.1, 3600)
        self.interval_spin.setValue(float(self.current_settings.get("interval_seconds", 2)))
        layout.addWidget(interval_label)
        layout.addWidget(self.interval_spin)

        timeout_label = QLabel("switch off after idle minutes (0 = never):")
        self.timeout_spin = QDoubleSpinBox()
        self.timeout_spin.setDecimals(2)
        self.timeout_spin.setRange(0, 24 * 60)
        self.timeout_spin.setValue(float(self.current_settings.get("timeout_minutes") or 0))
        layout.addWidget(timeout_label)
        layout.addWidget(self.timeout_spin)

        self.trim_checkbox = QCheckBox("trim leading whitespace")
        self.trim_checkbox.setChecked(self.current_settings.get("trim_leading_whitespace", True))
        layout.addWidget(self.trim_checkbox)

        pattern_label = QLabel("remove pattern (regular expression, empty = keep everything):")
        self.pattern_field = QLineEdit(self.current_settings.get("remove_pattern") or "")
        self.pattern_reset_button = QPushButton("wikipedia citations")
        self.pattern_reset_button.clicked.connect(
            lambda: self.pattern_field.setText(WIKIPEDIA_CITATION_PATTERN)
        )
        pattern_layout = QHBoxLayout()
        pattern_layout.addWidget(self.pattern_field)
        pattern_layout.addWidget(self.pattern_reset_button)
        layout.addWidget(pattern_label)
        layout.addLayout(pattern_layout)

        newlines_label = QLabel("newlines after each paste:")
        self.newlines_spin = QSpinBox()
        self.newlines_spin.setRange(0, 20)
        self.newlines_spin.setValue(int(self.current_settings.get("trailing_newlines", 2)))
        layout.addWidget(newlines_label)
        layout.addWidget(self.newlines_spin)

        if self.plugin_manager is not None and self.plugin_manager.plugins:
            layout.addWidget(QLabel("transform plugins:"))
            for plugin_name, plugin in self.plugin_manager.plugins.items():
                checkbox = QCheckBox(f"{plugin.name} v{plugin.version}")
                checkbox.setToolTip(f"{plugin.description} (by {plugin.author})")
                checkbox.setChecked(plugin.enabled)
                layout.addWidget(checkbox)
                self.plugin_checkboxes[plugin_name] = checkbox

        self.save_button = QPushButton("save settings")
        self.save_button.clicked.connect(self.save_settings)
        layout.addWidget(self.save_button)

        self.setLayout(layout)

    def browse_sound(self):
        sound_file, _ = QFileDialog.getOpenFileName(self, "select sound file", "", "sound files (*.wav)")
        if sound_file:
            self.sound_combo.setCurrentText(sound_file)

    def save_settings(self):
        remove_pattern = self.pattern_field.text().strip()
        try:
            re.compile(remove_pattern)
        except re.error as e:
            QMessageBox.warning(self, "auto-paste settings", f"invalid remove pattern: {e}")
            return

        sound = self.sound_combo.currentText().strip()
        if sound.lower() == "none":
            sound = ""

        disabled_plugins = [
            name for name, checkbox in self.plugin_checkboxes.items() if not checkbox.isChecked()
        ]
        if self.plugin_manager is not None:
            for name, checkbox in self.plugin_checkboxes.items():
                if checkbox.isChecked():
                    self.plugin_manager.enable_plugin(name)
                else:
                    self.plugin_manager.disable_plugin(name)

        # update settings, empty values switch the option off
        self.current_settings.update({
            "cursor_color": self.cursor_color_field.text().strip() or None,
            "sound": sound or None,
            "interval_seconds": self.interval_spin.value(),
            "timeout_minutes": self.timeout_spin.value() or None,
            "trim_leading_whitespace": self.trim_checkbox.isChecked(),
            "remove_pattern": remove_pattern or None,
            "trailing_newlines": self.newlines_spin.value(),
            "disabled_plugins": disabled_plugins,
        })
        self.accept()
