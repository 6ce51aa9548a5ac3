from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QPlainTextEdit, QApplication, QSystemTrayIcon, QMenu, QStyle, QDialog, QMessageBox
from PySide6.QtGui import QAction, QKeySequence
import os
import re
import logging
from settings import SettingsManager
from clipboard_watcher import ClipboardWatcher, TOGGLE_ACTION
from qt_services import QtClipboardReader, QtScheduler
from ui.settings_dialog import SettingsDialog
from plugins.plugin_manager import PluginManager
from notifications.notification_manager import NotificationManager

logger = logging.getLogger(__name__)

TOGGLE_SHORTCUT = "Ctrl+Alt+V"


class EditorWindow(QMainWindow):
    """Plain text editor that receives auto-pasted clipboard text.

    The window is the watcher's insertion sink, cursor and key-binding
    lookup; the notification manager gives the feedback.
    """

    def __init__(self, settings, app_dir):
        super().__init__()
        self.settings = settings
        self.app_dir = app_dir
        self._allow_exit = False
        self._cursor_color = None

        # init managers
        self.plugin_manager = PluginManager(
            os.path.join(app_dir, "plugins"), self.settings.get("disabled_plugins", [])
        )
        self.notification_manager = NotificationManager()
        self.scheduler = QtScheduler()

        self.tray_icon = None
        if QSystemTrayIcon.isSystemTrayAvailable():
            self.tray_icon = QSystemTrayIcon(self)
            self.tray_icon.setIcon(self.style().standardIcon(QStyle.SP_FileIcon))
            self.notification_manager.set_tray_icon(self.tray_icon)

        self.editor = QPlainTextEdit()
        self.actions_by_name = {}

        self.initUI()
        self.notification_manager.set_window(self, self.statusBar())

        self.plugin_manager.plugin_loaded.connect(self.on_plugin_loaded)
        self.plugin_manager.scan_plugins()

        self.watcher = ClipboardWatcher(
            QtClipboardReader(),
            sink=self,
            feedback=self.notification_manager,
            scheduler=self.scheduler,
            settings=self.settings,
            bindings=self,
            cursor=self,
            plugin_manager=self.plugin_manager,
        )

    def initUI(self):
        self.setWindowTitle("autopaste")
        self.setGeometry(100, 100, 700, 500)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout()
        layout.addWidget(self.editor)
        central_widget.setLayout(layout)

        toggle_action = QAction("toggle auto-paste", self)
        toggle_action.setShortcut(QKeySequence(TOGGLE_SHORTCUT))
        toggle_action.triggered.connect(self.toggle_watcher)
        self.actions_by_name[TOGGLE_ACTION] = toggle_action

        settings_action = QAction("settings", self)
        settings_action.triggered.connect(self.open_settings)
        self.actions_by_name["settings"] = settings_action

        exit_action = QAction("exit", self)
        exit_action.setShortcuts(QKeySequence.Quit)
        exit_action.triggered.connect(self.exit_app)
        self.actions_by_name["exit"] = exit_action

        menu = self.menuBar().addMenu("auto-paste")
        menu.addAction(toggle_action)
        menu.addAction(settings_action)
        menu.addSeparator()
        menu.addAction(exit_action)

        if self.tray_icon is not None:
            tray_menu = QMenu(self)
            restore_action = QAction("restore", self)
            restore_action.triggered.connect(self.showNormal)
            tray_menu.addAction(restore_action)
            tray_menu.addAction(toggle_action)
            tray_menu.addAction(exit_action)
            self.tray_icon.setContextMenu(tray_menu)
            self.tray_icon.activated.connect(self.on_tray_icon_activated)
            self.tray_icon.show()

    def closeEvent(self, event):
        if self._allow_exit or self.tray_icon is None:
            self.shutdown()
            event.accept()
        else:
            event.ignore()
            self.hide()

    def shutdown(self):
        if self.watcher.running:
            self.watcher.stop()

    def exit_app(self):
        self._allow_exit = True
        self.close()
        QApplication.quit()

    def on_tray_icon_activated(self, reason):
        if reason == QSystemTrayIcon.DoubleClick:
            self.showNormal()
            self.activateWindow()

    def on_plugin_loaded(self, plugin_name):
        plugin = self.plugin_manager.get_plugin(plugin_name)
        self.statusBar().showMessage(f"loaded plugin {plugin.name} v{plugin.version} by {plugin.author}", 5000)

    def toggle_watcher(self):
        self.watcher.toggle()

    # --- collaborators used by the clipboard watcher ---
    def insert_at_cursor(self, text):
        self.editor.insertPlainText(text)
        self.editor.ensureCursorVisible()

    def describe_bindings_for(self, action_name):
        action = self.actions_by_name.get(action_name)
        if action is None:
            return ""
        return ", ".join(
            shortcut.toString(QKeySequence.NativeText) for shortcut in action.shortcuts()
        )

    def cursor_color(self):
        return self._cursor_color

    def set_cursor_color(self, color):
        # the editor frame shows the cursor color, None restores the style default
        self._cursor_color = color
        if color:
            self.editor.setStyleSheet(f"QPlainTextEdit {{ border: 2px solid {color}; }}")
        else:
            self.editor.setStyleSheet("")

    def open_settings(self):
        dialog = SettingsDialog(self.settings, self.plugin_manager, self)
        if dialog.exec() == QDialog.Accepted:
            try:
                self.watcher.apply_settings(dialog.current_settings)
            except re.error as e:
                QMessageBox.warning(self, "auto-paste settings", f"invalid remove pattern: {e}")
                return
            self.settings = dialog.current_settings

            settings_path = os.path.join(self.app_dir, "settings.json")
            SettingsManager.save_settings(self.settings, settings_path)
            logger.info("settings saved to %s", settings_path)
