import sys
import os
import logging
from PySide6.QtWidgets import QApplication
from settings import SettingsManager
from ui.editor_window import EditorWindow


def setup_logging(app_dir):
    logging.basicConfig(
        filename=os.path.join(app_dir, "autopaste.log"),
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    app = QApplication(sys.argv)
    home_dir = os.path.expanduser("~")
    app_dir = os.path.join(home_dir, "Autopaste")
    if not os.path.exists(app_dir):
        os.makedirs(app_dir)
    setup_logging(app_dir)

    settings_file = os.path.join(app_dir, "settings.json")
    settings = SettingsManager.load_settings(settings_file)
    if not os.path.exists(settings_file):
        SettingsManager.save_settings(settings, settings_file)

    window = EditorWindow(settings, app_dir)
    window.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
