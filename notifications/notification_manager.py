from PySide6.QtWidgets import QApplication, QSystemTrayIcon
from PySide6.QtCore import QObject, QUrl, Signal
import logging
import os

logger = logging.getLogger(__name__)

BEEP = "beep"
FLASH = "flash"


class NotificationManager(QObject):
    # signal emitted for every informational message
    message_shown = Signal(str)
    cue_played = Signal(str)

    def __init__(self):
        super().__init__()
        self.tray_icon = None
        self.status_bar = None
        self.window = None
        self.sound_effect = None

    def set_tray_icon(self, tray_icon):
        self.tray_icon = tray_icon

    def set_window(self, window, status_bar=None):
        self.window = window
        self.status_bar = status_bar

    def show_message(self, message):
        logger.info(message)
        if self.status_bar is not None:
            self.status_bar.showMessage(message, 5000)
        # balloon only when the editor is tucked away in the tray
        if self.tray_icon and (self.window is None or not self.window.isVisible()):
            self.tray_icon.showMessage("autopaste", message, QSystemTrayIcon.Information, 3000)
        self.message_shown.emit(message)

    def play_cue(self, cue):
        if not cue:
            return
        if cue == BEEP:
            QApplication.beep()
        elif cue == FLASH:
            self.flash()
        elif os.path.exists(cue):
            self.play_sound_file(cue)
        else:
            logger.warning("sound file %s not found, beeping instead", cue)
            QApplication.beep()
        self.cue_played.emit(cue)

    def flash(self):
        if self.window is not None:
            QApplication.alert(self.window, 500)
        else:
            QApplication.beep()

    def play_sound_file(self, path):
        # QtMultimedia pulls in the audio backend, load it only when a file cue is used
        from PySide6.QtMultimedia import QSoundEffect

        if self.sound_effect is None:
            self.sound_effect = QSoundEffect(self)
        self.sound_effect.setSource(QUrl.fromLocalFile(os.path.abspath(path)))
        self.sound_effect.play()
