from PySide6.QtCore import QObject, QTimer
from PySide6.QtGui import QGuiApplication


class QtClipboardReader:
    def __init__(self, clipboard=None):
        self.clipboard = clipboard or QGuiApplication.clipboard()

    def text(self):
        # non-text clipboard contents come back as an empty string
        text = self.clipboard.text()
        return text or None


class QtScheduler(QObject):
    """Repeating timers on the Qt event loop; ticks never overlap."""

    def schedule_repeating(self, seconds, callback):
        timer = QTimer(self)
        timer.setInterval(max(50, int(seconds * 1000)))
        timer.timeout.connect(callback)
        timer.start()
        return timer

    def cancel(self, timer):
        if timer is None:
            return
        timer.stop()
        timer.deleteLater()
