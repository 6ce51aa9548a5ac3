import os
import importlib.util
import logging
from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)


class Plugin:
    def __init__(self, name, version, description, author):
        self.name = name
        self.version = version
        self.description = description
        self.author = author
        self.instance = None
        self.enabled = True


class PluginManager(QObject):
    # signals for plugin events
    plugin_loaded = Signal(str)  # plugin_name

    def __init__(self, plugins_dir, disabled=()):
        super().__init__()
        self.plugins_dir = plugins_dir
        self.disabled = set(disabled)
        self.plugins = {}

    def scan_plugins(self):
        if not os.path.exists(self.plugins_dir):
            os.makedirs(self.plugins_dir)

        # sorted so plugins are applied in a stable order
        for filename in sorted(os.listdir(self.plugins_dir)):
            if filename.endswith('.py') and not filename.startswith('__'):
                plugin_name = filename[:-3]
                if plugin_name not in self.plugins:
                    self.load_plugin(plugin_name, os.path.join(self.plugins_dir, filename))

    def load_plugin(self, plugin_name, path):
        try:
            spec = importlib.util.spec_from_file_location(f"autopaste_plugin_{plugin_name}", path)
            module = importlib.util.module_from_spec(spec)
            spec.loader.exec_module(module)

            plugin = Plugin(
                name=plugin_name,
                version=getattr(module, 'VERSION', '1.0.0'),
                description=getattr(module, 'DESCRIPTION', ''),
                author=getattr(module, 'AUTHOR', 'Unknown')
            )
            plugin.enabled = plugin_name not in self.disabled

            if hasattr(module, 'initialize'):
                plugin.instance = module.initialize()
        except Exception:
            logger.exception("failed to load plugin %s", plugin_name)
            return None

        self.plugins[plugin_name] = plugin
        logger.info("loaded plugin %s v%s", plugin_name, plugin.version)
        self.plugin_loaded.emit(plugin_name)
        return plugin

    def enable_plugin(self, name):
        plugin = self.plugins.get(name)
        if plugin and not plugin.enabled:
            plugin.enabled = True
            self.disabled.discard(name)
            return True
        return False

    def disable_plugin(self, name):
        plugin = self.plugins.get(name)
        if plugin and plugin.enabled:
            plugin.enabled = False
            self.disabled.add(name)
            return True
        return False

    def get_plugin(self, name):
        return self.plugins.get(name)

    def get_enabled_plugins(self):
        return [plugin for plugin in self.plugins.values() if plugin.enabled]

    def apply(self, text):
        """Run text through every enabled plugin's on_paste hook."""
        for plugin in self.get_enabled_plugins():
            if plugin.instance and hasattr(plugin.instance, 'on_paste'):
                try:
                    result = plugin.instance.on_paste(text)
                except Exception:
                    logger.exception("plugin %s failed, keeping its input text", plugin.name)
                    continue
                if result:
                    text = result
        return text
