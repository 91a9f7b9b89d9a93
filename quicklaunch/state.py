"""Launcher state shared by the engine and the window."""
import logging

from .desktop import load_catalog
from .launch import launch_application
from .ranking import search
from .usage import load_usage, record_launch

logger = logging.getLogger(__name__)


class LauncherState:

    def __init__(self, catalog, style, config_path, home_dir=None):
        self.catalog = catalog
        self.style = style
        self.config_path = config_path
        self.home_dir = home_dir
        self.query = ""
        self.results = []
        self.selected = 0

    @classmethod
    def from_config(cls, config):
        catalog = load_catalog(config.app_dirs)
        style = load_usage(config.config_file, catalog)
        return cls(catalog, style, config.config_file, home_dir=config.home_dir)

    def set_query(self, text):
        self.query = text
        self.results = search(text, self.catalog)
        if self.selected >= len(self.results):
            self.selected = 0
        return self.results

    def move_selection(self, delta):
        if not self.results:
            self.selected = 0
            return self.selected
        self.selected = (self.selected + delta) % len(self.results)
        return self.selected

    def result_applications(self):
        return [(self.catalog.get(r.app_id), r.score) for r in self.results]

    def selected_application(self):
        if not self.results:
            return None
        return self.catalog.get(self.results[self.selected].app_id)

    def launch_selected(self, launcher=launch_application):
        """Start the selected application and persist its new launch count.

        Returns the application, or None when there is nothing to launch.
        """
        app = self.selected_application()
        if app is None:
            return None
        launcher(app, cwd=self.home_dir)
        record_launch(self.config_path, self.catalog, app.id, self.style)
        return app
