from dataclasses import dataclass, field


@dataclass
class Keyword:
    word: str
    weight: int


@dataclass
class Application:
    id: str
    name: str = ""
    generic_name: str = ""
    comment: str = ""
    command_line: str = ""
    keywords: list = field(default_factory=list)
    launch_count: int = 0


@dataclass(frozen=True)
class Result:
    app_id: str
    score: int


class Catalog:
    """Ordered set of applications keyed by descriptor path."""

    def __init__(self, apps=()):
        self._apps = []
        self._index = {}
        for app in apps:
            self.add(app)

    def add(self, app):
        # Same id twice (overlapping directories): the later one replaces
        # the earlier one but keeps its position.
        pos = self._index.get(app.id)
        if pos is None:
            self._index[app.id] = len(self._apps)
            self._apps.append(app)
        else:
            self._apps[pos] = app

    def get(self, app_id):
        pos = self._index.get(app_id)
        return None if pos is None else self._apps[pos]

    def __iter__(self):
        return iter(self._apps)

    def __len__(self):
        return len(self._apps)

    def __contains__(self, app_id):
        return app_id in self._index
