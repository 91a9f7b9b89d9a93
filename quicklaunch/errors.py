class LauncherError(Exception):
    pass


class ConfigWriteError(LauncherError):
    """The launch count / style file could not be written."""

    def __init__(self, path, cause):
        super().__init__(f"cannot write {path}: {cause}")
        self.path = path
        self.cause = cause


class LaunchError(LauncherError):
    pass
