"""unity-package-sync — keep a Unity project's packages in step with package.json."""

__version__ = "0.1.0"
