"""sshx: namespaced host configs and multi-host sessions on top of ssh."""

__version__ = "1.0.0"
