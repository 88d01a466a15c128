"""Small POSIX helpers for strings, files, /proc values, syncing, processes, telnet and terminals."""

__version__ = "2.6.1"
__all__ = [
    "strutil",
    "fileops",
    "procval",
    "rsync",
    "which",
    "process",
    "telnet",
    "progress",
    "yorn",
]