"""File and path helpers with the behaviour of the graphics library's file utilities."""

import os
from pathlib import Path

from zappygui.text import text_split, text_to_lower

_SEPARATORS = ("/", "\\")


class FileData:
    """Binary contents of a file."""

    def __init__(self, file_name=None):
        self.data = None
        self.bytes_read = 0
        if file_name is not None:
            self.load(file_name)

    def load(self, file_name):
        """Read the whole file as bytes, replacing any previous contents."""
        self.unload()
        self.data = Path(file_name).read_bytes()
        self.bytes_read = len(self.data)

    def unload(self):
        """Drop the loaded contents."""
        self.data = None
        self.bytes_read = 0

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.unload()
        return False


class FileText:
    """Text contents of a file."""

    def __init__(self, file_name=None):
        self.data = None
        self.length = 0
        if file_name is not None:
            self.load(file_name)

    def load(self, file_name):
        """Read the whole file as text."""
        self.data = load_file_text(file_name)
        self.length = len(self.data)

    def unload(self):
        """Drop the loaded contents."""
        self.data = None
        self.length = 0

    def __str__(self):
        return self.data or ""

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.unload()
        return False


def load_file_text(file_name):
    """Return the text contents of a file."""
    return Path(file_name).read_text()


def save_file_text(file_name, text):
    """Write ``text`` to a file, replacing its contents."""
    Path(file_name).write_text(text)


def file_exists(file_name):
    """Return True if the path exists."""
    return os.path.exists(file_name)


def directory_exists(dir_path):
    """Return True if the path is an existing directory."""
    return os.path.isdir(dir_path)


def is_file_extension(file_name, ext):
    """Check the extension case-insensitively; ``ext`` may list several separated by ';'."""
    file_ext = get_file_extension(file_name)
    if not file_ext:
        return False
    wanted = text_to_lower(file_ext)
    return any(wanted == text_to_lower(candidate) for candidate in text_split(ext, ";"))


def get_file_extension(file_name):
    """Return the text from the last '.' on, or "" when there is none or it is first."""
    dot = file_name.rfind(".")
    if dot <= 0:
        return ""
    return file_name[dot:]


def _last_separator(path):
    return max(path.rfind(sep) for sep in _SEPARATORS)


def get_file_name(file_path):
    """Return the part of the path after the last separator."""
    return file_path[_last_separator(file_path) + 1:]


def get_file_name_without_ext(file_path):
    """Return the file name with its last extension removed; a leading dot is kept."""
    name = get_file_name(file_path)
    dot = name.rfind(".")
    return name[:dot] if dot > 0 else name


def get_directory_path(file_path):
    """Return the directory part of a path; relative paths are prefixed with './'."""
    absolute = (len(file_path) > 1 and file_path[1] == ":") or file_path.startswith(_SEPARATORS)
    prefix = "" if absolute else "./"
    last = _last_separator(file_path)
    if last == -1:
        return prefix
    if last == 0:
        return file_path[0]
    return prefix + file_path[:last]


def get_prev_directory_path(dir_path):
    """Return the parent directory, keeping a root such as '/' or 'C:\\'."""
    if len(dir_path) <= 3:
        return dir_path
    last = _last_separator(dir_path)
    if last == -1:
        return ""
    if last == 0 or (last == 2 and dir_path[1] == ":"):
        last += 1
    return dir_path[:last]


def get_working_directory():
    """Return the current working directory."""
    return os.getcwd()


def load_directory_files(dir_path):
    """Return 'dir_path/name' for every entry of a directory, in listing order."""
    return [f"{dir_path}/{name}" for name in os.listdir(dir_path)]


def change_directory(directory):
    """Change the current working directory."""
    os.chdir(directory)


def get_file_mod_time(file_name):
    """Return the last modification time in whole seconds since the epoch."""
    return int(os.stat(file_name).st_mtime)