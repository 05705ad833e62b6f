"""
Filename classification and byte-size formatting.
"""

IMAGE_EXTENSIONS = frozenset(
    {"png", "bmp", "jpeg", "jpg", "gif", "svg", "xbm", "webp"}
)
AUDIO_EXTENSIONS = frozenset({"wav", "mp3"})
VIDEO_EXTENSIONS = frozenset(
    {"3gp", "3gpp", "avi", "flv", "mov", "mpeg", "mpeg4", "mp4", "ogg", "webm", "wmv"}
)

BYTE_UNITS = ("kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def file_extension(filename: str) -> str:
    """
    Get the lower-cased extension of a filename.

    Examples:
        >>> file_extension("test.TXT")
        'txt'
        >>> file_extension(".ignore.txt")
        'txt'
        >>> file_extension(".ignore")
        ''
        >>> file_extension("test..")
        ''
    """
    parts = filename.split(".")
    if len(parts) == 1 or (parts[0] == "" and len(parts) == 2):
        return ""
    return parts[-1].lower()


def file_type(filename: str) -> str | None:
    """Return ``"img"``, ``"audio"`` or ``"video"``, or None for anything else."""
    extension = file_extension(filename)
    if extension in IMAGE_EXTENSIONS:
        return "img"
    if extension in AUDIO_EXTENSIONS:
        return "audio"
    if extension in VIDEO_EXTENSIONS:
        return "video"
    return None


def human_size(size_in_bytes: float) -> str:
    """
    Convert a byte count into a human readable size.

    Values are shown with one decimal and never below ``0.1``. A unit is
    only escalated once the magnitude goes over 1024.

    Examples:
        >>> human_size(1)
        '0.1 kB'
        >>> human_size(1000)
        '1.0 kB'
        >>> human_size(1024 * 1024)
        '1024.0 kB'
        >>> human_size(1024 * 1024 + 1)
        '1.0 MB'
    """
    i = 0
    size = size_in_bytes / 1024
    while size > 1024 and i < len(BYTE_UNITS) - 1:
        size /= 1024
        i += 1
    return f"{max(size, 0.1):.1f} {BYTE_UNITS[i]}"
