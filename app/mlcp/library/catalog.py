"""Static file type catalogs for music library classification.

This module defines the extension tables for music, other audio and
document files, the folder-level album art names, and the functions
that turn a keep policy into the sets used by the classifier.
"""

from mlcp.library.models import KeepPolicy

# File extensions typically associated with music/album files.
MUSIC_FILE_TYPES: tuple[str, ...] = (
    "aac",
    "aiff",
    "ape",
    "dff",
    "dsd",
    "dsf",
    "dxd",
    "flac",
    "iso",
    "m4a",
    "m4p",
    "mp3",
    "oga",
    "ogg",
    "wav",
    "wma",
    "wmv",
)

# Non-music audio formats (audiobooks, voice recorders, telephony, ...).
OTHER_AUDIO_FILE_TYPES: tuple[str, ...] = (
    "3gp",
    "aa",
    "aax",
    "act",
    "amr",
    "au",
    "awb",
    "dct",
    "dss",
    "dvf",
    "gsm",
    "iklax",
    "ivs",
    "m4b",
    "mmf",
    "mpc",
    "msv",
    "mogg",
    "opus",
    "ra",
    "rm",
    "raw",
    "sln",
    "tta",
    "vox",
    "wmv",
    "wv",
    "webm",
)

# Other audio kept alongside music; "wmv" is already a music type.
OTHER_AUDIO_KEEP_TYPES: tuple[str, ...] = tuple(
    ext for ext in OTHER_AUDIO_FILE_TYPES if ext not in MUSIC_FILE_TYPES
)

# Common document/booklet file extensions.
DOCUMENT_FILE_TYPES: tuple[str, ...] = ("txt", "pdf")

# Album art file names (folder level).
ALBUM_ART_FILENAMES: tuple[str, ...] = (
    "album",
    "cover",
    "small_cover",
    "large_cover",
    "folder",
    "thumb",
    "albumartsmall",
    "albumartmedium",
    "albumartlarge",
)

# Album art extensions (folder level).
ALBUM_ART_EXTENSIONS: tuple[str, ...] = ("jpg", "jpeg", "png")


def build_keep_extensions(policy: KeepPolicy) -> frozenset[str]:
    """Build the set of file extensions a policy keeps.

    Music extensions are always included. Other audio and document
    extensions are added when the policy keeps them.

    Args:
        policy: Keep policy for the run.

    Returns:
        Lowercase extensions (without the leading dot).
    """
    extensions = set(MUSIC_FILE_TYPES)
    if policy.keep_other_audio:
        extensions.update(OTHER_AUDIO_KEEP_TYPES)
    if policy.keep_documents:
        extensions.update(DOCUMENT_FILE_TYPES)
    return frozenset(extensions)


def build_art_keep_set(delete_art: bool) -> frozenset[str]:
    """Build the set of album art file names to keep.

    Args:
        delete_art: If True, album art is purged and the set is empty.

    Returns:
        Lowercase "name.ext" file names.
    """
    if delete_art:
        return frozenset()
    return frozenset(
        f"{name}.{ext}" for name in ALBUM_ART_FILENAMES for ext in ALBUM_ART_EXTENSIONS
    )


def catalog_groups() -> list[tuple[str, tuple[str, ...], bool]]:
    """List the extension tables for display.

    Returns:
        (label, extensions, kept_by_default) triples in display order.
    """
    return [
        ("Music file types", MUSIC_FILE_TYPES, True),
        ("Audio file types", OTHER_AUDIO_FILE_TYPES, False),
        ("Document/booklet file types", DOCUMENT_FILE_TYPES, False),
    ]
