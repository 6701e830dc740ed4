"""Archive file extension classification.

Maps a filename to the archive's file format code and a processing flag:
``P`` when the archive converts the file before storage, ``A`` when it is
accepted as-is. Unknown or missing extensions map to ``UF``.
"""

from typing import Dict, Tuple

UNKNOWN_FORMAT = "UF"
CONVERT_FLAG = "P"
ACCEPT_FLAG = "A"

FILE_EXTENSIONS_TO_CONVERT = (
    "PDF",
    "JPG",
    "EML",
    "JPEG",
    "XLSX",
    "XLS",
    "RTF",
    "MSG",
    "PPT",
    "PPTX",
    "DOCX",
    "DOC",
    "HTML",
    "HTM",
    "TIFF",
)

VALID_FILE_EXTENSIONS = (
    "UF",
    "DOC",
    "XLS",
    "PPT",
    "MPP",
    "RTF",
    "TIF",
    "PDF",
    "TXT",
    "HTM",
    "JPG",
    "MSG",
    "DWF",
    "ZIP",
    "DWG",
    "ODT",
    "ODS",
    "ODG",
    "XML",
    "DOCX",
    "EML",
    "MHT",
    "XLSX",
    "PPTX",
    "GIF",
    "ONE",
    "DOCM",
    "SOI",
    "MPEG-2",
    "MP3",
    "XLSB",
    "PPTM",
    "VSD",
    "VSDX",
    "XLSM",
    "SOS",
    "HTML",
    "PNG",
    "MOV",
    "PPSX",
    "WMV",
    "XPS",
    "JPEG",
    "TIFF",
    "MP4",
    "WAV",
    "PUB",
    "BMP",
    "IFC",
    "KOF",
    "VGT",
    "GSI",
    "GML",
    "cfb",
    "26",
    "2",
    "hiec",
    "md",
)

# Lookups keyed by casefolded extension
_VALID_BY_KEY: Dict[str, str] = {ext.casefold(): ext for ext in VALID_FILE_EXTENSIONS}
_CONVERT_KEYS = frozenset(ext.casefold() for ext in FILE_EXTENSIONS_TO_CONVERT)


def _extract_extension(filename: str) -> str:
    """Return the text after the last dot of the final path component."""
    name = filename.replace("\\", "/").rsplit("/", 1)[-1]
    dot = name.rfind(".")
    if dot == -1:
        return ""
    return name[dot + 1 :]


def get_file_extension(filename: str) -> Tuple[str, str]:
    """Classify a filename into (archive format code, processing flag).

    Matching is case-insensitive; recognised extensions are returned in the
    spelling the archive's format table uses.

    >>> get_file_extension("report.pdf")
    ('PDF', 'P')
    >>> get_file_extension("notes")
    ('UF', 'A')
    """
    extension = _extract_extension(filename)
    if not extension:
        return UNKNOWN_FORMAT, ACCEPT_FLAG

    normalized = _VALID_BY_KEY.get(extension.casefold(), UNKNOWN_FORMAT)
    flag = CONVERT_FLAG if normalized.casefold() in _CONVERT_KEYS else ACCEPT_FLAG
    return normalized, flag
