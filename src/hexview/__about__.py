# hexview/__about__.py

APP_NAME        = "Hexview"
APP_TITLE       = "Hex/Binary ⇆ Integer/Float Converter"   # long name / CLI description
AUTHOR          = "Hexview contributors"
COPYRIGHT_YEAR  = "2025"
COPYRIGHT       = f"© {COPYRIGHT_YEAR} {AUTHOR}"


__version__ = "0.1.0"

__all__ = [
    "__version__",
    "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT_YEAR", "COPYRIGHT",
]

def about_text() -> str:
    return (
        f"{APP_TITLE}\n"
        f"Version {__version__}\n"
        f"{COPYRIGHT}"
    )
