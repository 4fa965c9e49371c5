# qdhex/__about__.py

APP_NAME        = "qdhex"
APP_TITLE       = "Quick & Dirty Hex Dumps"   # long name / CLI description
AUTHOR          = "Wired Square"
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
