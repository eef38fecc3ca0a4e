"""Shared constants for mdnav."""

MDNAV_HOME_EXT = ".mdnav"
MDNAV_HOME_ENV = "MDNAV_HOME"
CONFIG_FILENAME = "config.json"
LOG_FILENAME = "mdnav.log"

DEFAULT_IMPLICIT_EXTENSION = ".md"

# Top-level domains that make a bare "name.tld" count as a URL. Kept free of
# common file extensions so "report.pdf" or "notes.md" stay filenames.
BARE_URL_TLDS = frozenset(
    {
        "com", "org", "net", "edu", "gov", "mil", "int", "io", "dev", "app",
        "info", "biz", "co", "me", "us", "uk", "de", "fr", "ca", "au", "jp",
        "cn", "nl", "eu", "ch", "se", "no", "es", "it", "ru", "in", "br",
    }
)
