"""mdnav API: classification, resolution and navigation commands."""
