"""checklib: report stale CDN-hosted scripts and stylesheets in an HTML file."""

__version__ = "0.1.0"
