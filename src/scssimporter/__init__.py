"""scssimporter — resolve SCSS imports to files, packages, and value manifests."""

__version__ = "0.3.0"
