"""OnTask - aggregate markdown checkboxes from daily notes, folders and streams."""

__version__ = "0.1.0"
